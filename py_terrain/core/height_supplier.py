"""
Height suppliers feeding the mesh builder.

A height supplier maps integer grid coordinates to a scalar elevation.
The mesh builder only ever talks to this interface, so noise, flat ground
and heights loaded from data can be swapped freely.
"""

from abc import ABC, abstractmethod
from typing import Callable, Union

import numpy as np

HeightFunction = Callable[[int, int], float]


class HeightSupplier(ABC):
    """Single-method capability: evaluate(x, y) -> height."""

    @abstractmethod
    def evaluate(self, x: int, y: int) -> float:
        """Return the height at grid point (x, y)."""

    def sample_grid(self, width: int, length: int) -> np.ndarray:
        """
        Evaluate every lattice point covered by a width x length cell grid.

        Args:
            width: Number of cells along x
            length: Number of cells along y

        Returns:
            Array of shape (length + 1, width + 1) indexed [y, x]
        """
        heights = np.empty((length + 1, width + 1), dtype=np.float64)
        for y in range(length + 1):
            for x in range(width + 1):
                heights[y, x] = self.evaluate(x, y)
        return heights

    def __call__(self, x: int, y: int) -> float:
        return self.evaluate(x, y)


class FlatHeightSupplier(HeightSupplier):
    """Constant height everywhere."""

    def __init__(self, height: float = 0.0):
        self.height = float(height)

    def evaluate(self, x: int, y: int) -> float:
        return self.height

    def sample_grid(self, width: int, length: int) -> np.ndarray:
        return np.full((length + 1, width + 1), self.height, dtype=np.float64)


class FunctionHeightSupplier(HeightSupplier):
    """Adapts a plain (x, y) -> float callable."""

    def __init__(self, fn: HeightFunction):
        if not callable(fn):
            raise TypeError(f"Height function must be callable, got {type(fn).__name__}")
        self.fn = fn

    def evaluate(self, x: int, y: int) -> float:
        return float(self.fn(x, y))


class ArrayHeightSupplier(HeightSupplier):
    """
    Heights read from a pre-computed 2D array indexed [y, x].

    Coordinates outside the array raise IndexError instead of wrapping
    around, since NumPy would silently accept negative indices.
    """

    def __init__(self, heights):
        heights = np.asarray(heights, dtype=np.float64)
        if heights.ndim != 2:
            raise ValueError(f"Height array must be 2D, got shape {heights.shape}")
        self.heights = heights

    @property
    def shape(self):
        return self.heights.shape

    def evaluate(self, x: int, y: int) -> float:
        rows, cols = self.heights.shape
        if not (0 <= x < cols and 0 <= y < rows):
            raise IndexError(f"Point ({x}, {y}) outside height data of shape {self.heights.shape}")
        return float(self.heights[y, x])

    def sample_grid(self, width: int, length: int) -> np.ndarray:
        rows, cols = self.heights.shape
        if width + 1 > cols or length + 1 > rows:
            raise IndexError(
                f"Grid {width}x{length} needs {length + 1}x{width + 1} points, "
                f"height data is {rows}x{cols}"
            )
        return self.heights[: length + 1, : width + 1].copy()


def as_height_supplier(source: Union[HeightSupplier, HeightFunction]) -> HeightSupplier:
    """Wrap a plain callable into a HeightSupplier; pass suppliers through."""
    if isinstance(source, HeightSupplier):
        return source
    return FunctionHeightSupplier(source)
