"""
Triangle mesh construction from a height supplier.

Every grid cell becomes a quad of four vertices split into two triangles
along the bottom-left/top-right diagonal. Vertex positions use x/z for
the horizontal plane and y for height:

    bottomLeft  = (x,     h(x, y),         y)
    topLeft     = (x,     h(x, y + 1),     y + 1)
    topRight    = (x + 1, h(x + 1, y + 1), y + 1)
    bottomRight = (x + 1, h(x + 1, y),     y)

build_mesh gives each cell its own four vertices (no sharing between
neighbours). build_shared_mesh is the deduplicated variant with one
vertex per lattice point; its triangles cover the same surface.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np
import structlog

from .height_supplier import HeightSupplier, HeightFunction, as_height_supplier

logger = structlog.get_logger()

VERTICES_PER_CELL = 4
INDICES_PER_CELL = 6

# Offsets into a cell's four vertices: (bl, tl, tr) and (bl, tr, br)
QUAD_TRIANGLES = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)

MAX_UINT32 = 2**32 - 1


@dataclass(eq=False)
class TerrainMesh:
    """Vertex and index buffers describing a triangle list."""

    vertices: np.ndarray  # (N, 3) float32 positions
    indices: np.ndarray   # (M,) uint32, three per triangle
    primitive: str = "triangles"

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> np.ndarray:
        """Indices grouped per triangle, shape (M / 3, 3)."""
        return self.indices.reshape(-1, 3)

    def face_normals(self) -> np.ndarray:
        """
        Unit normal of every triangle, following its winding order.

        Degenerate triangles get a zero normal.
        """
        corners = self.vertices[self.triangles()].astype(np.float64)
        normals = np.cross(corners[:, 1] - corners[:, 0], corners[:, 2] - corners[:, 0])
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        return np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)


def validate_dimensions(width: int, length: int, height_scale: Union[int, float]) -> None:
    """
    Reject grid settings that would give degenerate geometry.

    Raises:
        ValueError: If width or length is not positive, height_scale is zero,
            or the vertex count does not fit in uint32 indices
    """
    if width <= 0:
        raise ValueError(f"Terrain width must be positive, got {width}")
    if length <= 0:
        raise ValueError(f"Terrain length must be positive, got {length}")
    if height_scale == 0:
        raise ValueError("Height scale must be non-zero")
    if width * length * VERTICES_PER_CELL > MAX_UINT32:
        raise ValueError(f"Terrain {width}x{length} is too large for 32-bit indices")


def build_mesh(
    width: int,
    length: int,
    height_scale: Union[int, float],
    supplier: Union[HeightSupplier, HeightFunction],
) -> TerrainMesh:
    """
    Build a terrain mesh with four unshared vertices per cell.

    Cells are visited row by row (y outer, x inner). Buffers are sized up
    front and each cell writes its block at offset cell * 4 / cell * 6.

    Args:
        width: Number of cells along x
        length: Number of cells along y
        height_scale: Divisor applied to every sampled height
        supplier: HeightSupplier or (x, y) -> float callable

    Returns:
        TerrainMesh with width * length * 4 vertices and width * length * 6 indices
    """
    validate_dimensions(width, length, height_scale)
    supplier = as_height_supplier(supplier)

    logger.info("Building terrain mesh", width=width, length=length, height_scale=height_scale)

    n_cells = width * length
    vertices = np.empty((n_cells * VERTICES_PER_CELL, 3), dtype=np.float32)
    scale = np.float32(height_scale)

    for y in range(length):
        for x in range(width):
            bottom_left_z = np.float32(supplier.evaluate(x, y)) / scale
            bottom_right_z = np.float32(supplier.evaluate(x + 1, y)) / scale
            top_left_z = np.float32(supplier.evaluate(x, y + 1)) / scale
            top_right_z = np.float32(supplier.evaluate(x + 1, y + 1)) / scale

            base = (y * width + x) * VERTICES_PER_CELL
            vertices[base] = (x, bottom_left_z, y)
            vertices[base + 1] = (x, top_left_z, y + 1)
            vertices[base + 2] = (x + 1, top_right_z, y + 1)
            vertices[base + 3] = (x + 1, bottom_right_z, y)

    bases = np.arange(n_cells, dtype=np.uint32) * np.uint32(VERTICES_PER_CELL)
    indices = (bases[:, np.newaxis] + QUAD_TRIANGLES).ravel()

    logger.info("Terrain mesh built", vertices=len(vertices), triangles=len(indices) // 3)
    return TerrainMesh(vertices=vertices, indices=indices)


def build_shared_mesh(
    width: int,
    length: int,
    height_scale: Union[int, float],
    supplier: Union[HeightSupplier, HeightFunction],
) -> TerrainMesh:
    """
    Build a terrain mesh with one vertex per lattice point.

    Vertex (x, y) sits at index y * (width + 1) + x. Triangles and winding
    match build_mesh, so the index count is still width * length * 6.

    Args:
        width: Number of cells along x
        length: Number of cells along y
        height_scale: Divisor applied to every sampled height
        supplier: HeightSupplier or (x, y) -> float callable

    Returns:
        TerrainMesh with (width + 1) * (length + 1) vertices
    """
    validate_dimensions(width, length, height_scale)
    supplier = as_height_supplier(supplier)

    logger.info("Building shared-vertex terrain mesh", width=width, length=length)

    heights = supplier.sample_grid(width, length).astype(np.float32) / np.float32(height_scale)
    ys, xs = np.mgrid[0:length + 1, 0:width + 1]
    vertices = np.stack([xs.ravel(), heights.ravel(), ys.ravel()], axis=1).astype(np.float32)

    row = width + 1
    cell_y, cell_x = np.mgrid[0:length, 0:width]
    bottom_left = cell_y * row + cell_x
    top_left = bottom_left + row
    top_right = top_left + 1
    bottom_right = bottom_left + 1

    indices = np.stack(
        [bottom_left, top_left, top_right, bottom_left, top_right, bottom_right], axis=-1
    ).ravel().astype(np.uint32)

    logger.info("Terrain mesh built", vertices=len(vertices), triangles=len(indices) // 3)
    return TerrainMesh(vertices=vertices, indices=indices)
