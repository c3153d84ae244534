"""
Surface materials for a terrain model.

A terrain is either textured or painted a single flat color. The two cases
are separate types so callers handle each one explicitly.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Color:
    """RGBA color, channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Color channels must be in [0, 1], got {self}")


WHITE = Color(1.0, 1.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0)
ORANGE = Color(1.0, 0.5, 0.0)


@dataclass(frozen=True)
class Textured:
    """Lit material sampling an image, tinted white."""

    image: Any
    tint: Color = WHITE


@dataclass(frozen=True)
class FlatColor:
    """Unlit single-color material."""

    color: Color


Material = Union[Textured, FlatColor]


def material_for(image: Optional[Any] = None, color: Optional[Color] = None) -> Material:
    """
    Pick the material for a terrain.

    An image always wins; without one the given color is used, and green
    when no color was given either.
    """
    if image is not None:
        return Textured(image)
    return FlatColor(color if color is not None else GREEN)
