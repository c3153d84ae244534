"""
Terrain entity tying a height supplier to mesh generation and a material.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

import structlog

from .height_supplier import HeightSupplier, HeightFunction, as_height_supplier
from .materials import Color, FlatColor, Material, Textured, material_for
from .mesh_builder import TerrainMesh, build_mesh, validate_dimensions
from .noise_generator import new_generator
from ..utils.random import EntropySource

logger = structlog.get_logger()

DEFAULT_WIDTH = 32
DEFAULT_LENGTH = 32
DEFAULT_HEIGHT_SCALE = 256


@dataclass(eq=False)
class TerrainModel:
    """Mesh buffers plus the material they should be drawn with."""

    mesh: TerrainMesh
    material: Material


class Terrain:
    """
    A width x length terrain whose heights come from a supplier.

    Every create call rebuilds the mesh from scratch; nothing is cached.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        length: int = DEFAULT_LENGTH,
        height_scale: Union[int, float] = DEFAULT_HEIGHT_SCALE,
        supplier: Optional[Union[HeightSupplier, HeightFunction]] = None,
    ):
        validate_dimensions(width, length, height_scale)
        self._width = width
        self._length = length
        self._height_scale = height_scale
        self.supplier = supplier
        self.model: Optional[TerrainModel] = None

    @classmethod
    def from_settings(cls, settings, entropy: Optional[EntropySource] = None) -> "Terrain":
        """
        Build a noise-driven terrain from application settings.

        Args:
            settings: Settings instance (see py_terrain.config)
            entropy: Seed source used when settings.noise_seed is unset
        """
        generator = new_generator(
            settings.noise_seed,
            entropy=entropy,
            octaves=settings.noise_octaves,
            persistence=settings.noise_persistence,
            zoom=settings.noise_zoom,
        )
        return cls(
            width=settings.terrain_width,
            length=settings.terrain_length,
            height_scale=settings.height_scale,
            supplier=generator,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def length(self) -> int:
        return self._length

    @property
    def height_scale(self) -> Union[int, float]:
        return self._height_scale

    @property
    def supplier(self) -> Optional[HeightSupplier]:
        return self._supplier

    @supplier.setter
    def supplier(self, value: Optional[Union[HeightSupplier, HeightFunction]]):
        self._supplier = None if value is None else as_height_supplier(value)

    def value_for(self, x: int, y: int) -> float:
        """Height at (x, y), or 0.0 when no supplier is set."""
        if self._supplier is None:
            return 0.0
        return self._supplier.evaluate(x, y)

    def create_geometry(self) -> TerrainMesh:
        return build_mesh(self._width, self._length, self._height_scale, self.value_for)

    def create(self, material: Material) -> TerrainModel:
        """Generate the mesh and pair it with the given material."""
        self.model = TerrainModel(mesh=self.create_geometry(), material=material)
        logger.info("Terrain created", material=type(material).__name__)
        return self.model

    def create_with_image(self, image: Optional[Any]) -> TerrainModel:
        """Textured terrain; falls back to flat green without an image."""
        return self.create(material_for(image=image))

    def create_with_color(self, color: Color) -> TerrainModel:
        return self.create(FlatColor(color))

    def apply_material(self, material: Material) -> TerrainModel:
        """
        Swap the material of the last created model.

        Raises:
            RuntimeError: If no model has been created yet
        """
        if self.model is None:
            raise RuntimeError("Terrain has no model yet; call create() first")
        if not isinstance(material, (Textured, FlatColor)):
            raise TypeError(f"Unsupported material type: {type(material).__name__}")
        self.model.material = material
        return self.model
