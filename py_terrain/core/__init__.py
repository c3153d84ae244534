"""
Core terrain generation functionality.
"""

from .height_supplier import (HeightSupplier, FlatHeightSupplier, FunctionHeightSupplier,
                              ArrayHeightSupplier, as_height_supplier)
from .noise_generator import PerlinNoiseGenerator, new_generator
from .mesh_builder import TerrainMesh, build_mesh, build_shared_mesh, validate_dimensions
from .materials import Color, Textured, FlatColor, Material, material_for, WHITE, GREEN, ORANGE
from .terrain import Terrain, TerrainModel

__all__ = ['HeightSupplier', 'FlatHeightSupplier', 'FunctionHeightSupplier',
           'ArrayHeightSupplier', 'as_height_supplier',
           'PerlinNoiseGenerator', 'new_generator',
           'TerrainMesh', 'build_mesh', 'build_shared_mesh', 'validate_dimensions',
           'Color', 'Textured', 'FlatColor', 'Material', 'material_for', 'WHITE', 'GREEN', 'ORANGE',
           'Terrain', 'TerrainModel']
