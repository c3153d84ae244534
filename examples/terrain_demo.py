#!/usr/bin/env python3
"""
Simple demo script showing terrain mesh generation.
"""

import numpy as np
from py_terrain.config import settings
from py_terrain.core import Terrain, build_shared_mesh, ORANGE
from py_terrain.utils import configure_logging, SeededEntropy


def main():
    """Demonstrate terrain generation."""
    configure_logging(settings.log_level, settings.log_format)

    print("Py-Terrain Mesh Generation Demo")
    print("=" * 40)

    terrain = Terrain.from_settings(settings, entropy=SeededEntropy(2024))
    print(f"\nNoise seed: {terrain.supplier.seed}")
    print(f"Grid: {terrain.width} x {terrain.length} cells, height scale {terrain.height_scale}")

    model = terrain.create_with_color(ORANGE)
    mesh = model.mesh

    heights = mesh.vertices[:, 1]
    print(f"\nVertices:  {mesh.vertex_count}")
    print(f"Triangles: {mesh.triangle_count}")
    print(f"Height range: {heights.min():.3f}-{heights.max():.3f}")
    print(f"Average height: {heights.mean():.3f}")
    print(f"Material: {model.material}")

    shared = build_shared_mesh(terrain.width, terrain.length, terrain.height_scale, terrain.supplier)
    print(f"\nShared-vertex variant: {shared.vertex_count} vertices "
          f"({mesh.vertex_count / shared.vertex_count:.1f}x fewer)")

    # Height distribution over the raw 0-255 noise range
    raw = terrain.supplier.sample_grid(terrain.width, terrain.length)
    bins = [0, 64, 96, 128, 160, 192, 256]
    hist, _ = np.histogram(raw, bins=bins)
    print("\nHeight distribution:")
    for i in range(len(bins) - 1):
        bar = '#' * int(hist[i] / max(hist) * 20)
        print(f"  {bins[i]:3d}-{bins[i+1]:3d}: {bar} ({hist[i]})")


if __name__ == "__main__":
    main()
