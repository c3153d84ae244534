"""Tests for height suppliers."""

import numpy as np
import pytest

from py_terrain.core.height_supplier import (
    HeightSupplier, FlatHeightSupplier, FunctionHeightSupplier,
    ArrayHeightSupplier, as_height_supplier
)


class TestFlatHeightSupplier:

    def test_constant(self):
        supplier = FlatHeightSupplier(12.5)
        assert supplier.evaluate(0, 0) == 12.5
        assert supplier.evaluate(-100, 4000) == 12.5

    def test_default_is_zero(self):
        assert FlatHeightSupplier().evaluate(3, 3) == 0.0

    def test_sample_grid(self):
        grid = FlatHeightSupplier(2.0).sample_grid(3, 2)
        assert grid.shape == (3, 4)
        assert np.all(grid == 2.0)


class TestFunctionHeightSupplier:

    def test_wraps_callable(self):
        supplier = FunctionHeightSupplier(lambda x, y: x - y)
        assert supplier.evaluate(5, 2) == 3.0
        assert isinstance(supplier.evaluate(5, 2), float)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            FunctionHeightSupplier(42)

    def test_default_sample_grid_indexed_y_x(self):
        grid = FunctionHeightSupplier(lambda x, y: 10 * y + x).sample_grid(2, 1)
        np.testing.assert_array_equal(grid, [[0, 1, 2], [10, 11, 12]])


class TestArrayHeightSupplier:

    @pytest.fixture
    def heights(self):
        return np.arange(12, dtype=np.float64).reshape(3, 4)

    def test_lookup(self, heights):
        supplier = ArrayHeightSupplier(heights)
        assert supplier.evaluate(0, 0) == 0.0
        assert supplier.evaluate(3, 0) == 3.0
        assert supplier.evaluate(1, 2) == 9.0

    def test_out_of_bounds(self, heights):
        supplier = ArrayHeightSupplier(heights)
        with pytest.raises(IndexError):
            supplier.evaluate(4, 0)
        with pytest.raises(IndexError):
            supplier.evaluate(0, 3)
        with pytest.raises(IndexError):
            supplier.evaluate(-1, 0)

    def test_sample_grid(self, heights):
        supplier = ArrayHeightSupplier(heights)
        np.testing.assert_array_equal(supplier.sample_grid(2, 1), heights[:2, :3])

    def test_sample_grid_too_large(self, heights):
        with pytest.raises(IndexError):
            ArrayHeightSupplier(heights).sample_grid(4, 2)

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            ArrayHeightSupplier([1.0, 2.0, 3.0])

    def test_copies_input(self, heights):
        supplier = ArrayHeightSupplier(heights)
        grid = supplier.sample_grid(1, 1)
        grid[0, 0] = 99.0
        assert supplier.evaluate(0, 0) == 0.0


class TestAsHeightSupplier:

    def test_passes_supplier_through(self):
        supplier = FlatHeightSupplier(1.0)
        assert as_height_supplier(supplier) is supplier

    def test_wraps_function(self):
        supplier = as_height_supplier(lambda x, y: 7.0)
        assert isinstance(supplier, HeightSupplier)
        assert supplier(1, 1) == 7.0

    def test_abstract_base(self):
        with pytest.raises(TypeError):
            HeightSupplier()
