"""Tests for the seeding generators."""

import numpy as np
import pytest
from convida.core import seeds
from convida.core.seeds import GENERATORS, create_cells


class TestSeeds:
    """Test cases for the named generators."""

    def test_available_generators(self):
        """Test the three generators are registered."""
        assert GENERATORS == ["default", "glider", "random"]

    def test_default_stripes(self):
        """Test even indices and multiples of 7 are alive."""
        cells = create_cells("default", 30, 6)
        alive = set(np.flatnonzero(cells).tolist())
        assert alive == {i for i in range(30) if i % 2 == 0 or i % 7 == 0}
        assert 7 in alive
        assert 21 in alive
        assert 9 not in alive

    def test_default_ignores_width(self):
        """Test the striped generator only depends on the size."""
        assert np.array_equal(create_cells("default", 24, 4), create_cells("default", 24, 6))

    def test_glider_at_origin(self):
        """Test the glider generator places one glider at the origin."""
        cells = create_cells("glider", 25, 5)
        assert np.flatnonzero(cells).tolist() == [1, 7, 10, 11, 12]
        assert cells.dtype == np.uint8

    def test_glider_uses_plain_indexing(self):
        """Test a narrow buffer places the glider by row-major index only."""
        cells = create_cells("glider", 12, 2)
        assert np.flatnonzero(cells).tolist() == [1, 4, 5, 6]

    def test_glider_too_small(self):
        """Test a buffer that cannot hold the glider is an error."""
        with pytest.raises(IndexError):
            create_cells("glider", 8, 3)

    def test_random_extremes(self):
        """Test the random generator honours its probability."""
        assert seeds.random(100, probability=0.0).sum() == 0
        assert seeds.random(100, probability=1.0).sum() == 100

    def test_random_is_roughly_half(self):
        """Test the default random buffer is about half alive."""
        np.random.seed(3)
        cells = create_cells("random", 10000, 100)
        assert len(cells) == 10000
        assert set(np.unique(cells).tolist()) <= {0, 1}
        assert 4500 <= cells.sum() <= 5500

    def test_random_is_reproducible(self):
        """Test seeding numpy makes the random generator repeatable."""
        np.random.seed(42)
        first = create_cells("random", 64, 8)
        np.random.seed(42)
        second = create_cells("random", 64, 8)
        assert np.array_equal(first, second)

    def test_empty_buffers(self):
        """Test generators accept an empty buffer."""
        assert len(create_cells("default", 0, 0)) == 0
        assert len(create_cells("random", 0, 0)) == 0

    def test_unknown_generator(self):
        """Test unknown generator names are rejected."""
        with pytest.raises(ValueError, match="Available: default, glider, random"):
            create_cells("gosper", 16, 4)
