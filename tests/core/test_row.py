"""Tests for the Row class and initial states."""

import numpy as np
import pytest
from elementary.core.errors import EmptyRow, InvalidLength
from elementary.core.row import Row, random_row, seed


class TestSeed:
    """Test cases for seed()."""

    def test_seed_nine(self):
        """Test the live cell sits in the middle."""
        assert seed(9) == [0, 0, 0, 0, 1, 0, 0, 0, 0]

    def test_seed_one(self):
        """Test a single-cell row is alive."""
        assert seed(1) == [1]

    def test_seed_even_length(self):
        """Test even lengths seed index length // 2."""
        assert seed(4) == [0, 0, 1, 0]

    def test_seed_population(self):
        """Test exactly one cell is alive."""
        row = seed(101)
        assert len(row) == 101
        assert row.population == 1
        assert row[50] == 1

    def test_seed_zero(self):
        """Test zero length is rejected."""
        with pytest.raises(InvalidLength):
            seed(0)

    def test_seed_negative(self):
        """Test negative length is rejected."""
        with pytest.raises(InvalidLength):
            seed(-3)

    def test_seed_non_integer(self):
        """Test non-integer lengths are rejected."""
        with pytest.raises(TypeError):
            seed(4.5)


class TestRandomRow:
    """Test cases for random_row()."""

    def test_probability_extremes(self):
        """Test probability 0 and 1 give uniform rows."""
        assert random_row(20, 0.0).population == 0
        assert random_row(20, 1.0).population == 20

    def test_reproducible_with_seed(self):
        """Test the same seed gives the same row."""
        assert random_row(50, 0.5, rng_seed=7) == random_row(50, 0.5, rng_seed=7)

    def test_intermediate_probability(self):
        """Test roughly half the cells are alive."""
        row = random_row(1000, 0.5, rng_seed=1)
        assert 400 <= row.population <= 600

    def test_invalid_arguments(self):
        """Test invalid length and probability are rejected."""
        with pytest.raises(InvalidLength):
            random_row(0)

        with pytest.raises(ValueError):
            random_row(10, 1.5)


class TestRow:
    """Test cases for the Row class."""

    def test_initialization(self):
        """Test row creation from a list."""
        row = Row([0, 1, 1, 0])
        assert len(row) == 4
        assert row.length == 4
        assert row.population == 2
        assert row.density == 0.5
        assert row.to_list() == [0, 1, 1, 0]

    def test_invalid_values(self):
        """Test values other than 0 and 1 are rejected."""
        with pytest.raises(ValueError):
            Row([0, 2, 1])

        with pytest.raises(ValueError):
            Row([[0, 1], [1, 0]])

    def test_empty_row(self):
        """Test an empty row can be built but has no neighborhoods."""
        row = Row([])
        assert len(row) == 0
        assert row.density == 0.0

        with pytest.raises(EmptyRow):
            row.neighborhood_patterns()

    def test_immutable(self):
        """Test cells cannot be modified in place."""
        row = Row([0, 1, 0])
        with pytest.raises(ValueError):
            row.cells[0] = 1

    def test_copy_is_independent(self):
        """Test a row built from a source array does not share it."""
        source = np.array([0, 1, 0], dtype=np.int8)
        row = Row(source)
        source[0] = 1
        assert row == [0, 1, 0]

    def test_equality(self):
        """Test equality against rows and sequences."""
        assert Row([1, 0]) == Row([1, 0])
        assert Row([1, 0]) == (1, 0)
        assert Row([1, 0]) != Row([0, 1])
        assert Row([1, 0]) != "10"
        assert Row([1, 0]).__eq__("10") is NotImplemented
        assert Row([1, 0]).__eq__(None) is NotImplemented
        assert hash(Row([1, 0])) == hash(Row([1, 0]))

    def test_neighborhood_wraps(self):
        """Test edge cells see the opposite end as a neighbor."""
        row = Row([1, 0, 0, 0, 1, 0])
        assert row.neighborhood(0) == (0, 1, 0)
        assert row.neighborhood(5) == (1, 0, 1)
        assert row.neighborhood(4) == (0, 1, 0)

    def test_neighborhood_out_of_bounds(self):
        """Test invalid indices are rejected."""
        with pytest.raises(IndexError):
            Row([0, 1]).neighborhood(2)

    def test_neighborhood_patterns(self):
        """Test vectorised patterns match per-cell neighborhoods."""
        row = Row([1, 1, 0, 1, 0, 0, 1])
        patterns = row.neighborhood_patterns()

        for i in range(len(row)):
            left, center, right = row.neighborhood(i)
            assert patterns[i] == 4 * left + 2 * center + right

    def test_neighborhood_patterns_single_cell(self):
        """Test a single cell is its own left and right neighbor."""
        assert Row([1]).neighborhood_patterns().tolist() == [7]
        assert Row([0]).neighborhood_patterns().tolist() == [0]

    def test_from_string(self):
        """Test parsing a rendered line."""
        assert Row.from_string("  * *") == [0, 0, 1, 0, 1]
        assert Row.from_string("#..#", alive="#") == [1, 0, 0, 1]

    def test_str(self):
        """Test default rendering."""
        assert str(Row([1, 0, 1])) == "* *"
