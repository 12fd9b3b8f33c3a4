# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Unit Tests for the Dataset Container

Tests cover:
- Construction from vectors and from column matrices
- Container protocol (len, iteration, indexing)
- Read-only storage
- Per-dimension extrema
- Dimension validation
"""

import numpy as np
import pytest

from dsnumerics import Dataset
from dsnumerics.exceptions import InvalidShapeError


@pytest.fixture
def orbit():
    """Small 2-D dataset."""
    return Dataset([[0.0, 2.0], [-1.0, 0.5], [3.0, 1.0]], name="orbit")


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Test the construction paths."""

    def test_from_vectors(self, orbit):
        """Vectors become rows of the stored array."""
        assert orbit.dimension == 2
        assert len(orbit) == 3
        assert orbit.points.shape == (3, 2)
        assert orbit.points.dtype == np.float64

    def test_from_columns(self):
        """Column matrix is stored point-wise."""
        matrix = np.array([[0.0, 1.0, 2.0], [5.0, 6.0, 7.0]])

        data = Dataset.from_columns(matrix)

        assert data.dimension == 2
        assert len(data) == 3
        np.testing.assert_array_equal(data[1], [1.0, 6.0])
        np.testing.assert_array_equal(data.as_columns(), matrix)

    def test_scalars_give_1d_dataset(self):
        """Flat sequence of scalars is 1-D."""
        data = Dataset([1.0, 2.0, 3.0])

        assert data.dimension == 1
        assert len(data) == 3

    def test_dimension_check(self):
        """Declared dimension must match the vectors."""
        with pytest.raises(InvalidShapeError):
            Dataset([[1.0, 2.0], [3.0, 4.0]], dimension=3)

    def test_from_columns_rejects_1d(self):
        """Column constructor needs a 2-D matrix."""
        with pytest.raises(InvalidShapeError):
            Dataset.from_columns(np.array([1.0, 2.0]))

    def test_ragged_vectors(self):
        """Ragged vectors are rejected."""
        with pytest.raises(InvalidShapeError):
            Dataset([[1.0], [1.0, 2.0]])

    def test_source_copied(self):
        """Later changes to the source do not leak into the dataset."""
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        data = Dataset(source)

        source[0, 0] = 100.0

        assert data[0][0] == 1.0


# ============================================================================
# Container Protocol
# ============================================================================


class TestContainerProtocol:
    """Test iteration, indexing and immutability."""

    def test_iteration_yields_points(self, orbit):
        """Iteration goes over points in order."""
        points = list(orbit)

        assert len(points) == 3
        np.testing.assert_array_equal(points[2], [3.0, 1.0])

    def test_negative_index(self, orbit):
        """Negative indices count from the end."""
        np.testing.assert_array_equal(orbit[-1], [3.0, 1.0])

    def test_non_integer_index(self, orbit):
        """Slices and floats are not valid indices."""
        with pytest.raises(TypeError):
            orbit[0:2]

    def test_storage_is_read_only(self, orbit):
        """Points cannot be modified in place."""
        with pytest.raises(ValueError):
            orbit.points[0, 0] = 5.0

    def test_repr_mentions_name(self, orbit):
        """repr shows name, size and dimension."""
        text = repr(orbit)
        assert "orbit" in text
        assert "3 points" in text
        assert "dimension=2" in text


# ============================================================================
# Extrema
# ============================================================================


class TestExtrema:
    """Test per-dimension minima and maxima."""

    def test_minima(self, orbit):
        np.testing.assert_array_equal(orbit.minima(), [-1.0, 0.5])

    def test_maxima(self, orbit):
        np.testing.assert_array_equal(orbit.maxima(), [3.0, 2.0])

    def test_empty_dataset_extrema(self):
        """Empty dataset reports infinite extrema."""
        data = Dataset(np.empty((0, 2)))

        assert np.all(data.minima() == np.inf)
        assert np.all(data.maxima() == -np.inf)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
