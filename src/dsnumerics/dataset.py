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
Dataset - Dimension-Tagged Point Collection

A single concrete container for point sets such as trajectories of a
discrete dynamical system. Points are stored row-wise in one contiguous,
read-only (N, D) float64 array. The dimension D is fixed at construction.

Construction:
- Dataset(vectors): from a sequence of D-dimensional vectors
- Dataset.from_columns(matrix): from a (D, N) matrix of columns

Capabilities:
- len(), iteration over points, integer indexing
- Per-dimension extrema (minima, maxima)
- Conversion back to the (D, N) column layout
"""

from typing import Iterator, Optional

import numpy as np

from dsnumerics.exceptions import InvalidShapeError
from dsnumerics.types.core import PointList, PointMatrix
from dsnumerics.utils.backend import ensure_numpy
from dsnumerics.utils.validation import as_point_array, check_finite


class Dataset:
    """
    Immutable collection of D-dimensional points.

    Parameters
    ----------
    points : PointList
        Sequence of D-dimensional vectors (rows). A flat sequence of
        scalars gives a 1-D dataset.
    dimension : int, optional
        Expected dimension. If given, a mismatch raises InvalidShapeError.
    name : str, optional
        Label for the dataset (e.g. the system that produced it)

    Examples
    --------
    >>> data = Dataset([[0.0, 0.0], [0.5, 1.0], [1.0, 1.0]], name="orbit")
    >>> data.dimension, len(data)
    (2, 3)
    >>> data.minima()
    array([0., 0.])
    >>> for point in data:
    ...     print(point)
    [0. 0.]
    [0.5 1. ]
    [1. 1.]
    """

    def __init__(
        self,
        points: PointList,
        dimension: Optional[int] = None,
        name: Optional[str] = None,
    ):
        data = as_point_array(points)

        if dimension is not None and data.shape[1] != dimension:
            raise InvalidShapeError(
                f"Expected points of dimension {dimension}, got {data.shape[1]}",
            )

        data = np.ascontiguousarray(data)
        data.setflags(write=False)
        self._data = data
        self.name = name

    @classmethod
    def from_columns(cls, matrix: PointMatrix, name: Optional[str] = None) -> "Dataset":
        """
        Build a dataset from a (D, N) matrix whose columns are points.

        Raises
        ------
        InvalidShapeError
            If matrix is not 2-D
        """
        arr = np.asarray(ensure_numpy(matrix), dtype=np.float64)
        if arr.ndim != 2:
            raise InvalidShapeError(f"Column matrix must be 2-D, got shape {arr.shape}")
        check_finite(arr, "matrix")
        return cls(arr.T, dimension=arr.shape[0], name=name)

    # ------------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        """Dimension D of every point."""
        return self._data.shape[1]

    @property
    def points(self) -> np.ndarray:
        """Read-only (N, D) view of the stored points."""
        return self._data

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._data)

    def __getitem__(self, index: int) -> np.ndarray:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"Dataset indices must be integers, got {type(index).__name__}")
        return self._data[index]

    def __repr__(self) -> str:
        label = f"'{self.name}' " if self.name else ""
        return f"Dataset({label}{len(self)} points, dimension={self.dimension})"

    # ------------------------------------------------------------------------
    # Extrema and conversions
    # ------------------------------------------------------------------------

    def minima(self) -> np.ndarray:
        """
        Smallest coordinate along each dimension.

        Returns +inf in every dimension for an empty dataset.
        """
        if len(self) == 0:
            return np.full(self.dimension, np.inf)
        return self._data.min(axis=0)

    def maxima(self) -> np.ndarray:
        """
        Largest coordinate along each dimension.

        Returns -inf in every dimension for an empty dataset.
        """
        if len(self) == 0:
            return np.full(self.dimension, -np.inf)
        return self._data.max(axis=0)

    def as_columns(self) -> np.ndarray:
        """Copy of the data in (D, N) column layout."""
        return self._data.T.copy()


__all__ = ["Dataset"]
