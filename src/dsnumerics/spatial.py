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
Spatial Extremum Search

Closest pair of distinct points in a point cloud, found with a k-d tree:

    1. Build scipy.spatial.KDTree over all N points once, O(N log N)
    2. Query every point for its nearest neighbour other than itself
    3. Keep the running minimum in point order

Self-matches are excluded by index, never by coordinates, so two coincident
but distinct points are valid neighbours of each other (distance 0.0).

Usage
-----
>>> import numpy as np
>>> from dsnumerics.spatial import min_pairwise_distance
>>>
>>> # Columns are points: (0, 0), (0, 0), (1, 1)
>>> points = np.array([[0.0, 0.0, 1.0], [0.0, 0.0, 1.0]])
>>> pair, dist = min_pairwise_distance(points)
>>> pair, dist
((0, 1), 0.0)
"""

from typing import Union

import numpy as np
from scipy.spatial import KDTree

from dsnumerics.dataset import Dataset
from dsnumerics.exceptions import InsufficientPointsError, InvalidShapeError
from dsnumerics.types.core import PointList, PointMatrix
from dsnumerics.types.results import NearestPairResult
from dsnumerics.utils.backend import ensure_numpy, is_jax, is_numpy, is_torch
from dsnumerics.utils.validation import as_point_array, check_finite

# ============================================================================
# Public API
# ============================================================================


def min_pairwise_distance(
    points: Union[PointMatrix, PointList, Dataset],
) -> NearestPairResult:
    """
    Find the closest pair of distinct points and their distance.

    Parameters
    ----------
    points : PointMatrix, PointList or Dataset
        Accepted forms:
        - array of shape (D, N) (NumPy, PyTorch or JAX): columns are points,
          D must not exceed N
        - sequence of D-dimensional vectors; a flat sequence of scalars is
          a set of 1-D points
        - Dataset

    Returns
    -------
    NearestPairResult
        (pair, distance) with pair = (i, j) of 0-based indices, i != j.
        No other pair of points is strictly closer. Among equally close
        pairs the one discovered first in point order is reported, with i
        the query point and j its neighbour.

    Raises
    ------
    InvalidShapeError
        If a matrix has more rows (dimensions) than columns (points), or
        vectors have inconsistent dimensions
    InsufficientPointsError
        If fewer than two points are given
    ValueError
        If any coordinate is NaN or Inf

    Examples
    --------
    List of vectors:

    >>> min_pairwise_distance([[0.0, 0.0], [3.0, 4.0], [0.0, 1.0]])
    NearestPairResult(pair=(0, 2), distance=1.0)

    Coincident 1-D points give an exact zero:

    >>> min_pairwise_distance([0.7, 0.7])
    NearestPairResult(pair=(0, 1), distance=0.0)

    Dataset wrapper:

    >>> data = Dataset([[1.0, 2.0], [1.5, 2.0], [4.0, 0.0]])
    >>> min_pairwise_distance(data).pair
    (0, 1)

    Notes
    -----
    The matrix form never transposes silently. A (N, D) array with N > D
    rows of points must be transposed by the caller or wrapped in a
    Dataset; passing it directly raises InvalidShapeError.
    """
    if isinstance(points, Dataset):
        data = points.points
    elif is_numpy(points) or is_torch(points) or is_jax(points):
        data = _columns_to_rows(ensure_numpy(points))
    else:
        data = as_point_array(points)

    return _closest_pair(data)


# ============================================================================
# Internals
# ============================================================================


def _columns_to_rows(matrix: np.ndarray) -> np.ndarray:
    """Validate a (D, N) column matrix and return its (N, D) point rows."""
    if matrix.ndim == 1:
        # 1-D array: N scalar points
        matrix = matrix.reshape(1, -1)
    elif matrix.ndim != 2:
        raise InvalidShapeError(
            f"Point matrix must be 2-D (dimensions x points), got shape {matrix.shape}",
        )

    n_dims, n_points = matrix.shape
    if n_dims > n_points:
        raise InvalidShapeError(
            f"Point matrix has {n_dims} rows (dimensions) but only {n_points} columns "
            f"(points); points must be columns. Transpose the matrix.",
        )

    check_finite(matrix, "points")
    return np.asarray(matrix.T, dtype=np.float64)


def _closest_pair(data: np.ndarray) -> NearestPairResult:
    """
    Closest pair over the rows of an (N, D) array.

    The tree is local to this call and discarded afterwards.
    """
    n_points = data.shape[0]
    if n_points < 2:
        raise InsufficientPointsError(
            f"At least 2 points are needed for a pairwise distance, got {n_points}",
        )

    tree = KDTree(data)

    # Two nearest neighbours of each point. The point itself is one of them
    # unless other points coincide with it, in which case either is valid.
    dists, inds = tree.query(data, k=2)

    min_dist = np.inf
    min_pair = (-1, -1)

    for p in range(n_points):
        if inds[p, 0] != p:
            ind, dist = inds[p, 0], dists[p, 0]
        else:
            ind, dist = inds[p, 1], dists[p, 1]

        if dist < min_dist:
            min_dist = dist
            min_pair = (p, int(ind))

    return NearestPairResult(pair=min_pair, distance=float(min_dist))


__all__ = ["min_pairwise_distance"]
