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
Input Validation

Shape and finiteness checks shared by the search and factorization modules.
Every helper returns a fresh float64 array, so callers may work on the result
in place without touching the caller's data.
"""

from typing import Any

import numpy as np

from dsnumerics.exceptions import InvalidShapeError
from dsnumerics.utils.backend import ensure_numpy


def check_finite(arr: np.ndarray, name: str) -> None:
    """
    Reject NaN and Inf entries.

    Raises
    ------
    ValueError
        If any entry of arr is not finite
    """
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values (NaN or Inf)")


def as_square_matrix(matrix: Any, name: str = "matrix") -> np.ndarray:
    """
    Convert input to a float64 (D, D) working copy.

    Parameters
    ----------
    matrix : ArrayLike or nested sequence
        Square matrix in any backend
    name : str
        Name used in error messages

    Returns
    -------
    np.ndarray
        Independent float64 copy, shape (D, D), D >= 1

    Raises
    ------
    InvalidShapeError
        If input is not a non-empty 2-D square matrix
    ValueError
        If input contains NaN or Inf

    Examples
    --------
    >>> as_square_matrix([[1, 2], [3, 4]]).dtype
    dtype('float64')
    >>> as_square_matrix(np.ones((2, 3)))
    Traceback (most recent call last):
        ...
    dsnumerics.exceptions.InvalidShapeError: matrix must be square, got shape (2, 3)
    """
    arr = np.array(ensure_numpy(matrix), dtype=np.float64, copy=True)

    if arr.ndim != 2:
        raise InvalidShapeError(f"{name} must be 2-D, got {arr.ndim}-D array of shape {arr.shape}")
    if arr.shape[0] != arr.shape[1]:
        raise InvalidShapeError(f"{name} must be square, got shape {arr.shape}")
    if arr.shape[0] == 0:
        raise InvalidShapeError(f"{name} must not be empty")

    check_finite(arr, name)
    return arr


def as_point_array(points: Any, name: str = "points") -> np.ndarray:
    """
    Convert a sequence of D-dimensional vectors to an (N, D) float64 array.

    A flat sequence of scalars is read as N points in one dimension.

    Raises
    ------
    InvalidShapeError
        If the vectors are ragged or nested deeper than two levels
    ValueError
        If any coordinate is NaN or Inf
    """
    try:
        arr = np.array(
            [ensure_numpy(p) for p in points] if not isinstance(points, np.ndarray) else points,
            dtype=np.float64,
        )
    except ValueError as exc:
        raise InvalidShapeError(f"{name} must all have the same dimension") from exc

    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise InvalidShapeError(
            f"{name} must be a sequence of vectors, got array of shape {arr.shape}",
        )

    check_finite(arr, name)
    return arr


__all__ = ["check_finite", "as_square_matrix", "as_point_array"]
