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
Core Types - Fundamental Building Blocks

Defines the basic types used throughout the kernel:
- Multi-backend array types (NumPy, PyTorch, JAX)
- Point-set types (column matrices, vector sequences)
- Square matrix and triangular-factor types
- Function signatures for the injected dynamics collaborators

Usage
-----
>>> from dsnumerics.types.core import PointMatrix, SquareMatrix
>>>
>>> def closest(points: PointMatrix) -> IndexPair:
...     ...
"""

from typing import TYPE_CHECKING, Callable, Sequence, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    import jax.numpy as jnp
    import torch


# ============================================================================
# Basic Array Types - Multi-Backend Support
# ============================================================================

ArrayLike = Union[np.ndarray, "torch.Tensor", "jnp.ndarray"]
"""
Array-like type supporting multiple backends.

Can be NumPy array, PyTorch tensor, or JAX array.
"""


# ============================================================================
# Point-Set Types
# ============================================================================

PointMatrix = ArrayLike
"""
Point set stored as a matrix of columns.

Shape: (D, N) where D is the dimensionality and N the number of points.
Each column is one point. D must not exceed N.

Examples
--------
>>> # Three 2-D points: (0, 0), (0, 0), (1, 1)
>>> points: PointMatrix = np.array([[0.0, 0.0, 1.0],
...                                 [0.0, 0.0, 1.0]])
"""

PointVector = Union[ArrayLike, Sequence[float]]
"""Single D-dimensional point."""

PointList = Sequence[PointVector]
"""
Point set stored as an ordered sequence of D-dimensional vectors.

A flat sequence of scalars is read as a set of 1-D points.

Examples
--------
>>> points: PointList = [[0.0, 0.0], [0.0, 0.0], [1.0, 1.0]]
"""

IndexPair = Tuple[int, int]
"""Pair of distinct 0-based point indices."""


# ============================================================================
# Matrix Types
# ============================================================================

SquareMatrix = ArrayLike
"""
Dense square real matrix.

Shape: (D, D)
"""

OrthogonalMatrix = ArrayLike
"""
Matrix with orthonormal columns (Qᵀ·Q = I).

Shape: (D, D)
"""

UpperTriangularMatrix = ArrayLike
"""
Upper-triangular matrix whose strictly-lower entries are exactly zero.

Shape: (D, D)
"""

DiagonalVector = ArrayLike
"""
Diagonal of an upper-triangular factor.

Shape: (D,)
"""


# ============================================================================
# Function Types - Injected Collaborators
# ============================================================================

StepFunction = Callable[[np.ndarray], np.ndarray]
"""
One-step update of a discrete dynamical system.

Signature: step(x) -> x_next

Examples
--------
>>> def henon(x):
...     return np.array([1 - 1.4 * x[0]**2 + x[1], 0.3 * x[0]])
"""

JacobianFunction = Callable[[np.ndarray], np.ndarray]
"""
Jacobian of a step function evaluated at a state.

Signature: jacobian(x) -> J, shape (D, D)

Supplied by the caller or by a separate differentiation module.

Examples
--------
>>> def henon_jacobian(x):
...     return np.array([[-2 * 1.4 * x[0], 1.0], [0.3, 0.0]])
"""


__all__ = [
    "ArrayLike",
    "PointMatrix",
    "PointVector",
    "PointList",
    "IndexPair",
    "SquareMatrix",
    "OrthogonalMatrix",
    "UpperTriangularMatrix",
    "DiagonalVector",
    "StepFunction",
    "JacobianFunction",
]
