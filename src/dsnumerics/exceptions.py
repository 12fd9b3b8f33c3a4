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
Kernel Exceptions

Error taxonomy for the numerical kernel:
- InvalidShapeError: dimensionality / point-count mismatch
- InsufficientPointsError: fewer than two points for a pairwise search
- DegenerateMatrixError: near-zero residual during Gram-Schmidt
- SingularMatrixError: non-invertible R during Householder Q recovery

Shape and count errors derive from ValueError, factorization errors derive
from numpy.linalg.LinAlgError, so callers can catch either the kernel base
class or the familiar NumPy/SciPy exception types.
"""

import numpy as np

# ============================================================================
# Exceptions
# ============================================================================


class DynamicsKernelError(Exception):
    """Base class for all errors raised by the numerical kernel."""

    pass


class InvalidShapeError(DynamicsKernelError, ValueError):
    """Raised when an input has the wrong dimensionality or shape."""

    pass


class InsufficientPointsError(DynamicsKernelError, ValueError):
    """Raised when a pairwise search receives fewer than two points."""

    pass


class DegenerateMatrixError(DynamicsKernelError, np.linalg.LinAlgError):
    """
    Raised when Gram-Schmidt meets a (near) linearly dependent column.

    Attributes
    ----------
    column : int
        0-based index of the column whose residual collapsed
    norm : float
        Norm of the residual after projection
    """

    def __init__(self, column: int, norm: float, eps: float):
        self.column = column
        self.norm = norm
        super().__init__(
            f"Column {column} is linearly dependent on the previous columns: "
            f"residual norm {norm:.3e} is below eps={eps:.3e}",
        )


class SingularMatrixError(DynamicsKernelError, np.linalg.LinAlgError):
    """Raised when the triangular factor R cannot be inverted."""

    pass


__all__ = [
    "DynamicsKernelError",
    "InvalidShapeError",
    "InsufficientPointsError",
    "DegenerateMatrixError",
    "SingularMatrixError",
]
