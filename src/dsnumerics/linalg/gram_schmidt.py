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
Gram-Schmidt QR (diagonal only)

Modified Gram-Schmidt orthonormalization of the columns of a small square
matrix, returning Q and only the diagonal of R:

    u_k = a_k
    u_k ← u_k - (u_k · e_i) e_i      for i = 0 .. k-1, one at a time
    e_k = u_k / ‖u_k‖
    r_kk = a_k · e_k

This is the lightweight path for growth-rate (Lyapunov exponent) estimates,
where log|r_kk| is all that is needed.
"""

from typing import Optional

import numpy as np

from dsnumerics.config import resolve_tolerances
from dsnumerics.exceptions import DegenerateMatrixError
from dsnumerics.types.core import SquareMatrix
from dsnumerics.types.results import QRResult
from dsnumerics.utils.validation import as_square_matrix


def qr_gram_schmidt(A: SquareMatrix, eps: Optional[float] = None) -> QRResult:
    """
    Orthonormalize the columns of A by modified Gram-Schmidt.

    Parameters
    ----------
    A : SquareMatrix
        Square matrix (D, D); not modified
    eps : float, optional
        Residual norm below which a column counts as linearly dependent.
        Defaults to the 'degeneracy_atol' tolerance (1e-12).

    Returns
    -------
    QRResult
        Q : np.ndarray, shape (D, D), orthonormal columns e_0 .. e_{D-1}
        R : np.ndarray, shape (D,), diagonal of R with r_kk = a_k · e_k

    Raises
    ------
    InvalidShapeError
        If A is not a non-empty square matrix
    DegenerateMatrixError
        If a residual norm falls below eps

    Examples
    --------
    >>> Q, r_diag = qr_gram_schmidt(np.array([[2.0, 1.0], [0.0, 3.0]]))
    >>> r_diag
    array([2., 3.])
    """
    if eps is None:
        eps = resolve_tolerances()["degeneracy_atol"]

    A = as_square_matrix(A, name="A")
    dim = A.shape[0]
    Q = np.empty_like(A)

    for k in range(dim):
        u = A[:, k].copy()
        # Project out the finalized vectors one at a time (modified GS)
        for i in range(k):
            u -= (u @ Q[:, i]) * Q[:, i]

        norm = np.linalg.norm(u)
        if norm < eps:
            raise DegenerateMatrixError(column=k, norm=float(norm), eps=eps)
        Q[:, k] = u / norm

    r_diag = np.einsum("ij,ij->j", A, Q)
    return QRResult(Q=Q, R=r_diag)


__all__ = ["qr_gram_schmidt"]
