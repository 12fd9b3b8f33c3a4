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
Householder QR for Square Matrices

Full QR factorization A = Q·R by Householder reflections, in two variants
that produce the same Q and R:

- qr_householder: general dense matrices. Each reflector is formed
  explicitly and R is rebuilt column by column with matrix-vector products.
- qr_householder_static: small matrices (D ≤ 10). Each reflector is applied
  to the active block as one rank-1 update, with no D×D reflector formed.

Mathematical Background
-----------------------
For column i = 0 .. D-2:

    v   = R[i:, i]
    v_0 += sign(R[0, i]) · ‖v‖        sign(x) = +1 if x ≥ 0 else -1
    T   = I - (2 / vᵀv) · v vᵀ         (acts on rows/cols ≥ i)
    R  ← T · R

The reflection direction follows the sign of the top entry of the column
in the working matrix, R[0, i], not the sign of the pivot R[i, i].

After the last stage the strictly-lower part of R is set to exact zeros
and Q is recovered as Q = A·R⁻¹ with one triangular solve instead of
accumulating the reflectors.
"""

import warnings
from typing import Optional

import numpy as np
from scipy import linalg

from dsnumerics.config import resolve_tolerances
from dsnumerics.exceptions import SingularMatrixError
from dsnumerics.types.core import SquareMatrix
from dsnumerics.types.results import QRResult
from dsnumerics.utils.validation import as_square_matrix

# ============================================================================
# Public API
# ============================================================================


def qr_householder(
    A: SquareMatrix,
    rtol: Optional[float] = None,
    warn_rtol: Optional[float] = None,
) -> QRResult:
    """
    Householder QR of a general square matrix.

    Parameters
    ----------
    A : SquareMatrix
        Square matrix (D, D); not modified
    rtol : float, optional
        Relative singularity threshold on the diagonal of R. Defaults to
        the 'singularity_rtol' tolerance (1e-12).
    warn_rtol : float, optional
        Relative threshold below which an ill-conditioned R is reported
        with a UserWarning. Defaults to 'conditioning_warn_rtol' (1e-8).

    Returns
    -------
    QRResult
        Q : np.ndarray (D, D), orthogonal
        R : np.ndarray (D, D), upper-triangular with exact zeros below
        the diagonal, A = Q·R

    Raises
    ------
    InvalidShapeError
        If A is not a non-empty square matrix
    SingularMatrixError
        If R cannot be inverted to recover Q

    Examples
    --------
    >>> A = np.array([[0.0, 1.0], [1.0, 0.0]])
    >>> Q, R = qr_householder(A)
    >>> R
    array([[-1.,  0.],
           [ 0., -1.]])
    >>> np.allclose(Q @ R, A)
    True
    """
    A = as_square_matrix(A, name="A")
    dim = A.shape[0]

    R = A.copy()
    v = np.zeros(dim)
    T = np.empty((dim, dim))

    for i in range(dim - 1):
        w = _reflector(R, i, v)
        if w == 0.0:
            # Active tail already zero: identity stage
            continue

        # T = I - (2/w)·v·vᵀ on rows/cols >= i
        T[:] = np.eye(dim)
        T[i:, i:] -= (2.0 / w) * np.outer(v[i:], v[i:])

        for j in range(dim):
            R[:, j] = T @ R[:, j]

    R = np.triu(R)
    Q = _recover_q(A, R, rtol, warn_rtol)
    return QRResult(Q=Q, R=R)


def qr_householder_static(
    A: SquareMatrix,
    rtol: Optional[float] = None,
    warn_rtol: Optional[float] = None,
) -> QRResult:
    """
    Householder QR specialised for small fixed-size matrices.

    Same algorithm and results as qr_householder, but each reflection is
    applied as a rank-1 update of the active rows:

        R[i:, :] ← R[i:, :] - (2/w) · v (vᵀ R[i:, :])

    Use it (usually through static_qr_kernel) for repeated factorizations
    of D ≤ 10 matrices, e.g. once per orbit step.

    Parameters
    ----------
    A : SquareMatrix
        Square matrix (D, D); not modified
    rtol : float, optional
        Relative singularity threshold on the diagonal of R
    warn_rtol : float, optional
        Relative ill-conditioning warning threshold

    Returns
    -------
    QRResult
        Full Q and R, A = Q·R

    Raises
    ------
    InvalidShapeError
        If A is not a non-empty square matrix
    SingularMatrixError
        If R cannot be inverted to recover Q
    """
    A = as_square_matrix(A, name="A")
    dim = A.shape[0]

    R = A.copy()
    v = np.zeros(dim)

    for i in range(dim - 1):
        w = _reflector(R, i, v)
        if w == 0.0:
            continue
        tail = v[i:]
        R[i:, :] -= np.outer(tail, (2.0 / w) * (tail @ R[i:, :]))

    R = np.triu(R)
    Q = _recover_q(A, R, rtol, warn_rtol)
    return QRResult(Q=Q, R=R)


# ============================================================================
# Internals
# ============================================================================


def _reflection_sign(x: float) -> float:
    """+1 for x >= 0 (including -0.0), -1 otherwise."""
    return 1.0 if x >= 0 else -1.0


def _reflector(R: np.ndarray, i: int, v: np.ndarray) -> float:
    """
    Load the Householder vector for stage i into v[i:].

    Returns the squared norm w = vᵀv of the shifted vector. Entries of v
    below index i are left untouched and never read by the caller.
    """
    v[i:] = R[i:, i]
    w = v[i:] @ v[i:]
    v[i] += _reflection_sign(R[0, i]) * np.sqrt(w)
    return float(v[i:] @ v[i:])


def _recover_q(
    A: np.ndarray,
    R: np.ndarray,
    rtol: Optional[float],
    warn_rtol: Optional[float],
) -> np.ndarray:
    """
    Recover Q = A·R⁻¹ from the triangular factor.

    Solves Rᵀ·Qᵀ = Aᵀ by back substitution.

    Raises
    ------
    SingularMatrixError
        If a diagonal entry of R is zero or negligible relative to the
        largest one, or the solve fails or produces non-finite values
    """
    overrides = {"singularity_rtol": rtol, "conditioning_warn_rtol": warn_rtol}
    tol = resolve_tolerances({key: value for key, value in overrides.items() if value is not None})

    diag = np.abs(np.diag(R))
    scale = diag.max()
    smallest = diag.min()
    if scale == 0.0 or smallest <= tol["singularity_rtol"] * scale:
        raise SingularMatrixError(
            f"R is singular: smallest |r_ii| = {smallest:.3e} relative to "
            f"largest |r_ii| = {scale:.3e} (rtol={tol['singularity_rtol']:.1e}); "
            f"the input matrix is rank deficient",
        )

    if smallest < tol["conditioning_warn_rtol"] * scale:
        warnings.warn(
            f"R is ill-conditioned (min/max |r_ii| = {smallest / scale:.3e}). "
            f"Q recovered from A·R⁻¹ may lose orthogonality.",
            UserWarning,
        )

    try:
        Qt = linalg.solve_triangular(R, A.T, trans="T", lower=False)
    except linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Triangular solve for Q failed: {exc}") from exc

    if not np.all(np.isfinite(Qt)):
        raise SingularMatrixError("Recovering Q = A·R⁻¹ produced non-finite values")

    return Qt.T.copy()


__all__ = ["qr_householder", "qr_householder_static"]
