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
Fixed-Size QR Kernels

A kernel is built once for a known dimension and method, then called on
every (dim, dim) matrix of a hot loop (typically the tangent-space
orthogonalization along an orbit). The dimension is bound when the kernel
is built rather than dispatched per call.

Kernels are frozen and cached per (dim, method, tolerances); they hold no
working buffers, so one kernel may be shared freely between threads.
"""

import warnings
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from dsnumerics.config import MAX_STATIC_DIM, resolve_tolerances
from dsnumerics.exceptions import InvalidShapeError
from dsnumerics.linalg.gram_schmidt import qr_gram_schmidt
from dsnumerics.linalg.householder import qr_householder_static
from dsnumerics.types.backends import QR_METHODS, QRMethod, ToleranceConfig
from dsnumerics.types.core import SquareMatrix
from dsnumerics.types.results import QRResult
from dsnumerics.utils.validation import as_square_matrix


@dataclass(frozen=True)
class StaticQRKernel:
    """
    QR factorization bound to one matrix dimension.

    Attributes
    ----------
    dim : int
        Dimension D of the (D, D) matrices this kernel accepts
    method : QRMethod
        'gram_schmidt_diagonal_only' or 'householder_full'
    degeneracy_atol : float
        Gram-Schmidt degeneracy threshold
    singularity_rtol : float
        Householder singularity threshold
    conditioning_warn_rtol : float
        Householder ill-conditioning warning threshold

    Examples
    --------
    >>> qr3 = static_qr_kernel(3, 'householder_full')
    >>> Q, R = qr3(np.eye(3))
    >>> np.diag(R)
    array([-1., -1.,  1.])
    """

    dim: int
    method: QRMethod
    degeneracy_atol: float
    singularity_rtol: float
    conditioning_warn_rtol: float

    def __call__(self, A: SquareMatrix) -> QRResult:
        A = as_square_matrix(A, name="A")
        if A.shape[0] != self.dim:
            raise InvalidShapeError(
                f"Kernel built for {self.dim}x{self.dim} matrices, got shape {A.shape}",
            )

        if self.method == "gram_schmidt_diagonal_only":
            return qr_gram_schmidt(A, eps=self.degeneracy_atol)
        return qr_householder_static(
            A,
            rtol=self.singularity_rtol,
            warn_rtol=self.conditioning_warn_rtol,
        )


def static_qr_kernel(
    dim: int,
    method: QRMethod = "householder_full",
    tolerances: Optional[ToleranceConfig] = None,
) -> Callable[[SquareMatrix], QRResult]:
    """
    Build (or fetch from cache) a fixed-size QR kernel.

    Parameters
    ----------
    dim : int
        Matrix dimension D (intended for D ≤ 10)
    method : QRMethod
        'gram_schmidt_diagonal_only' (Q and diagonal of R) or
        'householder_full' (full Q and R)
    tolerances : ToleranceConfig, optional
        Tolerance overrides (see dsnumerics.config)

    Returns
    -------
    StaticQRKernel
        Callable kernel(A) -> QRResult for (dim, dim) matrices

    Raises
    ------
    ValueError
        If dim < 1 or method is unknown

    Warns
    -----
    UserWarning
        If dim exceeds 10; the general qr_householder is usually the better
        choice there
    """
    if method not in QR_METHODS:
        raise ValueError(f"method must be one of {list(QR_METHODS)}, got '{method}'")
    if int(dim) != dim or dim < 1:
        raise ValueError(f"dim must be a positive integer, got {dim}")

    if dim > MAX_STATIC_DIM:
        warnings.warn(
            f"Fixed-size QR kernel requested for dim={dim} > {MAX_STATIC_DIM}. "
            f"Consider qr_decompose(..., static=False) for large matrices.",
            UserWarning,
        )

    tol = resolve_tolerances(tolerances)
    return _build_kernel(
        int(dim),
        method,
        tol["degeneracy_atol"],
        tol["singularity_rtol"],
        tol["conditioning_warn_rtol"],
    )


@lru_cache(maxsize=64)
def _build_kernel(
    dim: int,
    method: QRMethod,
    degeneracy_atol: float,
    singularity_rtol: float,
    conditioning_warn_rtol: float,
) -> StaticQRKernel:
    return StaticQRKernel(
        dim=dim,
        method=method,
        degeneracy_atol=degeneracy_atol,
        singularity_rtol=singularity_rtol,
        conditioning_warn_rtol=conditioning_warn_rtol,
    )


__all__ = ["StaticQRKernel", "static_qr_kernel"]
