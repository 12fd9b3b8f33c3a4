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
QR Decomposition Entry Point

Pure stateless front end over the two factorization algorithms:

**Methods:**
- 'householder_full': Householder reflections, full Q and R (default)
- 'gram_schmidt_diagonal_only': modified Gram-Schmidt, Q and diag(R)

**Regimes:**
- static=False: general dynamically-sized path
- static=True: fixed-size kernel bound to the matrix dimension

Inputs may be NumPy arrays, nested sequences, PyTorch tensors or JAX
arrays. Computation runs in NumPy/SciPy and results are returned in the
backend of the input unless another backend is requested.

Usage
-----
>>> import numpy as np
>>> from dsnumerics.linalg import qr_decompose
>>>
>>> A = np.array([[4.0, 1.0], [3.0, 2.0]])
>>> Q, R = qr_decompose(A)
>>> np.allclose(Q @ R, A)
True
>>>
>>> # Growth rates only
>>> Q, r_diag = qr_decompose(A, method='gram_schmidt_diagonal_only')
"""

from typing import Optional

from dsnumerics.config import resolve_tolerances
from dsnumerics.linalg.gram_schmidt import qr_gram_schmidt
from dsnumerics.linalg.householder import qr_householder
from dsnumerics.linalg.static import static_qr_kernel
from dsnumerics.types.backends import QR_METHODS, Backend, QRMethod, ToleranceConfig
from dsnumerics.types.core import SquareMatrix
from dsnumerics.types.results import QRResult
from dsnumerics.utils.backend import ensure_backend, get_backend
from dsnumerics.utils.validation import as_square_matrix


def qr_decompose(
    matrix: SquareMatrix,
    method: QRMethod = "householder_full",
    static: bool = False,
    backend: Optional[Backend] = None,
    tolerances: Optional[ToleranceConfig] = None,
) -> QRResult:
    """
    Factorize a square matrix as A = Q·R.

    Parameters
    ----------
    matrix : SquareMatrix
        Square real matrix (D, D); never modified
    method : QRMethod
        'householder_full' (default) returns full Q and R.
        'gram_schmidt_diagonal_only' returns Q and the diagonal of R.
    static : bool
        If True, use the fixed-size kernel for this dimension
        (see static_qr_kernel). Intended for D ≤ 10 in hot loops.
    backend : Backend, optional
        Backend of the returned arrays. Defaults to the input's backend
        ('numpy' for nested sequences).
    tolerances : ToleranceConfig, optional
        Overrides for 'degeneracy_atol', 'singularity_rtol' and
        'conditioning_warn_rtol'

    Returns
    -------
    QRResult
        (Q, R) where R is (D, D) upper-triangular for 'householder_full'
        and the length-D diagonal of R for 'gram_schmidt_diagonal_only'

    Raises
    ------
    ValueError
        If method is unknown or tolerances are invalid
    InvalidShapeError
        If matrix is not a non-empty square 2-D matrix
    DegenerateMatrixError
        If Gram-Schmidt meets a linearly dependent column
    SingularMatrixError
        If Householder's R cannot be inverted to recover Q

    Examples
    --------
    Reflection matrix (top entry 0 takes the +1 reflection sign):

    >>> Q, R = qr_decompose([[0.0, 1.0], [1.0, 0.0]])
    >>> R[0, 0]
    -1.0

    Fixed-size kernel inside a loop:

    >>> for J in jacobians:
    ...     Q, r_diag = qr_decompose(J @ Q, method='gram_schmidt_diagonal_only', static=True)

    PyTorch input returns PyTorch tensors:

    >>> import torch
    >>> Q, R = qr_decompose(torch.eye(3, dtype=torch.float64))
    >>> type(Q)
    <class 'torch.Tensor'>

    See Also
    --------
    qr_householder : General Householder QR
    qr_householder_static : Fixed-size Householder QR
    qr_gram_schmidt : Modified Gram-Schmidt (diagonal only)
    static_qr_kernel : Build a kernel bound to one dimension
    """
    if method not in QR_METHODS:
        raise ValueError(f"method must be one of {list(QR_METHODS)}, got '{method}'")

    out_backend = backend if backend is not None else get_backend(matrix, default="numpy")
    tol = resolve_tolerances(tolerances)
    A = as_square_matrix(matrix)

    if static:
        kernel = static_qr_kernel(A.shape[0], method, tolerances=tol)
        Q, R = kernel(A)
    elif method == "gram_schmidt_diagonal_only":
        Q, R = qr_gram_schmidt(A, eps=tol["degeneracy_atol"])
    else:
        Q, R = qr_householder(
            A,
            rtol=tol["singularity_rtol"],
            warn_rtol=tol["conditioning_warn_rtol"],
        )

    return QRResult(Q=ensure_backend(Q, out_backend), R=ensure_backend(R, out_backend))


__all__ = ["qr_decompose"]
