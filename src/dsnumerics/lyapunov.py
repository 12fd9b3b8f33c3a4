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
Tangent-Space Orthogonalization

Lyapunov spectrum of a discrete map by repeated QR factorization of the
evolved tangent basis:

    Q_0 = I
    Q_{n+1}, R_{n+1} = qr(J(x_n) · Q_n)
    λ_k ≈ (1/N) Σ_n log|r_kk^(n)|

The map and its Jacobian are injected by the caller; how the Jacobian is
obtained (by hand, symbolically, or by automatic differentiation) is not
this module's concern.
"""

from typing import Optional

import numpy as np

from dsnumerics.exceptions import InvalidShapeError
from dsnumerics.linalg.qr import qr_decompose
from dsnumerics.linalg.static import static_qr_kernel
from dsnumerics.types.backends import QRMethod, ToleranceConfig
from dsnumerics.types.core import JacobianFunction, StepFunction
from dsnumerics.utils.backend import ensure_numpy
from dsnumerics.utils.validation import check_finite


def lyapunov_spectrum(
    step: StepFunction,
    jacobian: JacobianFunction,
    x0: np.ndarray,
    n_iterations: int = 10000,
    n_transient: int = 1000,
    method: QRMethod = "gram_schmidt_diagonal_only",
    static: bool = True,
    tolerances: Optional[ToleranceConfig] = None,
) -> np.ndarray:
    """
    Estimate all Lyapunov exponents of a discrete map.

    Parameters
    ----------
    step : StepFunction
        One-step update x[n+1] = step(x[n])
    jacobian : JacobianFunction
        Jacobian of step at a state, shape (D, D)
    x0 : np.ndarray
        Initial state, shape (D,); not modified
    n_iterations : int
        Number of iterations for averaging (> 0)
    n_transient : int
        Number of initial iterations to discard (>= 0)
    method : QRMethod
        QR method used for re-orthonormalization. The default
        'gram_schmidt_diagonal_only' only computes what is needed.
    static : bool
        Use the fixed-size QR kernel for dimension D (default True)
    tolerances : ToleranceConfig, optional
        Tolerance overrides forwarded to the factorization

    Returns
    -------
    np.ndarray
        Exponents λ_k, shape (D,), in the order of the orthonormalized
        tangent vectors (largest first for generic initial conditions)

    Raises
    ------
    ValueError
        If n_iterations <= 0, n_transient < 0, or the orbit leaves the
        finite range
    InvalidShapeError
        If jacobian does not return a (D, D) matrix
    DegenerateMatrixError, SingularMatrixError
        Propagated unchanged from the factorization

    Examples
    --------
    Hénon map (a=1.4, b=0.3):

    >>> step = lambda x: np.array([1 - 1.4 * x[0]**2 + x[1], 0.3 * x[0]])
    >>> jac = lambda x: np.array([[-2.8 * x[0], 1.0], [0.3, 0.0]])
    >>> lyap = lyapunov_spectrum(step, jac, np.array([0.1, 0.1]), n_iterations=20000)
    >>> lyap                               # approximately [0.42, -1.62]
    >>> lyap.sum()                         # ln(0.3) ≈ -1.204

    Notes
    -----
    For dissipative maps with constant Jacobian determinant the exponents
    sum to ln|det J| regardless of the orbit.
    """
    if n_iterations <= 0:
        raise ValueError(f"n_iterations must be positive, got {n_iterations}")
    if n_transient < 0:
        raise ValueError(f"n_transient must be non-negative, got {n_transient}")

    x = np.array(ensure_numpy(x0), dtype=np.float64).reshape(-1)
    dim = x.shape[0]

    if static:
        kernel = static_qr_kernel(dim, method, tolerances=tolerances)
    else:

        def kernel(M):
            return qr_decompose(M, method=method, tolerances=tolerances)

    # Discard transient
    for _ in range(n_transient):
        x = np.asarray(step(x), dtype=np.float64)
    check_finite(x, "state after transient")

    # Initialize orthonormal basis
    Q = np.eye(dim)
    lyap_sum = np.zeros(dim)

    for _ in range(n_iterations):
        J = np.asarray(ensure_numpy(jacobian(x)), dtype=np.float64)
        if J.shape != (dim, dim):
            raise InvalidShapeError(
                f"jacobian must return a ({dim}, {dim}) matrix, got shape {J.shape}",
            )

        # Evolve tangent vectors and re-orthonormalize
        Q, R = kernel(J @ Q)
        r_diag = R if R.ndim == 1 else np.diag(R)

        lyap_sum += np.log(np.abs(r_diag))

        x = np.asarray(step(x), dtype=np.float64)

    return lyap_sum / n_iterations


__all__ = ["lyapunov_spectrum"]
