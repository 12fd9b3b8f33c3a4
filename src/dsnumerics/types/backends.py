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
Backend and Configuration Types

Defines types related to:
- Computational backends (NumPy, PyTorch, JAX)
- QR factorization methods
- Numerical tolerance configuration

Usage
-----
>>> from dsnumerics.types.backends import Backend, QRMethod
>>>
>>> def factorize(
...     A,
...     method: QRMethod = 'householder_full',
...     backend: Backend = 'numpy'
... ):
...     pass
"""

from typing import Literal, Tuple

from typing_extensions import TypedDict

# ============================================================================
# Backend Types
# ============================================================================

Backend = Literal["numpy", "torch", "jax"]
"""
Backend identifier for array inputs and outputs.

All computation happens in NumPy/SciPy. Tensors from other backends are
converted on the way in and results are converted back on the way out.

Valid values:
- 'numpy': NumPy arrays
- 'torch': PyTorch tensors (optional dependency)
- 'jax': JAX arrays (optional dependency)
"""

VALID_BACKENDS: Tuple[str, ...] = ("numpy", "torch", "jax")


# ============================================================================
# QR Method Types
# ============================================================================

QRMethod = Literal["gram_schmidt_diagonal_only", "householder_full"]
"""
QR factorization algorithm.

- 'gram_schmidt_diagonal_only': modified Gram-Schmidt returning Q and the
  diagonal of R only. Lightweight path for growth-rate estimates.
- 'householder_full': Householder reflections returning full Q and R.
"""

QR_METHODS: Tuple[str, ...] = ("gram_schmidt_diagonal_only", "householder_full")


# ============================================================================
# Tolerance Configuration
# ============================================================================


class ToleranceConfig(TypedDict, total=False):
    """
    Numerical tolerance configuration.

    Attributes
    ----------
    degeneracy_atol : float
        Absolute residual norm below which a Gram-Schmidt column is
        considered linearly dependent
    singularity_rtol : float
        Relative size (against the largest |r_jj|) at or below which a
        diagonal entry of R makes it singular
    conditioning_warn_rtol : float
        Relative size below which an invertible R triggers an
        ill-conditioning warning

    Examples
    --------
    >>> tol: ToleranceConfig = {'degeneracy_atol': 1e-10}
    >>> result = qr_decompose(A, method='gram_schmidt_diagonal_only', tolerances=tol)
    """

    degeneracy_atol: float
    singularity_rtol: float
    conditioning_warn_rtol: float


__all__ = [
    "Backend",
    "VALID_BACKENDS",
    "QRMethod",
    "QR_METHODS",
    "ToleranceConfig",
]
