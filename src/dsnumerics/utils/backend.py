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
Backend Conversion Utilities

The kernel computes in NumPy/SciPy. These helpers detect the backend of an
incoming array and convert results back to it:
- Backend detection (get_backend, is_numpy, is_torch, is_jax)
- Conversions (ensure_numpy, ensure_backend)

PyTorch and JAX are optional. A tensor of a backend can only exist once that
backend has been imported, so detection looks the module up in
``sys.modules`` instead of importing it.
"""

import sys
from typing import Any, Optional

import numpy as np

from dsnumerics.types.backends import VALID_BACKENDS, Backend
from dsnumerics.types.core import ArrayLike

# ============================================================================
# Backend Detection
# ============================================================================


def is_numpy(x: Any) -> bool:
    """Check if array is NumPy ndarray."""
    return isinstance(x, np.ndarray)


def is_torch(x: Any) -> bool:
    """
    Check if array is PyTorch tensor.

    Examples
    --------
    >>> import torch
    >>> is_torch(torch.tensor([1, 2, 3]))
    True
    >>> is_torch(np.array([1, 2, 3]))
    False
    """
    torch = sys.modules.get("torch")
    return torch is not None and isinstance(x, torch.Tensor)


def is_jax(x: Any) -> bool:
    """Check if array is JAX array."""
    jax = sys.modules.get("jax")
    return jax is not None and isinstance(x, jax.Array)


def get_backend(x: Any, default: Optional[Backend] = None) -> Backend:
    """
    Detect backend from array type.

    Parameters
    ----------
    x : Any
        Array to check
    default : Backend, optional
        Backend reported for plain Python containers (lists, tuples).
        If None, such inputs raise TypeError.

    Returns
    -------
    Backend
        'numpy', 'torch', or 'jax'

    Raises
    ------
    TypeError
        If backend cannot be determined and no default is given

    Examples
    --------
    >>> get_backend(np.eye(2))
    'numpy'
    >>> get_backend([[1, 0], [0, 1]], default='numpy')
    'numpy'
    """
    if is_numpy(x):
        return "numpy"
    elif is_torch(x):
        return "torch"
    elif is_jax(x):
        return "jax"
    elif default is not None:
        return default
    else:
        raise TypeError(f"Unknown backend for type {type(x)}")


# ============================================================================
# Type Conversion Functions
# ============================================================================


def ensure_numpy(x: Any) -> np.ndarray:
    """
    Convert to NumPy array regardless of backend.

    Handles PyTorch tensors (detached and moved to CPU), JAX arrays and
    nested Python sequences. NumPy arrays are returned as-is.
    """
    if isinstance(x, np.ndarray):
        return x

    if is_torch(x):
        return x.detach().cpu().numpy()

    # JAX arrays and plain sequences
    return np.asarray(x)


def ensure_backend(x: np.ndarray, backend: Backend) -> ArrayLike:
    """
    Convert a NumPy result to the specified backend.

    Parameters
    ----------
    x : np.ndarray
        Result array
    backend : Backend
        Target backend ('numpy', 'torch', or 'jax')

    Returns
    -------
    ArrayLike
        Array in target backend

    Raises
    ------
    ValueError
        If backend is unknown
    """
    if backend not in VALID_BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Valid backends: {list(VALID_BACKENDS)}")

    if backend == "numpy":
        return x
    elif backend == "torch":
        import torch

        return torch.from_numpy(np.ascontiguousarray(x))
    else:
        import jax.numpy as jnp

        return jnp.array(x)


__all__ = [
    "is_numpy",
    "is_torch",
    "is_jax",
    "get_backend",
    "ensure_numpy",
    "ensure_backend",
]
