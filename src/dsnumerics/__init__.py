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
dsnumerics - Numerical Kernel for Discrete Dynamical Systems

Two independent, stateless components:

**Spatial Extremum Search**
- min_pairwise_distance: closest pair of distinct points via a k-d tree
- Dataset: dimension-tagged point collection

**QR Factorizer**
- qr_decompose: Householder (full Q, R) or modified Gram-Schmidt
  (Q, diag R), general or fixed-size
- lyapunov_spectrum: tangent-space orthogonalization along an orbit

Usage
-----
>>> import numpy as np
>>> import dsnumerics as dsn
>>>
>>> pair, dist = dsn.min_pairwise_distance(np.random.rand(2, 100))
>>> Q, R = dsn.qr_decompose(np.random.rand(3, 3))
"""

from .dataset import Dataset
from .exceptions import (
    DegenerateMatrixError,
    DynamicsKernelError,
    InsufficientPointsError,
    InvalidShapeError,
    SingularMatrixError,
)
from .linalg import (
    StaticQRKernel,
    qr_decompose,
    qr_gram_schmidt,
    qr_householder,
    qr_householder_static,
    static_qr_kernel,
)
from .lyapunov import lyapunov_spectrum
from .spatial import min_pairwise_distance
from .types.results import NearestPairResult, QRResult

__version__ = "0.1.0"

__all__ = [
    "Dataset",
    "min_pairwise_distance",
    "qr_decompose",
    "qr_gram_schmidt",
    "qr_householder",
    "qr_householder_static",
    "StaticQRKernel",
    "static_qr_kernel",
    "lyapunov_spectrum",
    "NearestPairResult",
    "QRResult",
    "DynamicsKernelError",
    "InvalidShapeError",
    "InsufficientPointsError",
    "DegenerateMatrixError",
    "SingularMatrixError",
]
