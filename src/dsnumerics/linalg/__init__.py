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
QR factorization of square matrices.

- qr_decompose: method/regime dispatcher
- qr_householder, qr_householder_static: full Q and R
- qr_gram_schmidt: Q and diagonal of R
- static_qr_kernel: kernels bound to a fixed dimension
"""

from .gram_schmidt import qr_gram_schmidt
from .householder import qr_householder, qr_householder_static
from .qr import qr_decompose
from .static import StaticQRKernel, static_qr_kernel

__all__ = [
    "qr_decompose",
    "qr_householder",
    "qr_householder_static",
    "qr_gram_schmidt",
    "StaticQRKernel",
    "static_qr_kernel",
]
