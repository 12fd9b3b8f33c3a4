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
Result Types

Structured return values of the kernel operations. Both are NamedTuples so
they unpack like the plain pairs callers expect:

>>> pair, dist = min_pairwise_distance(points)
>>> Q, R = qr_decompose(A)
"""

from typing import NamedTuple, Union

from .core import DiagonalVector, IndexPair, OrthogonalMatrix, UpperTriangularMatrix


class NearestPairResult(NamedTuple):
    """
    Closest pair of distinct points.

    Fields
    ------
    pair : IndexPair
        0-based indices (i, j), i != j, in the order they were discovered
        (i is the query point, j its nearest neighbour)
    distance : float
        Euclidean distance between points i and j
    """

    pair: IndexPair
    distance: float


class QRResult(NamedTuple):
    """
    QR factorization of a square matrix.

    Fields
    ------
    Q : OrthogonalMatrix
        Orthogonal factor, shape (D, D)
    R : UpperTriangularMatrix or DiagonalVector
        Upper-triangular factor, shape (D, D), or its diagonal with
        shape (D,) when produced by the Gram-Schmidt method
    """

    Q: OrthogonalMatrix
    R: Union[UpperTriangularMatrix, DiagonalVector]


__all__ = ["NearestPairResult", "QRResult"]
