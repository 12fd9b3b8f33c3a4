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

"""Type aliases, configuration types and result types."""

from .backends import QR_METHODS, VALID_BACKENDS, Backend, QRMethod, ToleranceConfig
from .core import (
    ArrayLike,
    DiagonalVector,
    IndexPair,
    JacobianFunction,
    OrthogonalMatrix,
    PointList,
    PointMatrix,
    PointVector,
    SquareMatrix,
    StepFunction,
    UpperTriangularMatrix,
)
from .results import NearestPairResult, QRResult

__all__ = [
    "Backend",
    "VALID_BACKENDS",
    "QRMethod",
    "QR_METHODS",
    "ToleranceConfig",
    "ArrayLike",
    "PointMatrix",
    "PointVector",
    "PointList",
    "IndexPair",
    "SquareMatrix",
    "OrthogonalMatrix",
    "UpperTriangularMatrix",
    "DiagonalVector",
    "StepFunction",
    "JacobianFunction",
    "NearestPairResult",
    "QRResult",
]
