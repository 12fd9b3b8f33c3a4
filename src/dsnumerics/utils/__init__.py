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

"""Backend conversion and input validation helpers."""

from .backend import ensure_backend, ensure_numpy, get_backend, is_jax, is_numpy, is_torch
from .validation import as_point_array, as_square_matrix, check_finite

__all__ = [
    "is_numpy",
    "is_torch",
    "is_jax",
    "get_backend",
    "ensure_numpy",
    "ensure_backend",
    "check_finite",
    "as_square_matrix",
    "as_point_array",
]
