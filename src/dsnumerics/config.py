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
Kernel Configuration

Default numerical tolerances and the helper that merges caller overrides
into them. Defaults are read-only; every call resolves its own copy.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from dsnumerics.types.backends import ToleranceConfig

# Upper bound on D for which the fixed-size QR kernels are intended
MAX_STATIC_DIM = 10

DEFAULT_TOLERANCES: Mapping[str, float] = MappingProxyType(
    {
        "degeneracy_atol": 1e-12,
        "singularity_rtol": 1e-12,
        "conditioning_warn_rtol": 1e-8,
    },
)


def resolve_tolerances(overrides: Optional[ToleranceConfig] = None) -> ToleranceConfig:
    """
    Merge tolerance overrides into the defaults.

    Parameters
    ----------
    overrides : ToleranceConfig, optional
        Partial tolerance dictionary

    Returns
    -------
    ToleranceConfig
        Complete tolerance dictionary (a fresh copy)

    Raises
    ------
    ValueError
        If an override key is unknown or a value is negative

    Examples
    --------
    >>> tol = resolve_tolerances({'degeneracy_atol': 1e-9})
    >>> tol['degeneracy_atol']
    1e-09
    >>> tol['singularity_rtol']
    1e-12
    """
    resolved: ToleranceConfig = dict(DEFAULT_TOLERANCES)  # type: ignore[assignment]
    if not overrides:
        return resolved

    unknown = set(overrides) - set(DEFAULT_TOLERANCES)
    if unknown:
        raise ValueError(
            f"Unknown tolerance keys: {sorted(unknown)}. "
            f"Valid keys: {sorted(DEFAULT_TOLERANCES)}",
        )

    for key, value in overrides.items():
        value = float(value)
        if value < 0:
            raise ValueError(f"Tolerance '{key}' must be non-negative, got {value}")
        resolved[key] = value  # type: ignore[literal-required]

    return resolved


__all__ = ["MAX_STATIC_DIM", "DEFAULT_TOLERANCES", "resolve_tolerances"]
