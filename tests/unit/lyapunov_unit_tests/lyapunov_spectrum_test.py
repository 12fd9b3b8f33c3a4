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
Unit Tests for Tangent-Space Orthogonalization

Tests cover:
- Constant-Jacobian maps with known exponents
- Hénon map: λ₁ ≈ 0.42 and λ₁ + λ₂ = ln|b|
- Agreement between QR methods and regimes
- Argument validation and error propagation
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dsnumerics import lyapunov_spectrum
from dsnumerics.exceptions import DegenerateMatrixError, InvalidShapeError, SingularMatrixError

# ============================================================================
# Test Systems
# ============================================================================

HENON_A = 1.4
HENON_B = 0.3


def henon_step(x):
    return np.array([1 - HENON_A * x[0] ** 2 + x[1], HENON_B * x[0]])


def henon_jacobian(x):
    return np.array([[-2 * HENON_A * x[0], 1.0], [HENON_B, 0.0]])


def identity_step(x):
    return x


@pytest.fixture
def henon_x0():
    return np.array([0.1, 0.1])


# ============================================================================
# Known Spectra
# ============================================================================


class TestKnownSpectra:
    """Test maps with known exponents."""

    def test_constant_diagonal_jacobian(self):
        """J = diag(2, 0.5) gives [ln 2, ln 0.5]."""
        J = np.diag([2.0, 0.5])

        lyap = lyapunov_spectrum(identity_step, lambda x: J, np.zeros(2), n_iterations=200, n_transient=0)

        assert_allclose(lyap, [np.log(2.0), np.log(0.5)], atol=1e-12)

    def test_three_dimensional_linear_map(self):
        """Triangular J: exponents are log|eigenvalues|, sorted by dominance."""
        J = np.array([[3.0, 1.0, 0.0], [0.0, 1.0, 0.2], [0.0, 0.0, 0.1]])

        lyap = lyapunov_spectrum(identity_step, lambda x: J, np.zeros(3), n_iterations=500, n_transient=0)

        assert_allclose(lyap, np.log([3.0, 1.0, 0.1]), atol=1e-2)

    def test_henon_largest_exponent(self, henon_x0):
        """Canonical Hénon: λ₁ ≈ 0.42, λ₂ ≈ -1.62."""
        lyap = lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=20000)

        assert lyap[0] == pytest.approx(0.42, abs=0.03)
        assert lyap[1] == pytest.approx(-1.62, abs=0.03)

    def test_henon_sum_is_log_det(self, henon_x0):
        """λ₁ + λ₂ = ln|det J| = ln b at every step."""
        lyap = lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=2000)

        assert lyap.sum() == pytest.approx(np.log(HENON_B), abs=1e-9)


# ============================================================================
# Method Agreement
# ============================================================================


class TestMethodAgreement:
    """Test that QR methods and regimes agree."""

    def test_householder_matches_gram_schmidt(self, henon_x0):
        gs = lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=3000)
        hh = lyapunov_spectrum(
            henon_step, henon_jacobian, henon_x0, n_iterations=3000, method="householder_full"
        )

        assert_allclose(hh, gs, atol=1e-8)

    @pytest.mark.parametrize("method", ["householder_full", "gram_schmidt_diagonal_only"])
    def test_static_matches_general(self, henon_x0, method):
        fixed = lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=1000, method=method)
        general = lyapunov_spectrum(
            henon_step, henon_jacobian, henon_x0, n_iterations=1000, method=method, static=False
        )

        assert_allclose(fixed, general, atol=1e-10)

    def test_x0_not_mutated(self, henon_x0):
        original = henon_x0.copy()
        lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=10, n_transient=10)
        np.testing.assert_array_equal(henon_x0, original)


# ============================================================================
# Error Handling
# ============================================================================


class TestErrorHandling:
    """Test argument validation and propagation."""

    @pytest.mark.parametrize("n_iterations", [0, -5])
    def test_non_positive_iterations(self, henon_x0, n_iterations):
        with pytest.raises(ValueError, match="n_iterations"):
            lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_iterations=n_iterations)

    def test_negative_transient(self, henon_x0):
        with pytest.raises(ValueError, match="n_transient"):
            lyapunov_spectrum(henon_step, henon_jacobian, henon_x0, n_transient=-1)

    def test_wrong_jacobian_shape(self, henon_x0):
        with pytest.raises(InvalidShapeError, match="jacobian"):
            lyapunov_spectrum(henon_step, lambda x: np.eye(3), henon_x0, n_iterations=5, n_transient=0)

    def test_singular_jacobian_gram_schmidt(self):
        """Zero Jacobian collapses the tangent basis."""
        with pytest.raises(DegenerateMatrixError):
            lyapunov_spectrum(
                identity_step, lambda x: np.zeros((2, 2)), np.zeros(2), n_iterations=5, n_transient=0
            )

    def test_singular_jacobian_householder(self):
        with pytest.raises(SingularMatrixError):
            lyapunov_spectrum(
                identity_step,
                lambda x: np.zeros((2, 2)),
                np.zeros(2),
                n_iterations=5,
                n_transient=0,
                method="householder_full",
            )

    def test_diverging_orbit(self):
        """An orbit that escapes to infinity during the transient is reported."""

        def explode(x):
            return x * 1e200

        with pytest.raises(ValueError, match="non-finite"):
            lyapunov_spectrum(explode, lambda x: np.eye(1), np.ones(1), n_iterations=5, n_transient=5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
