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
Unit Tests for Fixed-Size QR Kernels

Tests cover:
- Kernel caching and immutability
- Dimension binding
- Agreement with the general path
- Concurrent use of one kernel
- Argument validation and the large-dimension warning
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dsnumerics.exceptions import InvalidShapeError
from dsnumerics.linalg import StaticQRKernel, qr_gram_schmidt, qr_householder, static_qr_kernel


class TestKernelConstruction:
    """Test building kernels."""

    def test_kernel_is_cached(self):
        """Same dimension and method reuse one kernel."""
        assert static_qr_kernel(3) is static_qr_kernel(3)

    def test_methods_give_different_kernels(self):
        gs = static_qr_kernel(3, "gram_schmidt_diagonal_only")
        hh = static_qr_kernel(3, "householder_full")

        assert gs is not hh
        assert gs.method == "gram_schmidt_diagonal_only"
        assert hh.method == "householder_full"

    def test_tolerance_override_gives_new_kernel(self):
        default = static_qr_kernel(2, "gram_schmidt_diagonal_only")
        loose = static_qr_kernel(2, "gram_schmidt_diagonal_only", tolerances={"degeneracy_atol": 1e-3})

        assert loose is not default
        assert loose.degeneracy_atol == 1e-3

    def test_kernel_is_frozen(self):
        kernel = static_qr_kernel(2)
        assert isinstance(kernel, StaticQRKernel)

        with pytest.raises(dataclasses.FrozenInstanceError):
            kernel.dim = 3

    @pytest.mark.parametrize("dim", [0, -1, 2.5])
    def test_invalid_dim(self, dim):
        with pytest.raises(ValueError):
            static_qr_kernel(dim)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="method"):
            static_qr_kernel(2, "cholesky")

    def test_large_dim_warns(self):
        with pytest.warns(UserWarning, match="dim=12"):
            kernel = static_qr_kernel(12)

        assert kernel.dim == 12


class TestKernelCalls:
    """Test calling kernels."""

    @pytest.fixture
    def matrices(self):
        rng = np.random.default_rng(99)
        return [rng.standard_normal((4, 4)) + 4 * np.eye(4) for _ in range(8)]

    def test_householder_matches_general(self, matrices):
        kernel = static_qr_kernel(4, "householder_full")

        for A in matrices:
            Q, R = kernel(A)
            Q_ref, R_ref = qr_householder(A)
            assert_allclose(Q, Q_ref, atol=1e-12)
            assert_allclose(R, R_ref, atol=1e-12)

    def test_gram_schmidt_matches_function(self, matrices):
        kernel = static_qr_kernel(4, "gram_schmidt_diagonal_only")

        for A in matrices:
            Q, r_diag = kernel(A)
            Q_ref, r_ref = qr_gram_schmidt(A)
            assert_allclose(Q, Q_ref, atol=1e-14)
            assert_allclose(r_diag, r_ref, atol=1e-14)

    def test_wrong_dimension(self):
        kernel = static_qr_kernel(3)

        with pytest.raises(InvalidShapeError, match="3x3"):
            kernel(np.eye(2))

    def test_concurrent_calls(self, matrices):
        """One kernel shared by several threads gives the serial results."""
        kernel = static_qr_kernel(4, "householder_full")
        serial = [kernel(A) for A in matrices]

        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(kernel, matrices))

        for (Q, R), (Qp, Rp) in zip(serial, parallel):
            assert_allclose(Qp, Q, atol=0)
            assert_allclose(Rp, R, atol=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
