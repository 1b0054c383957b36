import math

import numpy as np
import pytest

from femkit.eigen import (
    expand_modes,
    extract_submatrix,
    frequency_hz,
    period_seconds,
    solve_generalized_eigen,
)
from femkit.linear_solver import SolverError


def build_2dof():
    k = np.array([[2.0, -1.0], [-1.0, 2.0]])
    m = np.eye(2)
    return k, m


def eigen_residuals(k, m, result):
    return [
        np.linalg.norm(k @ result.modes[:, i] - w * (m @ result.modes[:, i]))
        for i, w in enumerate(result.omega2)
    ]


def mass_gram(m, result):
    return result.modes.T @ m @ result.modes


def test_eigenvalues_identity_mass():
    k, m = build_2dof()
    res = solve_generalized_eigen(k, m, 2)
    np.testing.assert_allclose(res.omega2, [1.0, 3.0], atol=1e-10)


def test_eigen_residual():
    k, m = build_2dof()
    res = solve_generalized_eigen(k, m, 2)
    assert max(eigen_residuals(k, m, res)) < 1e-10


def test_m_orthonormality():
    k, m = build_2dof()
    res = solve_generalized_eigen(k, m, 2)
    np.testing.assert_allclose(mass_gram(m, res), np.eye(2), atol=1e-10)


def test_non_identity_mass():
    k = np.array([[5.0, -1.0], [-1.0, 2.0]])
    m = np.array([[4.0, 0.0], [0.0, 1.0]])
    res = solve_generalized_eigen(k, m, 2)
    np.testing.assert_allclose(res.omega2, [1.0, 9.0 / 4.0], atol=1e-10)
    assert max(eigen_residuals(k, m, res)) < 1e-10
    np.testing.assert_allclose(mass_gram(m, res), np.eye(2), atol=1e-10)


def test_num_modes_subset():
    n = 4
    k = 2.0 * np.eye(n) - np.eye(n, k=1) - np.eye(n, k=-1)
    m = np.eye(n)
    res = solve_generalized_eigen(k, m, 1)
    assert len(res.omega2) == 1
    assert res.modes.shape == (4, 1)
    assert max(eigen_residuals(k, m, res)) < 1e-10


def test_num_modes_zero_returns_all():
    k, m = build_2dof()
    res = solve_generalized_eigen(k, m, 0)
    assert res.modes.shape == (2, 2)
    np.testing.assert_allclose(res.omega2, [1.0, 3.0], atol=1e-10)


def test_mass_not_pd():
    k = np.array([[2.0, -1.0], [-1.0, 2.0]])
    m = np.zeros((2, 2))
    with pytest.raises(SolverError):
        solve_generalized_eigen(k, m, 2)


def test_extract_submatrix_basic():
    a = np.array(
        [
            [10.0, 11.0, 12.0, 13.0],
            [14.0, 15.0, 16.0, 17.0],
            [18.0, 19.0, 20.0, 21.0],
            [22.0, 23.0, 24.0, 25.0],
        ]
    )
    sub = extract_submatrix(a, [1, 3])
    np.testing.assert_array_equal(sub, [[15.0, 17.0], [23.0, 25.0]])


def test_extract_submatrix_all_dofs():
    a = np.arange(1.0, 10.0).reshape(3, 3)
    sub = extract_submatrix(a, [0, 1, 2])
    np.testing.assert_array_equal(sub, a)


def test_expand_modes_basic():
    modes_red = np.array([[0.5, 0.8], [0.3, 0.6]])
    full = expand_modes(modes_red, [1, 3], 4)
    assert full.shape == (4, 2)
    np.testing.assert_array_equal(
        full, [[0.0, 0.0], [0.5, 0.8], [0.0, 0.0], [0.3, 0.6]]
    )


@pytest.mark.parametrize(
    "omega2, want",
    [
        (4 * math.pi * math.pi, 1.0),
        (0.0, 0.0),
        (-1.0, 0.0),
        (math.pi * math.pi, 0.5),
    ],
)
def test_frequency_hz(omega2, want):
    assert abs(frequency_hz(omega2) - want) <= 1e-12


def test_period_seconds():
    assert abs(period_seconds(4 * math.pi * math.pi) - 1.0) <= 1e-12
    assert period_seconds(0.0) == math.inf
    assert abs(period_seconds(math.pi * math.pi) - 2.0) <= 1e-12