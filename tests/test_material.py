import numpy as np
import pytest

from femkit.material import (
    IsotropicLinear,
    Material3D,
    MaterialError,
    OrthotropicLinear,
)

ORTHO_ARGS = (120000, 80000, 60000, 0.25, 0.20, 0.30, 30000, 25000, 20000)


def test_isotropic_symmetry():
    d = IsotropicLinear(210000, 0.3).tangent
    for i in range(6):
        for j in range(i + 1, 6):
            assert d[i, j] == d[j, i]


def test_isotropic_diagonal_structure():
    d = IsotropicLinear(210000, 0.3).tangent
    assert abs(d[0, 0] - d[1, 1]) <= 1e-6
    assert abs(d[1, 1] - d[2, 2]) <= 1e-6
    assert abs(d[0, 1] - d[0, 2]) <= 1e-6
    assert abs(d[0, 1] - d[1, 2]) <= 1e-6
    assert abs(d[3, 3] - d[4, 4]) <= 1e-6
    assert abs(d[4, 4] - d[5, 5]) <= 1e-6
    assert np.all(np.abs(d[:3, 3:]) <= 1e-12)


def test_isotropic_shear_modulus():
    e, nu = 210000.0, 0.3
    d = IsotropicLinear(e, nu).tangent
    expected = e / (2 * (1 + nu))
    assert abs(d[3, 3] - expected) / expected <= 1e-10


def test_isotropic_uniaxial_constrained_strain():
    e, nu = 210000.0, 0.3
    m = IsotropicLinear(e, nu)
    m.set_trial_strain([1e-3, 0, 0, 0, 0, 0])
    sigma = m.stress
    expected = (1 - nu) / nu
    assert abs(sigma[0] / sigma[1] - expected) / expected <= 1e-10
    assert np.all(np.abs(sigma[3:]) <= 1e-12)


def test_isotropic_pure_shear():
    e, nu = 210000.0, 0.3
    m = IsotropicLinear(e, nu)
    g = e / (2 * (1 + nu))
    gamma = 1e-3
    m.set_trial_strain([0, 0, 0, gamma, 0, 0])
    sigma = m.stress
    expected = g * gamma
    assert abs(sigma[3] - expected) / expected <= 1e-10
    assert np.all(np.abs(sigma[:3]) <= 1e-12)


def test_isotropic_revert_to_start():
    m = IsotropicLinear(210000, 0.3)
    m.set_trial_strain([1e-3, 0, 0, 0, 0, 0])
    assert abs(m.stress[0]) > 0
    m.revert_to_start()
    assert np.all(np.abs(m.stress) <= 1e-30)


def test_isotropic_compliance_round_trip():
    e, nu = 210000.0, 0.3
    d = IsotropicLinear(e, nu).tangent
    s = np.array(
        [
            [1 / e, -nu / e, -nu / e, 0, 0, 0],
            [-nu / e, 1 / e, -nu / e, 0, 0, 0],
            [-nu / e, -nu / e, 1 / e, 0, 0, 0],
            [0, 0, 0, 2 * (1 + nu) / e, 0, 0],
            [0, 0, 0, 0, 2 * (1 + nu) / e, 0],
            [0, 0, 0, 0, 0, 2 * (1 + nu) / e],
        ]
    )
    np.testing.assert_allclose(d @ s, np.eye(6), atol=1e-10)


def test_isotropic_commit_keeps_stress():
    m = IsotropicLinear(210000, 0.3)
    m.set_trial_strain([1e-3, 0, 0, 0, 0, 0])
    before = m.stress
    m.commit_state()
    np.testing.assert_array_equal(m.stress, before)


def test_isotropic_tangent_is_read_only():
    m = IsotropicLinear(210000, 0.3)
    d = m.tangent
    original = float(d[0, 0])
    with pytest.raises(ValueError):
        d[0, 0] = 1.0
    assert m.tangent[0, 0] == original
    assert m.tangent[0, 0] == IsotropicLinear(210000, 0.3).tangent[0, 0]


def test_isotropic_incompressible_raises():
    with pytest.raises(MaterialError):
        IsotropicLinear(1.0, 0.5)


def test_strain_with_wrong_length_raises():
    m = IsotropicLinear(210000, 0.3)
    with pytest.raises(ValueError):
        m.set_trial_strain([1e-3, 0, 0])


def test_material_interface_is_abstract():
    with pytest.raises(TypeError):
        Material3D()
    assert isinstance(IsotropicLinear(1.0, 0.0), Material3D)
    assert isinstance(OrthotropicLinear(*ORTHO_ARGS), Material3D)


def test_orthotropic_isotropic_limit():
    e, nu = 200000.0, 0.3
    g = e / (2 * (1 + nu))
    ortho = OrthotropicLinear(e, e, e, nu, nu, nu, g, g, g)
    iso = IsotropicLinear(e, nu)
    np.testing.assert_allclose(ortho.tangent, iso.tangent, atol=1e-6)


def test_orthotropic_symmetry():
    d = OrthotropicLinear(*ORTHO_ARGS).tangent
    for i in range(6):
        for j in range(i + 1, 6):
            assert abs(d[i, j] - d[j, i]) <= 1e-8


def test_orthotropic_stress():
    ortho = OrthotropicLinear(*ORTHO_ARGS)
    strain = np.array([1e-3, 0, 0, 0, 0, 0])
    ortho.set_trial_strain(strain)
    expected = ortho.tangent @ strain
    np.testing.assert_allclose(ortho.stress, expected, atol=1e-10)


def test_orthotropic_uniaxial_strain():
    ortho = OrthotropicLinear(*ORTHO_ARGS)
    ortho.set_trial_strain([1e-3, 0, 0, 0, 0, 0])
    sigma = ortho.stress
    assert sigma[0] > 0
    assert abs(sigma[1]) >= 1e-6
    assert np.all(np.abs(sigma[3:]) <= 1e-12)


def test_orthotropic_revert_to_start():
    ortho = OrthotropicLinear(*ORTHO_ARGS)
    ortho.set_trial_strain([1e-3, 2e-3, 0, 0, 0, 1e-3])
    ortho.revert_to_start()
    np.testing.assert_array_equal(ortho.stress, np.zeros(6))


def test_orthotropic_singular_compliance_raises():
    with pytest.raises(MaterialError):
        OrthotropicLinear(1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 1.0, 1.0)


def test_orthotropic_zero_modulus_raises():
    with pytest.raises(MaterialError):
        OrthotropicLinear(0.0, 1.0, 1.0, 0.3, 0.3, 0.3, 1.0, 1.0, 1.0)