"""Three-dimensional linear elastic constitutive models.

Strain and stress vectors use Voigt notation with six components:
[xx, yy, zz, xy, yz, xz].
"""

from __future__ import annotations

import abc

import numpy as np

_CONDITION_LIMIT = 1e16


class MaterialError(ValueError):
    """Raised when material parameters do not define a valid stiffness."""


def _as_strain(strain):
    arr = np.asarray(strain, dtype=float)
    if arr.shape != (6,):
        raise ValueError(f"strain must have 6 Voigt components, got shape {arr.shape}")
    return arr


def _frozen(matrix):
    matrix = np.array(matrix, dtype=float)
    matrix.setflags(write=False)
    return matrix


class Material3D(abc.ABC):
    """Interface for 3D constitutive laws."""

    @abc.abstractmethod
    def set_trial_strain(self, strain):
        """Set the trial strain and compute the corresponding stress."""

    @property
    @abc.abstractmethod
    def stress(self):
        """Current stress vector (6 components)."""

    @property
    @abc.abstractmethod
    def tangent(self):
        """The 6x6 material tangent matrix."""

    @abc.abstractmethod
    def commit_state(self):
        """Commit the current trial state."""

    @abc.abstractmethod
    def revert_to_start(self):
        """Reset the material to its initial state."""


class _LinearElastic(Material3D):
    """Shared state handling for linear elastic materials."""

    _tangent: np.ndarray

    def _init_state(self):
        self._stress = np.zeros(6)
        self._committed_stress = np.zeros(6)

    def set_trial_strain(self, strain):
        self._stress = self._tangent @ _as_strain(strain)

    @property
    def stress(self):
        return self._stress.copy()

    @property
    def committed_stress(self):
        """Stress stored by the last commit."""
        return self._committed_stress.copy()

    @property
    def tangent(self):
        return self._tangent

    def commit_state(self):
        self._committed_stress = self._stress.copy()

    def revert_to_start(self):
        self._init_state()


class IsotropicLinear(_LinearElastic):
    """Linear elastic isotropic material defined by Young's modulus and Poisson's ratio."""

    def __init__(self, e, nu):
        self.e = float(e)
        self.nu = float(nu)
        self._tangent = _frozen(self._build_tangent())
        self._init_state()

    def __repr__(self):
        return f"IsotropicLinear(e={self.e!r}, nu={self.nu!r})"

    def _build_tangent(self):
        e, nu = self.e, self.nu
        denominator = (1.0 + nu) * (1.0 - 2.0 * nu)
        if denominator == 0.0:
            raise MaterialError(f"Poisson's ratio {nu} gives an unbounded stiffness")
        c = e / denominator
        d = np.zeros((6, 6))
        d[:3, :3] = c * nu
        np.fill_diagonal(d[:3, :3], c * (1.0 - nu))
        shear = c * (1.0 - 2.0 * nu) / 2.0
        d[3, 3] = d[4, 4] = d[5, 5] = shear
        return d

    def set_trial_strain(self, strain):
        super().set_trial_strain(strain)

    def commit_state(self):
        super().commit_state()

    def revert_to_start(self):
        super().revert_to_start()


class OrthotropicLinear(_LinearElastic):
    """Linear elastic orthotropic material aligned with the global axes.

    Poisson's ratios ``nxy``, ``nyz`` and ``nxz`` give the lateral strain in the
    second direction per unit strain in the first. The stiffness is the inverse
    of the compliance matrix built with Maxwell reciprocity.
    """

    def __init__(self, ex, ey, ez, nxy, nyz, nxz, gxy, gyz, gxz):
        self.ex, self.ey, self.ez = float(ex), float(ey), float(ez)
        self.nxy, self.nyz, self.nxz = float(nxy), float(nyz), float(nxz)
        self.gxy, self.gyz, self.gxz = float(gxy), float(gyz), float(gxz)
        self._tangent = _frozen(self._build_tangent())
        self._init_state()

    def __repr__(self):
        return (
            f"OrthotropicLinear(ex={self.ex!r}, ey={self.ey!r}, ez={self.ez!r}, "
            f"nxy={self.nxy!r}, nyz={self.nyz!r}, nxz={self.nxz!r}, "
            f"gxy={self.gxy!r}, gyz={self.gyz!r}, gxz={self.gxz!r})"
        )

    def _compliance(self):
        nyx = self.nxy * self.ey / self.ex
        nzx = self.nxz * self.ez / self.ex
        nzy = self.nyz * self.ez / self.ey
        s = np.zeros((6, 6))
        s[:3, :3] = [
            [1.0 / self.ex, -nyx / self.ey, -nzx / self.ez],
            [-self.nxy / self.ex, 1.0 / self.ey, -nzy / self.ez],
            [-self.nxz / self.ex, -self.nyz / self.ey, 1.0 / self.ez],
        ]
        s[3, 3] = 1.0 / self.gxy
        s[4, 4] = 1.0 / self.gyz
        s[5, 5] = 1.0 / self.gxz
        return s

    def _build_tangent(self):
        singular = MaterialError(
            "orthotropic material: compliance matrix is singular - check parameters"
        )
        try:
            compliance = self._compliance()
        except ZeroDivisionError:
            raise singular from None
        try:
            stiffness = np.linalg.inv(compliance)
        except np.linalg.LinAlgError:
            raise singular from None
        condition = np.linalg.cond(compliance)
        if not np.isfinite(condition) or condition > _CONDITION_LIMIT:
            raise singular
        if not np.all(np.isfinite(stiffness)):
            raise singular
        return stiffness

    def set_trial_strain(self, strain):
        super().set_trial_strain(strain)

    def commit_state(self):
        super().commit_state()

    def revert_to_start(self):
        super().revert_to_start()