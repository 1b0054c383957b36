"""Cross-section properties for beam and shell elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BeamSection3D:
    """Properties of a 3D Euler-Bernoulli or Timoshenko beam section.

    ``asy`` and ``asz`` are the effective shear areas in local y and z; a value
    of zero means the element should assume 5/6 of ``a``.
    """

    a: float
    iy: float
    iz: float
    j: float
    asy: float = 0.0
    asz: float = 0.0


@dataclass
class BeamSection2D:
    """Properties of a plane-frame beam section.

    ``asy`` is the effective shear area; zero means 5/6 of ``a``.
    """

    a: float
    iz: float
    asy: float = 0.0


@dataclass
class ShellSection:
    """Properties of a shell or plate section."""

    thickness: float