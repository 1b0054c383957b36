"""Gauss quadrature rules for line, quadrilateral, hexahedral, triangular and tetrahedral domains."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class QuadraturePoint:
    """A quadrature point in natural coordinates together with its weight."""

    xi: float = 0.0
    eta: float = 0.0
    zeta: float = 0.0
    weight: float = 0.0


def gauss_line(n):
    """Return the n-point Gauss-Legendre rule on [-1, 1] (n = 1..4)."""
    if n == 1:
        return [QuadraturePoint(xi=0.0, weight=2.0)]
    if n == 2:
        g = 1.0 / math.sqrt(3.0)
        return [
            QuadraturePoint(xi=-g, weight=1.0),
            QuadraturePoint(xi=g, weight=1.0),
        ]
    if n == 3:
        g = math.sqrt(3.0 / 5.0)
        return [
            QuadraturePoint(xi=-g, weight=5.0 / 9.0),
            QuadraturePoint(xi=0.0, weight=8.0 / 9.0),
            QuadraturePoint(xi=g, weight=5.0 / 9.0),
        ]
    if n == 4:
        a = math.sqrt(3.0 / 7.0 - 2.0 / 7.0 * math.sqrt(6.0 / 5.0))
        b = math.sqrt(3.0 / 7.0 + 2.0 / 7.0 * math.sqrt(6.0 / 5.0))
        wa = (18.0 + math.sqrt(30.0)) / 36.0
        wb = (18.0 - math.sqrt(30.0)) / 36.0
        return [
            QuadraturePoint(xi=-b, weight=wb),
            QuadraturePoint(xi=-a, weight=wa),
            QuadraturePoint(xi=a, weight=wa),
            QuadraturePoint(xi=b, weight=wb),
        ]
    raise ValueError(f"unsupported Gauss-Legendre order {n}; expected 1 to 4")


def gauss_quad(n):
    """Return the n x n product Gauss rule on the square [-1, 1]^2."""
    line = gauss_line(n)
    return [
        QuadraturePoint(xi=a.xi, eta=b.xi, weight=a.weight * b.weight)
        for a, b in itertools.product(line, repeat=2)
    ]


def gauss_hex(n):
    """Return the n x n x n product Gauss rule on the cube [-1, 1]^3."""
    line = gauss_line(n)
    return [
        QuadraturePoint(
            xi=a.xi,
            eta=b.xi,
            zeta=c.xi,
            weight=a.weight * b.weight * c.weight,
        )
        for a, b, c in itertools.product(line, repeat=3)
    ]


def tet1():
    """One-point rule on the unit tetrahedron (volume 1/6)."""
    return [QuadraturePoint(xi=0.25, eta=0.25, zeta=0.25, weight=1.0 / 6.0)]


def tet4():
    """Four-point rule on the unit tetrahedron."""
    a = 0.5854101966249685
    b = 0.1381966011250105
    w = 1.0 / 24.0
    return [
        QuadraturePoint(xi=a, eta=b, zeta=b, weight=w),
        QuadraturePoint(xi=b, eta=a, zeta=b, weight=w),
        QuadraturePoint(xi=b, eta=b, zeta=a, weight=w),
        QuadraturePoint(xi=b, eta=b, zeta=b, weight=w),
    ]


def tet5():
    """Five-point rule on the unit tetrahedron (degree 3)."""
    a = 0.25
    b = 1.0 / 6.0
    c = 0.5
    w0 = -4.0 / 30.0
    w1 = 3.0 / 40.0
    return [
        QuadraturePoint(xi=a, eta=a, zeta=a, weight=w0),
        QuadraturePoint(xi=b, eta=b, zeta=b, weight=w1),
        QuadraturePoint(xi=c, eta=b, zeta=b, weight=w1),
        QuadraturePoint(xi=b, eta=c, zeta=b, weight=w1),
        QuadraturePoint(xi=b, eta=b, zeta=c, weight=w1),
    ]


def tri1():
    """One-point rule on the unit triangle (area 1/2)."""
    return [QuadraturePoint(xi=1.0 / 3.0, eta=1.0 / 3.0, weight=0.5)]


def tri3():
    """Three-point rule on the unit triangle."""
    return [
        QuadraturePoint(xi=1.0 / 6.0, eta=1.0 / 6.0, weight=1.0 / 6.0),
        QuadraturePoint(xi=2.0 / 3.0, eta=1.0 / 6.0, weight=1.0 / 6.0),
        QuadraturePoint(xi=1.0 / 6.0, eta=2.0 / 3.0, weight=1.0 / 6.0),
    ]