"""Finite element building blocks: quadrature rules, elastic materials, sections, zero-length springs, and linear and eigenvalue solvers."""

__version__ = "0.1.0"
__all__ = ["integration", "material", "section", "zerolength", "linear_solver", "eigen"]