"""Generalized symmetric eigenvalue problems for modal analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from femkit.linear_solver import SolverError


@dataclass
class EigenResult:
    """Smallest eigenvalues and their mass-normalised mode shapes.

    ``omega2`` holds the eigenvalues (rad^2/s^2) in ascending order;
    ``modes`` is an (ndof x num_modes) array whose columns satisfy
    phi.T @ M @ phi = 1.
    """

    omega2: np.ndarray
    modes: np.ndarray


def solve_generalized_eigen(K, M, num_modes=0):
    """Solve K @ phi = omega2 * M @ phi for the ``num_modes`` smallest eigenvalues.

    A non-positive or too large ``num_modes`` returns all modes. The mass
    matrix is Cholesky factorised and the problem reduced to standard form.
    """
    k = np.asarray(K, dtype=float)
    m = np.asarray(M, dtype=float)
    if k.ndim != 2 or k.shape[0] != k.shape[1] or m.shape != k.shape:
        raise ValueError(
            f"K and M must be square matrices of equal size, got {k.shape} and {m.shape}"
        )
    n = k.shape[0]
    if num_modes <= 0 or num_modes > n:
        num_modes = n

    k_sym = (k + k.T) / 2.0
    m_sym = (m + m.T) / 2.0

    try:
        lower = np.linalg.cholesky(m_sym)
    except np.linalg.LinAlgError:
        raise SolverError(
            "eigen: mass matrix is not positive definite (check BCs and densities)"
        ) from None

    try:
        lower_inv = np.linalg.solve(lower, np.eye(n))
    except np.linalg.LinAlgError as exc:
        raise SolverError(f"eigen: cannot invert Cholesky factor: {exc}") from None

    a = lower_inv @ k_sym @ lower_inv.T
    a = (a + a.T) / 2.0

    try:
        values, vectors = np.linalg.eigh(a)
    except np.linalg.LinAlgError:
        raise SolverError("eigen: symmetric eigenvalue factorization failed") from None

    modes = lower_inv.T @ vectors[:, :num_modes]
    return EigenResult(omega2=values[:num_modes].copy(), modes=modes)


def extract_submatrix(A, free_dofs):
    """Return the square submatrix of ``A`` on the rows and columns in ``free_dofs``."""
    a = np.asarray(A, dtype=float)
    idx = np.asarray(list(free_dofs), dtype=int)
    return a[np.ix_(idx, idx)].copy()


def expand_modes(modes_red, free_dofs, ndof):
    """Place reduced mode rows at ``free_dofs`` in an ndof-row array, zero elsewhere."""
    reduced = np.asarray(modes_red, dtype=float)
    full = np.zeros((ndof, reduced.shape[1]))
    full[np.asarray(list(free_dofs), dtype=int)] = reduced
    return full


def frequency_hz(omega2):
    """Convert omega^2 (rad^2/s^2) to a frequency in Hz; non-positive values give 0."""
    if omega2 <= 0:
        return 0.0
    return math.sqrt(omega2) / (2.0 * math.pi)


def period_seconds(omega2):
    """Return the natural period 1/f, or infinity for a zero frequency."""
    f = frequency_hz(omega2)
    if f <= 0:
        return math.inf
    return 1.0 / f