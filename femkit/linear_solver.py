"""Direct and iterative solvers for the linear system K @ u = F."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass

import numpy as np


class SolverError(ArithmeticError):
    """Raised when a linear system cannot be solved."""


class ConvergenceError(SolverError):
    """Raised when an iterative solver stops before reaching its tolerance.

    The last iterate is kept in ``solution``.
    """

    def __init__(self, message, solution):
        super().__init__(message)
        self.solution = solution


def _system(K, F):
    k = np.asarray(K, dtype=float)
    f = np.asarray(F, dtype=float)
    if k.ndim != 2 or k.shape[0] != k.shape[1]:
        raise ValueError(f"stiffness matrix must be square, got shape {k.shape}")
    if f.shape != (k.shape[0],):
        raise ValueError(
            f"load vector must have {k.shape[0]} entries, got shape {f.shape}"
        )
    return k, f


def _symmetrized(k):
    return (k + k.T) / 2.0


class LinearSolver(abc.ABC):
    """Interface of a solver for K @ u = F."""

    @abc.abstractmethod
    def solve(self, K, F):
        """Return the solution vector u of K @ u = F."""


@dataclass(frozen=True)
class Cholesky(LinearSolver):
    """Dense Cholesky solver for symmetric positive-definite systems."""

    def solve(self, K, F):
        k, f = _system(K, F)
        try:
            lower = np.linalg.cholesky(_symmetrized(k))
        except np.linalg.LinAlgError:
            raise SolverError("cholesky: matrix is not positive definite") from None
        z = np.linalg.solve(lower, f)
        return np.linalg.solve(lower.T, z)


@dataclass(frozen=True)
class LU(LinearSolver):
    """Dense LU solver for general systems."""

    def solve(self, K, F):
        k, f = _system(K, F)
        try:
            return np.linalg.solve(k, f)
        except np.linalg.LinAlgError as exc:
            raise SolverError(f"LU solve: {exc}") from None


@dataclass(frozen=True)
class SkylineLDL(LinearSolver):
    """Symmetric variable-bandwidth (skyline) LDL^T direct solver.

    The profile is taken from entries whose magnitude exceeds
    ``zero_tol`` times the largest diagonal magnitude; a non-positive
    ``zero_tol`` selects the default 1e-14.
    """

    zero_tol: float = 1e-14

    def solve(self, K, F):
        k, f = _system(K, F)
        n = k.shape[0]
        zero_tol = self.zero_tol if self.zero_tol > 0 else 1e-14

        max_diag = float(np.max(np.abs(np.diag(k)), initial=0.0))
        if max_diag == 0.0:
            raise SolverError("skyline ldl: all diagonal entries are zero")
        thresh = zero_tol * max_diag

        sky = []
        for i in range(n):
            mask = (np.abs(k[i, :i]) > thresh) | (np.abs(k[:i, i]) > thresh)
            nonzero = np.flatnonzero(mask)
            sky.append(int(nonzero[0]) if nonzero.size else i)

        # rows[i] holds L[i, sky[i]:i]; the diagonal lives in d.
        rows = [(k[i, s:i] + k[s:i, i]) / 2.0 for i, s in enumerate(sky)]
        d = np.diag(k).astype(float)

        below = [[] for _ in range(n)]
        for row, s in enumerate(sky):
            for col in range(s, row):
                below[col].append(row)

        for i in range(n):
            si = sky[i]
            row_i = rows[i]
            d[i] -= float(np.sum(row_i * row_i * d[si:i]))
            if abs(d[i]) < 1e-14 * max_diag:
                raise SolverError(f"skyline ldl: zero pivot at row {i} (D = {d[i]:g})")
            for r in below[i]:
                sr = sky[r]
                row_r = rows[r]
                start = max(sr, si)
                lri = row_r[i - sr] - float(
                    np.sum(row_r[start - sr:i - sr] * row_i[start - si:i - si] * d[start:i])
                )
                row_r[i - sr] = lri / d[i]

        z = f.copy()
        for i, (s, row_i) in enumerate(zip(sky, rows)):
            z[i] -= float(row_i @ z[s:i])
        z /= d
        for i in reversed(range(n)):
            z[i] -= sum(rows[r][i - sky[r]] * z[r] for r in below[i])
        return z


@dataclass(frozen=True)
class CG(LinearSolver):
    """Conjugate Gradient solver for symmetric positive-definite systems.

    Stops when ||r|| / ||F|| < ``tol``. ``max_iter`` defaults to 3 n.
    Non-positive settings select the defaults.
    """

    tol: float = 1e-10
    max_iter: int | None = None

    def solve(self, K, F):
        k, f = _system(K, F)
        n = k.shape[0]
        tol = self.tol if self.tol > 0 else 1e-10
        max_iter = self.max_iter if self.max_iter and self.max_iter > 0 else 3 * n
        max_iter = max(max_iter, 1)

        x = np.zeros(n)
        bnorm2 = float(f @ f)
        if bnorm2 == 0.0:
            return x
        r = f.copy()
        p = r.copy()
        rsold = bnorm2

        for iteration in range(max_iter):
            ap = k @ p
            pap = float(p @ ap)
            if pap <= 0.0:
                raise SolverError(
                    f"cg: matrix not positive-definite at iteration {iteration} "
                    f"(p·K·p = {pap:g})"
                )
            alpha = rsold / pap
            x = x + alpha * p
            r = r - alpha * ap
            rsnew = float(r @ r)
            if rsnew <= tol * tol * bnorm2:
                return x
            p = r + (rsnew / rsold) * p
            rsold = rsnew

        raise ConvergenceError(
            f"cg: did not converge in {max_iter} iterations "
            f"(relative residual = {math.sqrt(rsold / bnorm2):g})",
            x,
        )


@dataclass(frozen=True)
class GMRES(LinearSolver):
    """Restarted GMRES(m) solver for general systems.

    Stops when ||r|| / ||F|| < ``tol``. ``restart`` is the Krylov dimension
    per cycle (default 50, capped at n); ``max_iter`` is the number of
    restart cycles (default ceil(3 n / restart)). Non-positive settings
    select the defaults.
    """

    tol: float = 1e-10
    max_iter: int | None = None
    restart: int = 50

    def solve(self, K, F):
        k, f = _system(K, F)
        n = k.shape[0]
        tol = self.tol if self.tol > 0 else 1e-10

        bnorm = float(np.linalg.norm(f))
        if bnorm == 0.0:
            return np.zeros(n)

        m = min(self.restart if self.restart > 0 else 50, n)
        if self.max_iter and self.max_iter > 0:
            max_outer = self.max_iter
        else:
            max_outer = max((3 * n + m - 1) // m, 1)

        x = np.zeros(n)
        q = np.zeros((m + 1, n))
        h = np.zeros((m + 1, m))
        cs = np.zeros(m)
        sn = np.zeros(m)
        gv = np.zeros(m + 1)

        for _ in range(max_outer):
            r = f - k @ x
            rnorm = float(np.linalg.norm(r))
            if rnorm <= tol * bnorm:
                return x

            q[0] = r / rnorm
            gv[:] = 0.0
            gv[0] = rnorm

            steps = m
            for j in range(m):
                w = k @ q[j]
                for i in range(j + 1):
                    h[i, j] = float(w @ q[i])
                    w = w - h[i, j] * q[i]
                h[j + 1, j] = float(np.linalg.norm(w))
                if h[j + 1, j] > 1e-14:
                    q[j + 1] = w / h[j + 1, j]

                for i in range(j):
                    hij, hi1j = h[i, j], h[i + 1, j]
                    h[i, j] = cs[i] * hij + sn[i] * hi1j
                    h[i + 1, j] = -sn[i] * hij + cs[i] * hi1j

                hjj, hj1j = h[j, j], h[j + 1, j]
                denom = math.hypot(hjj, hj1j)
                if denom < 1e-14:
                    cs[j], sn[j] = 1.0, 0.0
                else:
                    cs[j], sn[j] = hjj / denom, hj1j / denom
                h[j, j] = denom
                h[j + 1, j] = 0.0

                gvj = gv[j]
                gv[j] = cs[j] * gvj
                gv[j + 1] = -sn[j] * gvj

                if abs(gv[j + 1]) <= tol * bnorm:
                    steps = j + 1
                    break

            y = np.zeros(steps)
            for i in reversed(range(steps)):
                value = gv[i] - float(h[i, i + 1:steps] @ y[i + 1:steps])
                if abs(h[i, i]) < 1e-14:
                    raise SolverError(f"gmres: singular upper Hessenberg at step {i}")
                y[i] = value / h[i, i]

            x = x + y @ q[:steps]

        rel_res = float(np.linalg.norm(f - k @ x)) / bnorm
        if rel_res <= tol:
            return x
        raise ConvergenceError(
            f"gmres: did not converge after {max_outer} restarts "
            f"(relative residual = {rel_res:g})",
            x,
        )