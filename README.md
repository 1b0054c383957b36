# femkit

Building blocks for small finite element programs, written on top of NumPy.

## Modules

- `femkit.integration`: Gauss quadrature rules. `gauss_line(n)` gives the
  n-point Gauss-Legendre rule on [-1, 1] for n = 1 to 4 (other orders raise
  `ValueError`); `gauss_quad(n)` and `gauss_hex(n)` give the product rules on
  [-1, 1]² and [-1, 1]³. `tri1()`, `tri3()` are rules on the unit triangle
  and `tet1()`, `tet4()`, `tet5()` on the unit tetrahedron. Each returns a
  list of frozen `QuadraturePoint(xi, eta, zeta, weight)` values.
- `femkit.material`: 3D linear elastic materials in Voigt notation
  `[σxx, σyy, σzz, τxy, τyz, τxz]`. `IsotropicLinear(e, nu)` and
  `OrthotropicLinear(ex, ey, ez, nxy, nyz, nxz, gxy, gyz, gxz)` share the
  `Material3D` interface: `set_trial_strain(strain)` computes the stress,
  `stress` and `tangent` (a read-only 6×6 array) give the current state,
  `commit_state()` stores the stress in `committed_stress`, and
  `revert_to_start()` resets it. Parameters that give no valid stiffness
  (a singular orthotropic compliance matrix, or ν = 0.5 or -1 for the
  isotropic law) raise `MaterialError`.
- `femkit.section`: cross-section dataclasses `BeamSection3D(a, iy, iz, j,
  asy=0, asz=0)`, `BeamSection2D(a, iz, asy=0)` and `ShellSection(thickness)`.
  They hold values only.
- `femkit.zerolength`: two-node springs of zero length with one spring
  constant per DOF direction: `ZeroLength` (UX, UY, UZ, RX, RY, RZ),
  `ZeroLength3DOF` (UX, UY, UZ), `ZeroLength2D` (UX, UY) and
  `ZeroLength2DFrame` (UX, UY, RZ). Each has `stiffness`, `num_dof`,
  `dof_per_node`, `update(disp)`, `resisting_force()`, `spring_force()`
  (k·(u₁ − u₀) per direction), `commit_state()`, `revert_to_start()` and
  `body_force_load(gravity, density)`, which is always zero.
- `femkit.linear_solver`: solvers for `K·u = F` behind the `LinearSolver`
  interface: `Cholesky`, `LU`, `SkylineLDL(zero_tol=1e-14)`,
  `CG(tol=1e-10, max_iter=None)` and `GMRES(tol=1e-10, max_iter=None,
  restart=50)`. A failed solve raises `SolverError`; an iterative solver that
  runs out of iterations raises `ConvergenceError`, whose `solution` holds the
  last iterate.
- `femkit.eigen`: `solve_generalized_eigen(K, M, num_modes)` solves
  `K·φ = ω²·M·φ` for the smallest eigenvalues and returns an `EigenResult`
  with `omega2` (ascending) and mass-normalised `modes` (columns). A mass
  matrix that is not positive definite raises `SolverError`. Helpers:
  `extract_submatrix`, `expand_modes`, `frequency_hz`, `period_seconds`.

## Installing

```
pip install .
```

## Examples

Elastic stress from a strain:

```python
import numpy as np
from femkit.material import IsotropicLinear

steel = IsotropicLinear(210000, 0.3)
steel.set_trial_strain(np.array([1e-3, 0, 0, 0, 0, 0]))
print(steel.stress)
```

Solving a stiffness system:

```python
import numpy as np
from femkit.linear_solver import CG, SkylineLDL

K = np.array([[2.0, -1.0, 0.0], [-1.0, 2.0, -1.0], [0.0, -1.0, 2.0]])
F = np.ones(3)
u = SkylineLDL().solve(K, F)
u_cg = CG(tol=1e-12).solve(K, F)
print(K @ u - F)
```

Natural frequencies:

```python
import numpy as np
from femkit.eigen import solve_generalized_eigen, frequency_hz

K = np.array([[2.0, -1.0], [-1.0, 2.0]])
M = np.eye(2)
result = solve_generalized_eigen(K, M, 2)
print([frequency_hz(w2) for w2 in result.omega2])
```

## What it does not do

femkit has no model or domain to hold nodes, elements, boundary conditions
and loads, no global stiffness assembly, and no static or modal analysis
driver. Apart from the zero-length springs it has no elements (trusses,
beams, shells, solids); the quadrature rules and sections are there for
elements you write yourself. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```