"""Two-node spring elements of zero physical length."""

from __future__ import annotations

import numpy as np


class _ZeroLengthSpring:
    """Two coincident nodes joined by independent springs, one per DOF direction."""

    _dofs_per_node = 0

    def __init__(self, tag, nodes, springs):
        nodes = tuple(nodes)
        if len(nodes) != 2:
            raise ValueError(f"a zero-length element needs 2 nodes, got {len(nodes)}")
        springs = tuple(float(k) for k in springs)
        if len(springs) != self._dofs_per_node:
            raise ValueError(
                f"{type(self).__name__} needs {self._dofs_per_node} spring constants, "
                f"got {len(springs)}"
            )
        self.tag = tag
        self.nodes = nodes
        self.springs = springs
        ks = np.diag(springs)
        ke = np.block([[ks, -ks], [-ks, ks]])
        ke.setflags(write=False)
        self._ke = ke
        self._ue = np.zeros(self.num_dof)
        self._ue_committed = np.zeros(self.num_dof)

    def __repr__(self):
        return f"{type(self).__name__}(tag={self.tag!r}, nodes={self.nodes!r}, springs={self.springs!r})"

    @property
    def dof_per_node(self):
        """Number of DOFs carried at each node."""
        return self._dofs_per_node

    @property
    def num_dof(self):
        """Total number of element DOFs."""
        return 2 * self._dofs_per_node

    @property
    def stiffness(self):
        """The element tangent stiffness matrix [[Ks, -Ks], [-Ks, Ks]]."""
        return self._ke

    @property
    def displacements(self):
        """Element displacements stored by the last update."""
        return self._ue.copy()

    @property
    def committed_displacements(self):
        """Element displacements stored by the last commit."""
        return self._ue_committed.copy()

    def _resisting_force(self):
        return self._ke @ self._ue

    def _update(self, disp):
        arr = np.asarray(disp, dtype=float)
        if arr.shape != (self.num_dof,):
            raise ValueError(
                f"expected {self.num_dof} element displacements, got shape {arr.shape}"
            )
        self._ue = arr.copy()

    def _commit_state(self):
        self._ue_committed = self._ue.copy()

    def _revert_to_start(self):
        self._ue = np.zeros(self.num_dof)
        self._ue_committed = np.zeros(self.num_dof)

    def _body_force_load(self):
        return np.zeros(self.num_dof)

    def _spring_force(self):
        n = self._dofs_per_node
        forces = np.asarray(self.springs) * (self._ue[n:] - self._ue[:n])
        return tuple(float(f) for f in forces)


class ZeroLength(_ZeroLengthSpring):
    """Spring with UX, UY, UZ, RX, RY, RZ at each node (12 DOFs)."""

    _dofs_per_node = 6

    def resisting_force(self):
        """Return the nodal reaction vector Ke @ ue."""
        return self._resisting_force()

    def update(self, disp):
        """Store the element displacement vector for post-processing."""
        self._update(disp)

    def commit_state(self):
        """Record the current displacements as the committed state."""
        self._commit_state()

    def revert_to_start(self):
        """Reset the stored displacements to zero."""
        self._revert_to_start()

    def body_force_load(self, gravity, density):
        """Return a zero load: an element without extent carries no body force."""
        return self._body_force_load()

    def spring_force(self):
        """Return (Fx, Fy, Fz, Mx, My, Mz) = k * (u_node1 - u_node0)."""
        return self._spring_force()


class ZeroLength3DOF(_ZeroLengthSpring):
    """Spring with translational UX, UY, UZ at each node (6 DOFs)."""

    _dofs_per_node = 3

    def resisting_force(self):
        """Return the nodal reaction vector Ke @ ue."""
        return self._resisting_force()

    def update(self, disp):
        """Store the element displacement vector for post-processing."""
        self._update(disp)

    def commit_state(self):
        """Record the current displacements as the committed state."""
        self._commit_state()

    def revert_to_start(self):
        """Reset the stored displacements to zero."""
        self._revert_to_start()

    def body_force_load(self, gravity, density):
        """Return a zero load: an element without extent carries no body force."""
        return self._body_force_load()

    def spring_force(self):
        """Return (Fx, Fy, Fz) = k * (u_node1 - u_node0), tension positive."""
        return self._spring_force()


class ZeroLength2D(_ZeroLengthSpring):
    """Plane spring with UX, UY at each node (4 DOFs)."""

    _dofs_per_node = 2

    def resisting_force(self):
        """Return the nodal reaction vector Ke @ ue."""
        return self._resisting_force()

    def update(self, disp):
        """Store the element displacement vector for post-processing."""
        self._update(disp)

    def commit_state(self):
        """Record the current displacements as the committed state."""
        self._commit_state()

    def revert_to_start(self):
        """Reset the stored displacements to zero."""
        self._revert_to_start()

    def body_force_load(self, gravity, density):
        """Return a zero load: an element without extent carries no body force."""
        return self._body_force_load()

    def spring_force(self):
        """Return (Fx, Fy) = k * (u_node1 - u_node0), tension positive."""
        return self._spring_force()


class ZeroLength2DFrame(_ZeroLengthSpring):
    """Plane-frame spring with UX, UY, RZ at each node (6 DOFs)."""

    _dofs_per_node = 3

    def resisting_force(self):
        """Return the nodal reaction vector Ke @ ue."""
        return self._resisting_force()

    def update(self, disp):
        """Store the element displacement vector for post-processing."""
        self._update(disp)

    def commit_state(self):
        """Record the current displacements as the committed state."""
        self._commit_state()

    def revert_to_start(self):
        """Reset the stored displacements to zero."""
        self._revert_to_start()

    def body_force_load(self, gravity, density):
        """Return a zero load: an element without extent carries no body force."""
        return self._body_force_load()

    def spring_force(self):
        """Return (Fx, Fy, Mz) = k * (u_node1 - u_node0), tension/CCW positive."""
        return self._spring_force()