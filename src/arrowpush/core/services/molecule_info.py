"""Read-only summaries of a molecular graph for renderers and reports."""

from typing import List

import numpy as np

from ..domain.interfaces.molecule_graph import MoleculeGraph
from ..domain.models.bond import Bond

PICK_TOLERANCE = 0.3


class MoleculeInfoService:
    """Service answering coordinate, charge and bond-type queries."""

    def __init__(self, graph: MoleculeGraph):
        self._graph = graph

    def coordinates_3d(self) -> np.ndarray:
        """Positions of all atoms as an array of shape (n_atoms, 3)."""
        return np.array(
            [self._graph.atom_position(i) for i in range(self._graph.atom_count())],
            dtype=float,
        ).reshape(-1, 3)

    def formal_charges(self) -> List[int]:
        """Charges as recorded on the graph, not the session ledger."""
        return [self._graph.atom_charge(i) for i in range(self._graph.atom_count())]

    def bonds(self) -> List[Bond]:
        return self._graph.bonds()

    def bond_types(self) -> List[dict]:
        """Each bond as ``{"atom1", "atom2", "type"}`` with a none/single/double/... label."""
        return [
            {"atom1": bond.atom1_id, "atom2": bond.atom2_id, "type": bond.bond_type.value}
            for bond in self._graph.bonds()
        ]

    def find_atom_at(self, x: float, y: float, scale: float = 1.0) -> int:
        """
        Find the atom nearest a point in the xy plane.

        Args:
            x: Screen-space x coordinate
            y: Screen-space y coordinate
            scale: Screen units per coordinate unit

        Returns:
            Index of the closest atom within ``0.3 * scale``, or -1 when none
        """
        coords = self.coordinates_3d()
        if len(coords) == 0:
            return -1
        point = np.array([x, y], dtype=float) / scale
        distances = np.linalg.norm(coords[:, :2] - point, axis=1)
        closest = int(np.argmin(distances))
        return closest if distances[closest] <= PICK_TOLERANCE * scale else -1
