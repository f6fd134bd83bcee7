"""Adapter exposing a NetworkX graph as a MoleculeGraph."""

from typing import List, Optional, Sequence

import networkx as nx
import numpy as np

from ...core.domain.exceptions import BondNotFoundError
from ...core.domain.interfaces.molecule_graph import MoleculeGraph
from ...core.domain.models.bond import Bond, BondOrder, validate_bond_order
from ...core.domain.models.molecular_graph import MolecularGraph


class NetworkXMoleculeAdapter(MoleculeGraph):
    """
    In-memory molecular graph backed by ``networkx``.

    Nodes must be the integers ``0..n-1`` and carry an ``element`` attribute.
    Optional node attributes: ``charge`` (default 0), ``hydrogens`` implicit
    hydrogen count (default 0) and ``coord`` xyz tuple. Edges carry ``order``
    (default 1; 1.5 reads as aromatic).
    """

    def __init__(self, graph: nx.Graph):
        expected = set(range(graph.number_of_nodes()))
        if set(graph.nodes) != expected:
            raise ValueError("Graph nodes must be labelled 0..n-1")
        missing = [node for node, data in graph.nodes(data=True) if "element" not in data]
        if missing:
            raise ValueError(f"Nodes without an element attribute: {missing}")
        self.graph = graph

    @classmethod
    def from_molecular_graph(cls, molecule: MolecularGraph) -> "NetworkXMoleculeAdapter":
        return cls(molecule.to_networkx())

    def atom_count(self) -> int:
        return self.graph.number_of_nodes()

    def atom_symbol(self, index: int) -> str:
        return self.graph.nodes[self.check_index(index)]["element"]

    def atom_charge(self, index: int) -> int:
        return int(self.graph.nodes[self.check_index(index)].get("charge", 0))

    def atom_position(self, index: int) -> np.ndarray:
        coord = self.graph.nodes[self.check_index(index)].get("coord", (0.0, 0.0, 0.0))
        return np.asarray(coord, dtype=float)

    def connected_atoms(self, index: int) -> Sequence[int]:
        return sorted(self.graph.neighbors(self.check_index(index)))

    def bond_order(self, atom1: int, atom2: int) -> Optional[BondOrder]:
        atom1, atom2 = self.check_index(atom1), self.check_index(atom2)
        data = self.graph.get_edge_data(atom1, atom2)
        if data is None:
            return None
        return data.get("order", 1)

    def set_bond_order(self, atom1: int, atom2: int, order: int) -> None:
        atom1, atom2 = self.check_index(atom1), self.check_index(atom2)
        if not self.graph.has_edge(atom1, atom2):
            raise BondNotFoundError(atom1, atom2)
        self.graph.edges[atom1, atom2]["order"] = validate_bond_order(order)

    def implicit_hydrogen_count(self, index: int) -> int:
        return int(self.graph.nodes[self.check_index(index)].get("hydrogens", 0))

    def bonds(self) -> List[Bond]:
        return [
            Bond(min(u, v), max(u, v), data.get("order", 1))
            for u, v, data in sorted(
                self.graph.edges(data=True), key=lambda edge: (min(edge[:2]), max(edge[:2]))
            )
        ]
