#!/usr/bin/env python3
# src/arrowpush/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import List
import networkx as nx
import numpy as np
from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecular structure."""

    def __init__(self, atoms: List[Atom], bonds: List[Bond]):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: List of Atom objects, indexed by position
            bonds: List of Bond objects referring to atom positions
        """
        self.atoms = atoms
        self.bonds = bonds

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the graph.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coordinates for atom in self.atoms], dtype=float).reshape(
            -1, 3
        )

    def to_networkx(self) -> nx.Graph:
        """Create NetworkX graph with element, charge, hydrogen and order attributes."""
        G = nx.Graph()
        for index, atom in enumerate(self.atoms):
            G.add_node(
                index,
                element=atom.element,
                charge=atom.charge,
                hydrogens=atom.implicit_hydrogens,
                coord=tuple(atom.coordinates),
            )
        for bond in self.bonds:
            G.add_edge(bond.atom1_id, bond.atom2_id, order=bond.bond_order)
        return G
