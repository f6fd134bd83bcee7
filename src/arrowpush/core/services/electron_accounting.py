#!/usr/bin/env python3
# src/arrowpush/core/services/electron_accounting.py

"""
Service deriving lone pairs and unpaired electrons from valence and connectivity.

Counts are recomputed from scratch; nothing here updates incrementally while
bond orders change, so values read mid-transition are stale by definition.
"""

import logging
import math
from typing import Dict, List, Optional, Union

from ..domain.interfaces.molecule_graph import MoleculeGraph
from ..domain.models.bond import BondOrder

ElectronCount = Union[int, float]

VALENCE_ELECTRONS: Dict[str, int] = {
    "H": 1,
    "C": 4,
    "N": 5,
    "O": 6,
    "F": 7,
    "Cl": 7,
    "Br": 7,
    "I": 7,
}


def _as_count(value: float) -> ElectronCount:
    return int(value) if float(value).is_integer() else value


class ElectronAccountingService:
    """Per-atom lone-pair and single-electron bookkeeping."""

    def __init__(
        self,
        graph: MoleculeGraph,
        valence_electrons: Optional[Dict[str, int]] = None,
    ):
        """
        Initialize service.

        Args:
            graph: Molecular graph to read symbols, bonds and hydrogens from
            valence_electrons: Valence table override; symbols absent from
                the table get zero lone pairs
        """
        self._graph = graph
        self.valence_electrons = dict(valence_electrons or VALENCE_ELECTRONS)
        self._lone_pairs: Dict[int, int] = {}
        self._single_electrons: Dict[int, ElectronCount] = {}
        self.logger = logging.getLogger(__name__)

    def bond_orders_for_atom(self, atom_index: int) -> List[BondOrder]:
        """Orders of every bond incident to the atom, aromatic bonds as 1.5."""
        return [
            self._graph.bond_order(atom_index, neighbor)
            for neighbor in self._graph.connected_atoms(atom_index)
        ]

    def explicit_hydrogen_count(self, atom_index: int) -> int:
        """Hydrogen atoms present in the graph as neighbours of the atom."""
        return sum(
            1
            for neighbor in self._graph.connected_atoms(atom_index)
            if self._graph.atom_symbol(neighbor) == "H"
        )

    def hydrogen_count(self, atom_index: int) -> int:
        """Implicit plus explicit hydrogens on the atom."""
        return self._graph.implicit_hydrogen_count(atom_index) + self.explicit_hydrogen_count(
            atom_index
        )

    def total_bond_order(self, atom_index: int) -> float:
        """
        Bonding electrons counted against the atom's valence.

        Bonds to hydrogen atoms in the graph are already part of the incident
        bond orders, so only implicit hydrogens are added on top. A non-carbon
        atom carrying any hydrogens, implicit or explicit, counts its bond
        orders only.
        """
        bond_sum = sum(self.bond_orders_for_atom(atom_index))
        if self._graph.atom_symbol(atom_index) != "C" and self.hydrogen_count(atom_index) > 0:
            return bond_sum
        return bond_sum + self._graph.implicit_hydrogen_count(atom_index)

    def compute_lone_pairs(self, atom_index: int, formal_charge: Optional[int] = None) -> int:
        """
        Compute and store lone pairs and single electrons for one atom.

        Args:
            atom_index: Atom to evaluate
            formal_charge: Charge to use; defaults to the graph's formal charge

        Returns:
            Number of lone pairs (0 for symbols missing from the valence table)
        """
        symbol = self._graph.atom_symbol(atom_index)
        valence = self.valence_electrons.get(symbol)
        if valence is None:
            self._lone_pairs[atom_index] = 0
            self._single_electrons[atom_index] = 0
            return 0

        if formal_charge is None:
            formal_charge = self._graph.atom_charge(atom_index)

        non_bonding = valence - self.total_bond_order(atom_index) + formal_charge
        lone_pairs = max(0, math.floor(non_bonding / 2))
        single_electrons = _as_count(non_bonding % 2)

        self._lone_pairs[atom_index] = lone_pairs
        self._single_electrons[atom_index] = single_electrons
        self.logger.debug(
            f"Atom {atom_index} ({symbol}): non-bonding={non_bonding} "
            f"lone_pairs={lone_pairs} single_electrons={single_electrons}"
        )
        return lone_pairs

    def recompute(self, charges=None) -> Dict[int, int]:
        """
        Recompute every atom from the current graph.

        Args:
            charges: Optional object with ``get(atom_index)`` (a ChargeLedger)
                supplying charges in place of the graph's formal charges

        Returns:
            Mapping of atom index to lone-pair count
        """
        self._lone_pairs.clear()
        self._single_electrons.clear()
        for atom_index in range(self._graph.atom_count()):
            charge = charges.get(atom_index) if charges is not None else None
            self.compute_lone_pairs(atom_index, formal_charge=charge)
        return dict(self._lone_pairs)

    def lone_pair_count(self, atom_index: int) -> int:
        return self._lone_pairs.get(atom_index, 0)

    def single_electron_count(self, atom_index: int) -> ElectronCount:
        return self._single_electrons.get(atom_index, 0)

    def set_single_electron_count(self, atom_index: int, count: ElectronCount) -> None:
        self._single_electrons[atom_index] = count

    def consume_lone_pair(self, atom_index: int) -> bool:
        """Remove one stored lone pair from the atom if it has any."""
        available = self.lone_pair_count(atom_index)
        if available <= 0:
            return False
        self._lone_pairs[atom_index] = available - 1
        return True

    def electron_balance(self, atom_index: int, formal_charge: int) -> float:
        """``2*lone_pairs + single_electrons + bonding - charge``; equals valence when consistent."""
        return (
            2 * self.lone_pair_count(atom_index)
            + self.single_electron_count(atom_index)
            + self.total_bond_order(atom_index)
            - formal_charge
        )
