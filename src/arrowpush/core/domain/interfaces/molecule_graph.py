"""Interface for the read/write molecular graph the engine works against."""

import copy
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..exceptions import AtomIndexError
from ..models.bond import Bond, BondOrder


class MoleculeGraph(ABC):
    """
    Abstract base class for molecular graph adapters.

    Atoms are addressed by integer index. Bonds are undirected: every
    pairwise query must succeed regardless of argument order. A bond whose
    order has dropped to 0 still exists and can be re-formed.
    """

    @abstractmethod
    def atom_count(self) -> int:
        """Number of atoms in the graph."""
        pass

    @abstractmethod
    def atom_symbol(self, index: int) -> str:
        """Element label of an atom."""
        pass

    @abstractmethod
    def atom_charge(self, index: int) -> int:
        """Formal charge recorded on the atom by the structure source."""
        pass

    @abstractmethod
    def atom_position(self, index: int) -> np.ndarray:
        """Cartesian position of an atom as an array of shape (3,)."""
        pass

    @abstractmethod
    def connected_atoms(self, index: int) -> Sequence[int]:
        """Indices of all atoms sharing a bond (of any order) with the atom."""
        pass

    @abstractmethod
    def bond_order(self, atom1: int, atom2: int) -> Optional[BondOrder]:
        """
        Order of the bond between two atoms.

        Returns:
            0-3, 1.5 for an aromatic bond, or None when no bond exists
        """
        pass

    @abstractmethod
    def set_bond_order(self, atom1: int, atom2: int, order: int) -> None:
        """
        Overwrite the order of an existing bond.

        Raises:
            BondNotFoundError: If the atoms are not bonded
            InvalidBondOrderError: If order is not one of 0, 1, 2, 3
        """
        pass

    @abstractmethod
    def implicit_hydrogen_count(self, index: int) -> int:
        """Hydrogens carried by the atom that are not atoms of the graph."""
        pass

    @abstractmethod
    def bonds(self) -> List[Bond]:
        """All bonds in the graph, in a stable order."""
        pass

    def copy(self) -> "MoleculeGraph":
        """Independent copy whose bond orders can change without affecting this one."""
        return copy.deepcopy(self)

    def has_bond(self, atom1: int, atom2: int) -> bool:
        return self.bond_order(atom1, atom2) is not None

    def check_index(self, index: int) -> int:
        """Validate an atom index, raising AtomIndexError when out of range."""
        count = self.atom_count()
        if not isinstance(index, (int, np.integer)) or not 0 <= index < count:
            raise AtomIndexError(index, count)
        return int(index)

    def bond_pairs(self) -> List[Tuple[int, int]]:
        return [(bond.atom1_id, bond.atom2_id) for bond in self.bonds()]
