"""Core domain models and interfaces."""

from .models.atom import Atom, AtomElectronState
from .models.bond import Bond, BondType
from .models.molecular_graph import MolecularGraph
from .interfaces.molecule_graph import MoleculeGraph

__all__ = [
    "Atom",
    "AtomElectronState",
    "Bond",
    "BondType",
    "MolecularGraph",
    "MoleculeGraph",
]
