"""Domain model classes."""

from .atom import Atom, AtomElectronState
from .bond import Bond, BondType, bond_key, validate_bond_order
from .molecular_graph import MolecularGraph
from .move import MoveKind, MoveResult, parse_descriptor
from .transition import (
    BondTransition,
    TransitionDirection,
    TransitionEvent,
    TransitionEventType,
)

__all__ = [
    "Atom",
    "AtomElectronState",
    "Bond",
    "BondType",
    "bond_key",
    "validate_bond_order",
    "MolecularGraph",
    "MoveKind",
    "MoveResult",
    "parse_descriptor",
    "BondTransition",
    "TransitionDirection",
    "TransitionEvent",
    "TransitionEventType",
]
