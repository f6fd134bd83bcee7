#!/usr/bin/env python3
# src/arrowpush/core/domain/exceptions.py

"""
Error types raised by the electron-pushing engine.

Unknown element symbols are not an error: accounting degrades to zero lone
pairs for them. Rejected moves are reported through ``MoveResult`` and only
become ``InvalidMoveRequest`` when the caller asks for it.
"""


class ArrowPushError(Exception):
    """Base class for all engine errors."""


class UninitializedGraphError(ArrowPushError, RuntimeError):
    """Raised when the session is queried before a molecule is loaded."""

    def __init__(self, message: str = "Molecule is not initialized."):
        super().__init__(message)


class StructureParseError(ArrowPushError, ValueError):
    """Raised when structure notation is empty, not text, or fails to parse."""


class AtomIndexError(ArrowPushError, IndexError):
    """Raised for an atom index outside the molecular graph."""

    def __init__(self, index: int, atom_count: int):
        self.index = index
        self.atom_count = atom_count
        super().__init__(
            f"Atom index {index} out of range for molecule with {atom_count} atoms"
        )


class BondNotFoundError(ArrowPushError, KeyError):
    """Raised when a write or transition targets a pair with no bond."""

    def __init__(self, atom1: int, atom2: int):
        self.atom1 = atom1
        self.atom2 = atom2
        super().__init__(f"No bond between atoms {atom1} and {atom2}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidBondOrderError(ArrowPushError, ValueError):
    """Raised when a bond order outside {0, 1, 2, 3} is about to be committed."""


class InvalidMoveRequest(ArrowPushError, ValueError):
    """Raised for malformed move descriptors or an explicitly raised rejection."""


class LedgerConsistencyError(ArrowPushError, RuntimeError):
    """Raised when the charge ledger is adjusted for an unseeded atom."""
