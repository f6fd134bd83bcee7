#!/usr/bin/env python3
# src/arrowpush/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass
class Atom:
    """Represents an atom in a molecular structure."""

    atom_id: int
    element: str
    coordinates: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    charge: int = 0
    implicit_hydrogens: int = 0


@dataclass(frozen=True)
class AtomElectronState:
    """Snapshot of the electron bookkeeping for one atom."""

    index: int
    symbol: str
    charge: int
    lone_pairs: int
    single_electrons: Union[int, float]
