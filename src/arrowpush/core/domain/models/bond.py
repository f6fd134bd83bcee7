#!/usr/bin/env python3
# src/arrowpush/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..exceptions import InvalidBondOrderError

BondOrder = Union[int, float]

AROMATIC_ORDER = 1.5
MAX_BOND_ORDER = 3
COMMITTABLE_ORDERS = (0, 1, 2, 3)


class BondType(Enum):
    """Enumeration of possible bond types, valued by their label."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    AROMATIC = "aromatic"
    OTHER = "other"

    @classmethod
    def from_order(cls, order: BondOrder) -> "BondType":
        """Label a bond order as read from a molecular graph."""
        if order == AROMATIC_ORDER:
            return cls.AROMATIC
        return {
            0: cls.NONE,
            1: cls.SINGLE,
            2: cls.DOUBLE,
            3: cls.TRIPLE,
        }.get(order, cls.OTHER)


@dataclass
class Bond:
    """Represents a chemical bond between two atoms."""

    atom1_id: int
    atom2_id: int
    bond_order: BondOrder = 1

    @property
    def bond_type(self) -> BondType:
        return BondType.from_order(self.bond_order)

    @property
    def key(self) -> Tuple[int, int]:
        return bond_key(self.atom1_id, self.atom2_id)


def bond_key(atom1: int, atom2: int) -> Tuple[int, int]:
    """Normalized, order-independent key for the bond between two atoms."""
    return (min(atom1, atom2), max(atom1, atom2))


def validate_bond_order(order: BondOrder) -> int:
    """
    Check that an order may be written back to a molecular graph.

    Args:
        order: Proposed bond order

    Returns:
        The order as an int

    Raises:
        InvalidBondOrderError: If the order is not one of 0, 1, 2 or 3
    """
    if isinstance(order, bool) or order not in COMMITTABLE_ORDERS:
        raise InvalidBondOrderError(
            f"Bond order {order!r} cannot be committed; expected one of {COMMITTABLE_ORDERS}"
        )
    return int(order)
