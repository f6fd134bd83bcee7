#!/usr/bin/env python3
# src/arrowpush/core/domain/models/move.py

"""
Electron-move kinds, move outcomes and the bond/path descriptors that name them.

Descriptors are either ``"i-j"`` style strings or integer sequences. The first
index is always the donor (origin) and the last the acceptor (destination),
even though the underlying bonds are undirected.
"""

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Sequence, Tuple, Union

from ..exceptions import InvalidMoveRequest

if TYPE_CHECKING:
    from .transition import BondTransition

Descriptor = Union[str, Sequence[int]]


class MoveKind(Enum):
    """The curved-arrow moves the orchestrator understands."""

    ATOM_TO_BOND = "atom-to-bond"
    BOND_TO_ATOM = "bond-to-atom"
    BOND_TO_BOND = "bond-to-bond"
    BOND_TO_RADICAL_PAIR = "bond-to-single-pair"

    @classmethod
    def parse(cls, value: Union[str, "MoveKind"]) -> "MoveKind":
        """Accept an enum member, its value, or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for kind in cls:
            if text.lower() in (kind.value, kind.name.lower()):
                return kind
        raise InvalidMoveRequest(f"Unknown move kind: {value!r}")

    @property
    def path_length(self) -> int:
        """Number of atom indices a descriptor for this move must name."""
        return 3 if self is MoveKind.BOND_TO_BOND else 2


@dataclass
class MoveResult:
    """Outcome of a move request."""

    kind: MoveKind
    atoms: Tuple[int, ...]
    accepted: bool
    transitions: Tuple["BondTransition", ...] = field(default_factory=tuple)
    reason: str = ""

    @property
    def is_noop(self) -> bool:
        return self.accepted and not self.transitions

    def raise_for_rejection(self) -> "MoveResult":
        """Raise InvalidMoveRequest if the move was rejected, else return self."""
        if not self.accepted:
            raise InvalidMoveRequest(self.reason or f"{self.kind.value} move rejected")
        return self


def parse_descriptor(descriptor: Descriptor, length: int = 2) -> Tuple[int, ...]:
    """
    Parse a bond or path descriptor into atom indices.

    Args:
        descriptor: ``"1-2"``, ``"2-3-6"`` or a sequence of ints
        length: Number of atom indices expected

    Returns:
        Tuple of atom indices in the order given

    Raises:
        InvalidMoveRequest: If the descriptor is malformed
    """
    if isinstance(descriptor, str):
        parts = [part.strip() for part in descriptor.split("-")]
        try:
            indices = tuple(int(part) for part in parts)
        except ValueError:
            raise InvalidMoveRequest(f"Malformed descriptor: {descriptor!r}")
    else:
        try:
            indices = tuple(descriptor)
        except TypeError:
            raise InvalidMoveRequest(f"Malformed descriptor: {descriptor!r}")
        if not all(
            isinstance(i, numbers.Integral) and not isinstance(i, bool) for i in indices
        ):
            raise InvalidMoveRequest(f"Descriptor indices must be integers: {descriptor!r}")
        indices = tuple(int(i) for i in indices)

    if len(indices) != length:
        raise InvalidMoveRequest(
            f"Descriptor {descriptor!r} must name {length} atoms, got {len(indices)}"
        )
    if any(i < 0 for i in indices):
        raise InvalidMoveRequest(f"Descriptor {descriptor!r} contains a negative index")
    if len(set(indices)) != len(indices):
        raise InvalidMoveRequest(f"Descriptor {descriptor!r} repeats an atom")
    return indices
