"""Domain models for animated bond-order transitions."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .bond import BondOrder, MAX_BOND_ORDER, bond_key
from .move import MoveKind


class TransitionDirection(Enum):
    """Which way a transition moves the bond order."""

    INCREASE = "increase"
    DECREASE = "decrease"


class TransitionEventType(Enum):
    """Lifecycle notifications emitted by the transition machine."""

    STARTED = "started"
    PROGRESS = "progress"
    COMMITTED = "committed"
    REPLACED = "replaced"


def target_order_for(
    initial_order: BondOrder,
    direction: TransitionDirection,
    max_order: int = MAX_BOND_ORDER,
) -> int:
    """
    Compute the order a transition will commit.

    Integral orders move by one and are clamped to [0, max_order]. An
    aromatic reading (1.5) rounds towards the direction of travel, so the
    result is always a committable integer. An increase never lowers a bond
    that already sits above ``max_order``.
    """
    if direction is TransitionDirection.INCREASE:
        floor_order = math.floor(initial_order)
        return min(max(max_order, floor_order), floor_order + 1)
    return max(0, math.ceil(initial_order) - 1)


@dataclass
class BondTransition:
    """An in-flight bond-order change between two atoms."""

    atom1: int
    atom2: int
    initial_order: BondOrder
    target_order: int
    direction: TransitionDirection
    move_kind: MoveKind
    progress: float = 0.0

    @property
    def key(self) -> Tuple[int, int]:
        return bond_key(self.atom1, self.atom2)

    @property
    def is_complete(self) -> bool:
        return self.progress >= 1.0

    @property
    def current_order(self) -> float:
        """Interpolated order for renderers sampling mid-transition."""
        return self.initial_order + (self.target_order - self.initial_order) * self.progress


@dataclass(frozen=True)
class TransitionEvent:
    """Notification passed to transition listeners."""

    event_type: TransitionEventType
    transition: BondTransition
