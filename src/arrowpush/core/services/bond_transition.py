#!/usr/bin/env python3
# src/arrowpush/core/services/bond_transition.py

"""
State machine animating bond-order changes one tick at a time.

A bond pair is Idle while no entry exists, Animating while its entry has
progress below 1, and Committed once the target order has been written to
the graph and the entry removed. The machine never schedules itself; an
external loop calls ``advance`` once per frame.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ...config import EngineSettings
from ..domain.exceptions import BondNotFoundError
from ..domain.interfaces.molecule_graph import MoleculeGraph
from ..domain.models.bond import bond_key
from ..domain.models.move import MoveKind
from ..domain.models.transition import (
    BondTransition,
    TransitionDirection,
    TransitionEvent,
    TransitionEventType,
    target_order_for,
)

TransitionListener = Callable[[TransitionEvent], None]


class BondTransitionMachine:
    """Tracks at most one active transition per bond pair."""

    def __init__(self, graph: MoleculeGraph, settings: Optional[EngineSettings] = None):
        """
        Initialize machine.

        Args:
            graph: Graph whose bond orders are read at start and written on commit
            settings: Supplies the default per-tick progress step and order ceiling
        """
        self._graph = graph
        self.settings = settings or EngineSettings()
        self._transitions: Dict[Tuple[int, int], BondTransition] = {}
        self._listeners: List[TransitionListener] = []
        self.logger = logging.getLogger(__name__)

    def add_listener(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TransitionListener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event_type: TransitionEventType, transition: BondTransition) -> None:
        event = TransitionEvent(event_type, transition)
        for listener in list(self._listeners):
            listener(event)

    def start_transition(
        self,
        atom1: int,
        atom2: int,
        direction: TransitionDirection,
        move_kind: MoveKind,
    ) -> BondTransition:
        """
        Begin animating a bond towards its next order.

        The initial order is read from the graph now. Starting on a pair that
        is already animating replaces that entry; its commit never happens.

        Raises:
            BondNotFoundError: If the atoms are not bonded
        """
        initial_order = self._graph.bond_order(atom1, atom2)
        if initial_order is None:
            raise BondNotFoundError(atom1, atom2)

        transition = BondTransition(
            atom1=atom1,
            atom2=atom2,
            initial_order=initial_order,
            target_order=target_order_for(
                initial_order, direction, self.settings.max_bond_order
            ),
            direction=direction,
            move_kind=move_kind,
        )

        replaced = self._transitions.get(transition.key)
        self._transitions[transition.key] = transition
        if replaced is not None:
            self.logger.warning(
                f"Bond {transition.key[0]}-{transition.key[1]} transition replaced "
                f"at progress {replaced.progress:.3f}"
            )
            self._emit(TransitionEventType.REPLACED, replaced)

        self.logger.info(
            f"Bond {atom1}-{atom2} {direction.value}: "
            f"{initial_order} -> {transition.target_order} ({move_kind.value})"
        )
        self._emit(TransitionEventType.STARTED, transition)
        return transition

    def advance(self, step: Optional[float] = None) -> List[BondTransition]:
        """
        Advance every active transition by one tick.

        Each entry moves independently from a snapshot of the active set, so
        the order entries are visited in does not matter. Listeners are
        notified only after every entry has been advanced, so a failing
        listener cannot leave the tick half-applied.

        Args:
            step: Progress increment; defaults to ``settings.progress_step``

        Returns:
            Transitions committed during this tick
        """
        step = self.settings.progress_step if step is None else step
        if step <= 0:
            raise ValueError(f"Progress step must be positive, got {step}")

        committed = []
        events = []
        for key, transition in list(self._transitions.items()):
            transition.progress = min(transition.progress + step, 1.0)
            self.logger.debug(
                f"Bond {key[0]}-{key[1]} transition progress: {transition.progress:.3f}"
            )
            if transition.progress < 1.0:
                events.append((TransitionEventType.PROGRESS, transition))
                continue

            self._graph.set_bond_order(
                transition.atom1, transition.atom2, transition.target_order
            )
            del self._transitions[key]
            committed.append(transition)
            self.logger.info(f"Bond {key[0]}-{key[1]} committed at order {transition.target_order}")
            events.append((TransitionEventType.COMMITTED, transition))

        for event_type, transition in events:
            self._emit(event_type, transition)
        return committed

    def get_progress(self, atom1: int, atom2: int) -> Optional[BondTransition]:
        """Active transition for the pair, in either argument order, or None."""
        return self._transitions.get(bond_key(atom1, atom2))

    def active_transitions(self) -> List[BondTransition]:
        return list(self._transitions.values())

    def is_animating(self) -> bool:
        return bool(self._transitions)

    def clear(self) -> None:
        """Drop every active transition without committing."""
        self._transitions.clear()
