#!/usr/bin/env python3
# src/arrowpush/core/services/move_orchestrator.py

"""
Service applying curved-arrow electron moves.

Each move checks its preconditions, starts one or two bond transitions and
updates the charge ledger. A move that fails its checks returns a rejected
MoveResult and leaves every piece of state untouched.
"""

import logging
from typing import Tuple, Union

from ..domain.interfaces.molecule_graph import MoleculeGraph
from ..domain.models.move import Descriptor, MoveKind, MoveResult, parse_descriptor
from ..domain.models.transition import TransitionDirection
from .bond_transition import BondTransitionMachine
from .charge_ledger import ChargeLedger
from .electron_accounting import ElectronAccountingService


class MoveOrchestrator:
    """Validates and applies the four electron-move kinds."""

    def __init__(
        self,
        graph: MoleculeGraph,
        accounting: ElectronAccountingService,
        ledger: ChargeLedger,
        transitions: BondTransitionMachine,
    ):
        self._graph = graph
        self._accounting = accounting
        self._ledger = ledger
        self._transitions = transitions
        self.logger = logging.getLogger(__name__)

    def apply(self, kind: Union[str, MoveKind], descriptor: Descriptor) -> MoveResult:
        """Dispatch a move by kind."""
        handlers = {
            MoveKind.ATOM_TO_BOND: self.move_lone_pair_to_bond,
            MoveKind.BOND_TO_ATOM: self.move_bond_to_atom,
            MoveKind.BOND_TO_BOND: self.move_bond_to_bond,
            MoveKind.BOND_TO_RADICAL_PAIR: self.split_bond_to_radical_pair,
        }
        return handlers[MoveKind.parse(kind)](descriptor)

    def _parse(self, kind: MoveKind, descriptor: Descriptor) -> Tuple[int, ...]:
        atoms = parse_descriptor(descriptor, kind.path_length)
        for index in atoms:
            self._graph.check_index(index)
        return atoms

    def _reject(self, kind: MoveKind, atoms: Tuple[int, ...], reason: str) -> MoveResult:
        self.logger.warning(f"Rejected {kind.value} move on {'-'.join(map(str, atoms))}: {reason}")
        return MoveResult(kind=kind, atoms=atoms, accepted=False, reason=reason)

    def _missing_bond(self, atoms: Tuple[int, ...]) -> str:
        for atom1, atom2 in zip(atoms, atoms[1:]):
            if not self._graph.has_bond(atom1, atom2):
                return f"No bond between atoms {atom1} and {atom2}"
        return ""

    def move_lone_pair_to_bond(self, bond: Descriptor) -> MoveResult:
        """
        Push a lone pair (or negative charge) from the first atom into the bond.

        The donor needs a negative ledger charge or at least one lone pair. A
        bond already at the maximum order is accepted as a no-op. Otherwise
        the donor's charge rises by one, the acceptor's falls by one, and the
        donor gives up a stored lone pair if it has one.
        """
        kind = MoveKind.ATOM_TO_BOND
        atoms = self._parse(kind, bond)
        donor, acceptor = atoms
        missing = self._missing_bond(atoms)
        if missing:
            return self._reject(kind, atoms, missing)

        if not (self._ledger.get(donor) < 0 or self._accounting.lone_pair_count(donor) > 0):
            return self._reject(
                kind,
                atoms,
                f"Donor atom {donor} has no negative charge or lone pairs",
            )

        if self._graph.bond_order(donor, acceptor) >= self._transitions.settings.max_bond_order:
            self.logger.info(f"Bond {donor}-{acceptor} already at maximum order; nothing to do")
            return MoveResult(
                kind=kind, atoms=atoms, accepted=True, reason="Bond already at maximum order"
            )

        transition = self._transitions.start_transition(
            donor, acceptor, TransitionDirection.INCREASE, kind
        )
        self._ledger.adjust(donor, +1)
        self._ledger.adjust(acceptor, -1)
        self._accounting.consume_lone_pair(donor)
        return MoveResult(kind=kind, atoms=atoms, accepted=True, transitions=(transition,))

    def move_bond_to_atom(self, bond: Descriptor) -> MoveResult:
        """Collapse a bond pair onto the second atom: acceptor -1, donor +1."""
        kind = MoveKind.BOND_TO_ATOM
        atoms = self._parse(kind, bond)
        donor, acceptor = atoms
        missing = self._missing_bond(atoms)
        if missing:
            return self._reject(kind, atoms, missing)

        transition = self._transitions.start_transition(
            donor, acceptor, TransitionDirection.DECREASE, kind
        )
        self._ledger.adjust(acceptor, -1)
        self._ledger.adjust(donor, +1)
        return MoveResult(kind=kind, atoms=atoms, accepted=True, transitions=(transition,))

    def move_bond_to_bond(self, path: Descriptor) -> MoveResult:
        """
        Shift a bond pair along a three-atom path a-b-c.

        Bond a-b loses one order and b-c gains one, each on its own timeline.
        The first atom's charge rises by one, the last atom's falls by one and
        the middle atom is unchanged.
        """
        kind = MoveKind.BOND_TO_BOND
        atoms = self._parse(kind, path)
        first, middle, last = atoms
        missing = self._missing_bond(atoms)
        if missing:
            return self._reject(kind, atoms, missing)

        breaking = self._transitions.start_transition(
            first, middle, TransitionDirection.DECREASE, kind
        )
        forming = self._transitions.start_transition(
            middle, last, TransitionDirection.INCREASE, kind
        )
        self._ledger.adjust(first, +1)
        self._ledger.adjust(last, -1)
        return MoveResult(kind=kind, atoms=atoms, accepted=True, transitions=(breaking, forming))

    def split_bond_to_radical_pair(self, bond: Descriptor) -> MoveResult:
        """Homolytically reduce a bond: one unpaired electron to each end, charges unchanged."""
        kind = MoveKind.BOND_TO_RADICAL_PAIR
        atoms = self._parse(kind, bond)
        atom1, atom2 = atoms
        missing = self._missing_bond(atoms)
        if missing:
            return self._reject(kind, atoms, missing)
        if self._graph.bond_order(atom1, atom2) <= 0:
            return self._reject(kind, atoms, "Bond order is already 0, cannot split further")

        for index in atoms:
            self._accounting.set_single_electron_count(
                index, self._accounting.single_electron_count(index) + 1
            )
        transition = self._transitions.start_transition(
            atom1, atom2, TransitionDirection.DECREASE, kind
        )
        return MoveResult(kind=kind, atoms=atoms, accepted=True, transitions=(transition,))
