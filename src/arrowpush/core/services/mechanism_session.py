"""Session facade a renderer or UI drives to explore an electron-pushing mechanism."""

import logging
from typing import List, Optional, Union

from ...config import EngineSettings
from ..domain.exceptions import UninitializedGraphError
from ..domain.interfaces.molecule_graph import MoleculeGraph
from ..domain.models.atom import AtomElectronState
from ..domain.models.move import Descriptor, MoveKind, MoveResult
from ..domain.models.transition import BondTransition, TransitionEvent, TransitionEventType
from .bond_transition import BondTransitionMachine, TransitionListener
from .charge_ledger import ChargeLedger
from .electron_accounting import ElectronAccountingService, ElectronCount
from .move_orchestrator import MoveOrchestrator

logger = logging.getLogger(__name__)


class MechanismSession:
    """
    Owns the graph, charge ledger, accounting and transitions for one molecule.

    Loading a molecule builds a fresh ledger seeded from its formal charges.
    Electron accounting is recomputed from scratch after every committed
    transition, using ledger charges.
    """

    def __init__(self, settings: Optional[EngineSettings] = None, valence_electrons=None):
        self.settings = settings or EngineSettings()
        self._valence_electrons = valence_electrons
        self._graph: Optional[MoleculeGraph] = None
        self._pristine: Optional[MoleculeGraph] = None
        self._ledger: Optional[ChargeLedger] = None
        self._accounting: Optional[ElectronAccountingService] = None
        self._transitions: Optional[BondTransitionMachine] = None
        self._orchestrator: Optional[MoveOrchestrator] = None
        self._listeners: List[TransitionListener] = []

    def load(self, graph: MoleculeGraph) -> "MechanismSession":
        """Attach a molecular graph and start a new session on it."""
        self._pristine = graph.copy()
        self._attach(graph)
        return self

    def load_smiles(self, smiles: str) -> "MechanismSession":
        """Parse SMILES with RDKit and start a new session on the result."""
        from ...infrastructure.adapters.rdkit_adapter import RDKitMoleculeAdapter

        return self.load(RDKitMoleculeAdapter.from_smiles(smiles, self.settings))

    def reset(self) -> "MechanismSession":
        """Restore the molecule as it was loaded, dropping all moves and charges."""
        if self._pristine is None:
            raise UninitializedGraphError()
        self._attach(self._pristine.copy())
        return self

    def _attach(self, graph: MoleculeGraph) -> None:
        self._graph = graph
        self._ledger = ChargeLedger.from_graph(graph)
        self._accounting = ElectronAccountingService(graph, self._valence_electrons)
        self._accounting.recompute(self._ledger)
        self._transitions = BondTransitionMachine(graph, self.settings)
        self._transitions.add_listener(self._on_transition_event)
        for listener in self._listeners:
            self._transitions.add_listener(listener)
        self._orchestrator = MoveOrchestrator(
            graph, self._accounting, self._ledger, self._transitions
        )
        logger.info(f"Session attached to molecule with {graph.atom_count()} atoms")

    def _on_transition_event(self, event: TransitionEvent) -> None:
        if event.event_type is TransitionEventType.COMMITTED:
            self._accounting.recompute(self._ledger)

    def _require(self) -> None:
        if self._graph is None:
            raise UninitializedGraphError()

    @property
    def graph(self) -> MoleculeGraph:
        self._require()
        return self._graph

    @property
    def ledger(self) -> ChargeLedger:
        self._require()
        return self._ledger

    @property
    def accounting(self) -> ElectronAccountingService:
        self._require()
        return self._accounting

    @property
    def transitions(self) -> BondTransitionMachine:
        self._require()
        return self._transitions

    def add_listener(self, listener: TransitionListener) -> None:
        """Subscribe to transition events; survives reloads."""
        self._listeners.append(listener)
        if self._transitions is not None:
            self._transitions.add_listener(listener)

    def lone_pair_count(self, atom_index: int) -> int:
        self._require()
        return self._accounting.lone_pair_count(self._graph.check_index(atom_index))

    def single_electron_count(self, atom_index: int) -> ElectronCount:
        self._require()
        return self._accounting.single_electron_count(self._graph.check_index(atom_index))

    def charge(self, atom_index: int) -> int:
        self._require()
        return self._ledger.get(self._graph.check_index(atom_index))

    def active_transition(self, atom1: int, atom2: int) -> Optional[BondTransition]:
        self._require()
        return self._transitions.get_progress(atom1, atom2)

    def is_animating(self) -> bool:
        self._require()
        return self._transitions.is_animating()

    def tick(self, step: Optional[float] = None) -> List[BondTransition]:
        """Advance all active transitions by one frame."""
        self._require()
        return self._transitions.advance(step)

    def apply(self, kind: Union[str, MoveKind], descriptor: Descriptor) -> MoveResult:
        self._require()
        return self._orchestrator.apply(kind, descriptor)

    def move_lone_pair_to_bond(self, bond: Descriptor) -> MoveResult:
        self._require()
        return self._orchestrator.move_lone_pair_to_bond(bond)

    def move_bond_to_atom(self, bond: Descriptor) -> MoveResult:
        self._require()
        return self._orchestrator.move_bond_to_atom(bond)

    def move_bond_to_bond(self, path: Descriptor) -> MoveResult:
        self._require()
        return self._orchestrator.move_bond_to_bond(path)

    def split_bond_to_radical_pair(self, bond: Descriptor) -> MoveResult:
        self._require()
        return self._orchestrator.split_bond_to_radical_pair(bond)

    def atom_states(self) -> List[AtomElectronState]:
        """Current symbol, charge, lone pairs and single electrons of every atom."""
        self._require()
        return [
            AtomElectronState(
                index=i,
                symbol=self._graph.atom_symbol(i),
                charge=self._ledger.get(i),
                lone_pairs=self._accounting.lone_pair_count(i),
                single_electrons=self._accounting.single_electron_count(i),
            )
            for i in range(self._graph.atom_count())
        ]
