"""Core domain models, interfaces and services for electron-pushing mechanisms."""

from .domain.interfaces.molecule_graph import MoleculeGraph
from .domain.models.move import MoveKind, MoveResult
from .domain.models.transition import BondTransition, TransitionDirection
from .services.electron_accounting import ElectronAccountingService
from .services.charge_ledger import ChargeLedger
from .services.bond_transition import BondTransitionMachine
from .services.move_orchestrator import MoveOrchestrator
from .services.mechanism_session import MechanismSession
from .services.molecule_info import MoleculeInfoService

__all__ = [
    "MoleculeGraph",
    "MoveKind",
    "MoveResult",
    "BondTransition",
    "TransitionDirection",
    "ElectronAccountingService",
    "ChargeLedger",
    "BondTransitionMachine",
    "MoveOrchestrator",
    "MechanismSession",
    "MoleculeInfoService",
]
