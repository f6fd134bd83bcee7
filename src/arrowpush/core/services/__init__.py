"""Core business logic services."""

from .electron_accounting import ElectronAccountingService, VALENCE_ELECTRONS
from .charge_ledger import ChargeLedger
from .bond_transition import BondTransitionMachine
from .move_orchestrator import MoveOrchestrator
from .mechanism_session import MechanismSession
from .molecule_info import MoleculeInfoService

__all__ = [
    "ElectronAccountingService",
    "VALENCE_ELECTRONS",
    "ChargeLedger",
    "BondTransitionMachine",
    "MoveOrchestrator",
    "MechanismSession",
    "MoleculeInfoService",
]
