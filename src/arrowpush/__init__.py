"""Curved-arrow electron-pushing engine: electron accounting and animated bond transitions."""

from .config import EngineSettings
from .core import (
    ChargeLedger,
    ElectronAccountingService,
    BondTransitionMachine,
    MoveOrchestrator,
    MechanismSession,
    MoleculeGraph,
    MoveKind,
    MoveResult,
)

__version__ = "0.1.0"

__all__ = [
    "EngineSettings",
    "ChargeLedger",
    "ElectronAccountingService",
    "BondTransitionMachine",
    "MoveOrchestrator",
    "MechanismSession",
    "MoleculeGraph",
    "MoveKind",
    "MoveResult",
]
