"""Adapters for external libraries."""

from .networkx_adapter import NetworkXMoleculeAdapter
from .rdkit_adapter import RDKitMoleculeAdapter

__all__ = [
    "NetworkXMoleculeAdapter",
    "RDKitMoleculeAdapter",
]
