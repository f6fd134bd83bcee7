"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.networkx_adapter import NetworkXMoleculeAdapter
from .adapters.rdkit_adapter import RDKitMoleculeAdapter
from .scheduling.frame_loop import FrameLoop

__all__ = [
    "NetworkXMoleculeAdapter",
    "RDKitMoleculeAdapter",
    "FrameLoop",
]
