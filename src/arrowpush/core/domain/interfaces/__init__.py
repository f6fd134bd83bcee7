"""Ports the core depends on."""

from .molecule_graph import MoleculeGraph

__all__ = ["MoleculeGraph"]
