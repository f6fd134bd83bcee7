"""Mutable per-atom charge store for a manipulation session."""

import logging
from typing import Dict, Optional

from ..domain.exceptions import LedgerConsistencyError
from ..domain.interfaces.molecule_graph import MoleculeGraph

logger = logging.getLogger(__name__)


class ChargeLedger:
    """
    Authoritative atom charges once a session starts.

    Seeded once from the graph's formal charges; the graph's own charge
    field is stale after the first move and is never read back.
    """

    def __init__(self, initial: Optional[Dict[int, int]] = None):
        self._charges: Dict[int, int] = dict(initial or {})

    @classmethod
    def from_graph(cls, graph: MoleculeGraph) -> "ChargeLedger":
        return cls({i: graph.atom_charge(i) for i in range(graph.atom_count())})

    def get(self, atom_index: int) -> int:
        return self._charges.get(atom_index, 0)

    def set(self, atom_index: int, value: int) -> None:
        self._charges[atom_index] = value

    def adjust(self, atom_index: int, delta: int) -> int:
        """
        Add delta to an atom's charge.

        Returns:
            The new charge

        Raises:
            LedgerConsistencyError: If the atom was never seeded
        """
        if atom_index not in self._charges:
            raise LedgerConsistencyError(f"Charge for atom {atom_index} was never initialized")
        self._charges[atom_index] += delta
        logger.debug(f"Updated charge for atom {atom_index}: {self._charges[atom_index]}")
        return self._charges[atom_index]

    def as_dict(self) -> Dict[int, int]:
        return dict(self._charges)

    def total(self) -> int:
        return sum(self._charges.values())

    def __len__(self) -> int:
        return len(self._charges)

    def __contains__(self, atom_index: int) -> bool:
        return atom_index in self._charges
