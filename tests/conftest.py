import pytest

from arrowpush.config import EngineSettings
from arrowpush.core.domain.models.atom import Atom
from arrowpush.core.domain.models.bond import Bond
from arrowpush.core.domain.models.molecular_graph import MolecularGraph
from arrowpush.core.services.mechanism_session import MechanismSession
from arrowpush.infrastructure.adapters.networkx_adapter import NetworkXMoleculeAdapter


def build_graph(elements, bonds, charges=None, hydrogens=None, coords=None):
    """Build a NetworkX-backed molecule from parallel lists.

    bonds is a list of (atom1, atom2, order) tuples.
    """
    charges = charges or {}
    hydrogens = hydrogens or {}
    coords = coords or {}
    atoms = [
        Atom(
            atom_id=i,
            element=element,
            coordinates=coords.get(i, (float(i), 0.0, 0.0)),
            charge=charges.get(i, 0),
            implicit_hydrogens=hydrogens.get(i, 0),
        )
        for i, element in enumerate(elements)
    ]
    return NetworkXMoleculeAdapter.from_molecular_graph(
        MolecularGraph(atoms, [Bond(a, b, order) for a, b, order in bonds])
    )


@pytest.fixture
def fast_settings():
    return EngineSettings.fast()


@pytest.fixture
def bromoethane():
    """CH3-CH2-Br with hydrogens folded into the carbons."""
    return build_graph(["C", "C", "Br"], [(0, 1, 1), (1, 2, 1)], hydrogens={0: 3, 1: 2})


@pytest.fixture
def methoxide():
    """CH3-O(-)."""
    return build_graph(["C", "O"], [(0, 1, 1)], charges={1: -1}, hydrogens={0: 3})


@pytest.fixture
def enolate_path():
    """Seven-atom chain with a double bond 2=3 and a single bond 3-6."""
    return build_graph(
        ["C", "C", "C", "C", "C", "C", "O"],
        [(0, 1, 1), (1, 2, 1), (2, 3, 2), (3, 6, 1), (3, 4, 1), (4, 5, 1)],
        hydrogens={0: 3, 1: 2, 2: 1, 4: 2, 5: 3},
    )


@pytest.fixture
def session_factory(fast_settings):
    def make(graph):
        return MechanismSession(fast_settings).load(graph)

    return make


def run_until_idle(session, max_ticks=1000):
    ticks = 0
    while session.is_animating() and ticks < max_ticks:
        session.tick()
        ticks += 1
    return ticks
