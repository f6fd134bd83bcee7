import networkx as nx
import numpy as np

from arrowpush.core.domain.models.atom import Atom
from arrowpush.core.domain.models.bond import Bond
from arrowpush.core.domain.models.molecular_graph import MolecularGraph


def make_formaldehyde():
    atoms = [
        Atom(0, "C", (0.0, 0.0, 0.0), implicit_hydrogens=2),
        Atom(1, "O", (1.2, 0.0, 0.0)),
    ]
    return MolecularGraph(atoms, [Bond(0, 1, 2)])


def test_get_coordinates():
    coords = make_formaldehyde().get_coordinates()

    assert coords.shape == (2, 3)
    np.testing.assert_allclose(coords[1], [1.2, 0.0, 0.0])


def test_get_coordinates_empty():
    assert MolecularGraph([], []).get_coordinates().shape == (0, 3)


def test_to_networkx():
    G = make_formaldehyde().to_networkx()

    assert isinstance(G, nx.Graph)
    assert len(G.nodes) == 2
    assert G.nodes[0]["element"] == "C"
    assert G.nodes[0]["hydrogens"] == 2
    assert G.nodes[1]["charge"] == 0
    assert G.edges[1, 0]["order"] == 2
