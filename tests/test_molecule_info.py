import numpy as np

from arrowpush.core.services.molecule_info import MoleculeInfoService

from conftest import build_graph


def make_info():
    graph = build_graph(
        ["C", "C", "O", "N"],
        [(0, 1, 1), (1, 2, 2), (1, 3, 0)],
        charges={3: 1},
        coords={0: (0.0, 0.0, 0.0), 1: (1.5, 0.0, 0.2), 2: (2.2, 1.0, -0.1), 3: (2.0, -1.2, 0.0)},
    )
    return MoleculeInfoService(graph)


def test_coordinates_3d():
    coords = make_info().coordinates_3d()

    assert coords.shape == (4, 3)
    np.testing.assert_allclose(coords[1], [1.5, 0.0, 0.2])


def test_formal_charges():
    assert make_info().formal_charges() == [0, 0, 0, 1]


def test_bond_types():
    assert make_info().bond_types() == [
        {"atom1": 0, "atom2": 1, "type": "single"},
        {"atom1": 1, "atom2": 2, "type": "double"},
        {"atom1": 1, "atom2": 3, "type": "none"},
    ]


def test_bonds():
    bonds = make_info().bonds()

    assert [(b.atom1_id, b.atom2_id, b.bond_order) for b in bonds] == [
        (0, 1, 1),
        (1, 2, 2),
        (1, 3, 0),
    ]


def test_find_atom_at_scaled_point():
    info = make_info()

    assert info.find_atom_at(1.6, 0.1) == 1
    assert info.find_atom_at(44.0, 20.0, scale=20.0) == 2


def test_find_atom_at_outside_tolerance():
    assert make_info().find_atom_at(0.8, 0.8) == -1


def test_empty_molecule():
    info = MoleculeInfoService(build_graph([], []))

    assert info.coordinates_3d().shape == (0, 3)
    assert info.find_atom_at(0.0, 0.0) == -1
