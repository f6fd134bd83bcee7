import pytest

from arrowpush.core.domain.exceptions import LedgerConsistencyError
from arrowpush.core.services.charge_ledger import ChargeLedger


def test_seeded_from_graph(methoxide):
    ledger = ChargeLedger.from_graph(methoxide)

    assert len(ledger) == 2
    assert ledger.as_dict() == {0: 0, 1: -1}
    assert ledger.total() == -1


def test_get_unset_returns_zero():
    ledger = ChargeLedger()

    assert ledger.get(7) == 0
    assert 7 not in ledger


def test_set_overwrites():
    ledger = ChargeLedger({0: 1})
    ledger.set(0, -2)
    ledger.set(3, 1)

    assert ledger.get(0) == -2
    assert ledger.get(3) == 1


def test_adjust_adds_delta(methoxide):
    ledger = ChargeLedger.from_graph(methoxide)

    assert ledger.adjust(1, +1) == 0
    assert ledger.adjust(0, -1) == -1
    assert ledger.total() == -1


def test_adjust_unseeded_atom_raises():
    ledger = ChargeLedger({0: 0})

    with pytest.raises(LedgerConsistencyError):
        ledger.adjust(5, 1)


def test_ledger_does_not_write_back_to_graph(methoxide):
    ledger = ChargeLedger.from_graph(methoxide)
    ledger.adjust(1, 1)

    assert methoxide.atom_charge(1) == -1
