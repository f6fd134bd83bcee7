import pytest

from arrowpush.config import EngineSettings
from arrowpush.core.domain.exceptions import BondNotFoundError
from arrowpush.core.domain.models.move import MoveKind
from arrowpush.core.domain.models.transition import (
    TransitionDirection,
    TransitionEventType,
    target_order_for,
)
from arrowpush.core.services.bond_transition import BondTransitionMachine

from conftest import build_graph

INCREASE = TransitionDirection.INCREASE
DECREASE = TransitionDirection.DECREASE


@pytest.fixture
def chain():
    """0-1 single, 1-2 double, 2-3 triple, 3-4 zero-order."""
    return build_graph(
        ["C", "C", "C", "C", "C"],
        [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 4, 0)],
    )


@pytest.fixture
def machine(chain, fast_settings):
    return BondTransitionMachine(chain, fast_settings)


class TestTargetOrder:
    @pytest.mark.parametrize(
        "initial, direction, expected",
        [
            (1, INCREASE, 2),
            (3, INCREASE, 3),
            (1, DECREASE, 0),
            (0, DECREASE, 0),
            (1.5, INCREASE, 2),
            (1.5, DECREASE, 1),
        ],
    )
    def test_clamped_targets(self, initial, direction, expected):
        assert target_order_for(initial, direction) == expected

    @pytest.mark.parametrize(
        "initial, expected",
        [(1, 2), (2, 2), (3, 3), (2.5, 2)],
    )
    def test_lower_ceiling(self, initial, expected):
        assert target_order_for(initial, INCREASE, max_order=2) == expected


class TestLifecycle:
    def test_start_creates_entry_at_zero_progress(self, machine):
        transition = machine.start_transition(1, 0, INCREASE, MoveKind.ATOM_TO_BOND)

        assert transition.progress == 0.0
        assert transition.initial_order == 1
        assert transition.target_order == 2
        assert transition.key == (0, 1)
        assert machine.get_progress(0, 1) is transition
        assert machine.get_progress(1, 0) is transition
        assert machine.is_animating()

    def test_progress_advances_until_commit(self, machine, chain):
        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)

        for expected in (0.25, 0.5, 0.75):
            assert machine.advance() == []
            assert machine.get_progress(0, 1).progress == pytest.approx(expected)
            assert chain.bond_order(0, 1) == 1

        committed = machine.advance()

        assert [t.key for t in committed] == [(0, 1)]
        assert committed[0].progress == 1.0
        assert chain.bond_order(0, 1) == 2
        assert machine.get_progress(0, 1) is None
        assert not machine.is_animating()

    def test_default_step_completes_in_about_two_hundred_ticks(self, chain):
        machine = BondTransitionMachine(chain)
        machine.start_transition(0, 1, DECREASE, MoveKind.BOND_TO_ATOM)

        ticks = 0
        while machine.is_animating() and ticks < 500:
            machine.advance()
            ticks += 1

        assert ticks in (200, 201)
        assert chain.bond_order(0, 1) == 0

    def test_increase_on_triple_bond_is_idempotent(self, machine, chain):
        transition = machine.start_transition(2, 3, INCREASE, MoveKind.ATOM_TO_BOND)
        assert transition.target_order == 3

        machine.advance(1.0)

        assert chain.bond_order(2, 3) == 3

    def test_decrease_on_zero_order_bond_stays_zero(self, machine, chain):
        machine.start_transition(3, 4, DECREASE, MoveKind.BOND_TO_ATOM)
        machine.advance(1.0)

        assert chain.bond_order(3, 4) == 0

    def test_initial_order_is_read_at_start(self, machine, chain):
        chain.set_bond_order(1, 2, 1)
        transition = machine.start_transition(1, 2, INCREASE, MoveKind.ATOM_TO_BOND)

        assert transition.initial_order == 1
        assert transition.target_order == 2

    def test_missing_bond_raises(self, machine):
        with pytest.raises(BondNotFoundError):
            machine.start_transition(0, 4, INCREASE, MoveKind.ATOM_TO_BOND)

    def test_non_positive_step_raises(self, machine):
        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)

        with pytest.raises(ValueError):
            machine.advance(0)

    def test_get_progress_has_no_side_effects(self, machine):
        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)
        machine.advance()

        for _ in range(3):
            assert machine.get_progress(1, 0).progress == pytest.approx(0.25)

    def test_interpolated_order(self, machine):
        transition = machine.start_transition(1, 2, DECREASE, MoveKind.BOND_TO_ATOM)
        machine.advance()
        machine.advance()

        assert transition.current_order == pytest.approx(1.5)

    def test_clear_drops_without_commit(self, machine, chain):
        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)
        machine.clear()
        machine.advance(1.0)

        assert chain.bond_order(0, 1) == 1


class TestConcurrency:
    def test_restart_replaces_active_entry(self, machine, chain):
        first = machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)
        machine.advance()
        machine.advance()

        second = machine.start_transition(1, 0, DECREASE, MoveKind.BOND_TO_ATOM)

        assert machine.get_progress(0, 1) is second
        assert second.progress == 0.0
        assert len(machine.active_transitions()) == 1

        while machine.is_animating():
            machine.advance()

        assert first.progress == pytest.approx(0.5)
        assert chain.bond_order(0, 1) == 0

    def test_transitions_advance_independently(self, machine, chain):
        machine.start_transition(0, 1, INCREASE, MoveKind.BOND_TO_BOND)
        machine.advance()
        machine.start_transition(1, 2, DECREASE, MoveKind.BOND_TO_BOND)

        machine.advance()
        machine.advance()
        committed = machine.advance()

        assert [t.key for t in committed] == [(0, 1)]
        assert machine.get_progress(1, 2).progress == pytest.approx(0.75)
        assert chain.bond_order(0, 1) == 2
        assert chain.bond_order(1, 2) == 2

        machine.advance()

        assert chain.bond_order(1, 2) == 1
        assert not machine.is_animating()


class TestEvents:
    def test_listener_sees_full_lifecycle(self, machine):
        events = []
        machine.add_listener(lambda event: events.append(event.event_type))

        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)
        machine.advance(0.5)
        machine.advance(0.5)

        assert events == [
            TransitionEventType.STARTED,
            TransitionEventType.PROGRESS,
            TransitionEventType.COMMITTED,
        ]

    def test_replacement_is_announced(self, machine):
        events = []
        machine.add_listener(lambda event: events.append((event.event_type, event.transition.direction)))

        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)
        machine.start_transition(0, 1, DECREASE, MoveKind.BOND_TO_ATOM)

        assert events[1:] == [
            (TransitionEventType.REPLACED, INCREASE),
            (TransitionEventType.STARTED, DECREASE),
        ]

    def test_removed_listener_is_silent(self, machine):
        events = []
        listener = events.append
        machine.add_listener(listener)
        machine.remove_listener(listener)

        machine.start_transition(0, 1, INCREASE, MoveKind.ATOM_TO_BOND)

        assert events == []


def test_order_ceiling_follows_settings(chain):
    machine = BondTransitionMachine(chain, EngineSettings(progress_step=0.5, max_bond_order=2))

    transition = machine.start_transition(1, 2, INCREASE, MoveKind.ATOM_TO_BOND)

    assert transition.target_order == 2


def test_increase_never_lowers_bond_above_ceiling(chain):
    machine = BondTransitionMachine(chain, EngineSettings(progress_step=0.5, max_bond_order=2))

    transition = machine.start_transition(2, 3, INCREASE, MoveKind.BOND_TO_BOND)
    machine.advance(1.0)

    assert transition.initial_order == 3
    assert transition.target_order == 3
    assert chain.bond_order(2, 3) == 3


def test_failing_listener_does_not_split_a_tick(machine, chain):
    machine.start_transition(0, 1, INCREASE, MoveKind.BOND_TO_BOND)
    machine.start_transition(1, 2, DECREASE, MoveKind.BOND_TO_BOND)

    def explode(event):
        if event.event_type is TransitionEventType.COMMITTED:
            raise RuntimeError("listener failed")

    machine.add_listener(explode)

    with pytest.raises(RuntimeError):
        machine.advance(1.0)

    assert chain.bond_order(0, 1) == 2
    assert chain.bond_order(1, 2) == 1
    assert not machine.is_animating()
