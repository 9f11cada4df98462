import math

import pytest

from parkingsim.barriers import EntryBarrier, ExitBarrier
from parkingsim.devs import Event


@pytest.fixture
def entry():
    model = EntryBarrier("entry")
    model.init(0.0)
    return model


@pytest.fixture
def exit_barrier():
    model = ExitBarrier("exit")
    model.init(0.0)
    return model


def test_entry_init_is_passive(entry):
    assert math.isinf(entry.ta(0.0))
    assert entry.is_open is False


def test_entry_grant_opens_barrier(entry):
    entry.dext(Event(6.0, 0), 2.0)
    assert entry.is_open
    assert 9.0 <= entry.ta(2.0) < 11.0
    assert 1.0 <= entry.crossing_time < 3.0
    assert entry.output(2.0) == Event(6.0, 0)


def test_entry_denial_turns_vehicle_away(entry):
    entry.dext(Event(6.0, 1), 2.0)
    assert entry.is_open is False
    assert 0.0 <= entry.ta(2.0) < 2.0
    assert entry.output(2.0).port == 0


def test_entry_dint_closes(entry):
    entry.dext(Event(6.0, 0), 0.0)
    entry.dint(10.0)
    assert entry.is_open is False
    assert math.isinf(entry.ta(10.0))


def test_entry_ignores_unknown_port(entry):
    entry.dext(Event(6.0, 2), 0.0)
    assert entry.ta(0.0) == math.inf
    assert entry.is_open is False


def test_exit_grant_releases_vehicle(exit_barrier):
    exit_barrier.dext(Event(8.0, 0), 1.0)
    assert exit_barrier.is_open
    assert 9.0 <= exit_barrier.ta(1.0) < 11.0
    assert exit_barrier.output(1.0) == Event(8.0, 0)


def test_exit_ignores_other_ports(exit_barrier):
    exit_barrier.dext(Event(8.0, 1), 1.0)
    assert exit_barrier.ta(1.0) == math.inf
    assert exit_barrier.is_open is False


def test_exit_dint_closes(exit_barrier):
    exit_barrier.dext(Event(8.0, 0), 0.0)
    exit_barrier.dint(10.0)
    assert math.isinf(exit_barrier.ta(10.0))
    assert exit_barrier.is_open is False


def test_barrier_timings_are_deterministic():
    a, b = EntryBarrier("a"), EntryBarrier("b")
    for model in (a, b):
        model.init(0.0)
        model.dext(Event(1.0, 0), 0.0)
    assert a.ta(0.0) == b.ta(0.0)