import math

import pytest

from parkingsim.devs import Event
from parkingsim.sensors import EntrySensor, ExitSensor, Sensor

SENSOR_TYPES = [Sensor, EntrySensor, ExitSensor]


@pytest.fixture(params=SENSOR_TYPES)
def sensor(request):
    model = request.param("sensor")
    model.init(0.0)
    return model


def test_starts_idle():
    models = [Sensor("s"), EntrySensor("entry"), ExitSensor("exit")]
    for model in models:
        model.init(0.0)
    assert [model.busy for model in models] == [False, False, False]
    assert [model.ta(0.0) for model in models] == [math.inf] * 3


def test_arrival_when_idle_starts_detection(sensor):
    sensor.dext(Event(5.0, 0), 2.0)
    assert sensor.busy is True
    assert sensor.ta(2.0) == 1.0
    assert sensor.output(3.0) == Event(5.0, 0)


def test_arrival_when_busy_is_queued_and_sigma_reduced(sensor):
    sensor.dext(Event(1.0, 0), 0.0)
    sensor.elapsed = 0.25
    sensor.dext(Event(2.0, 0), 0.25)
    assert list(sensor.queue) == [2.0]
    assert sensor.ta(0.25) == pytest.approx(1.0 - 0.25)
    assert sensor.output(1.0).value == 1.0


def test_queue_is_served_in_order(sensor):
    for vehicle in (1.0, 2.0, 3.0):
        sensor.dext(Event(vehicle, 0), 0.0)
    detected = [sensor.output(0.0).value]
    for t in (1.0, 2.0):
        sensor.dint(t)
        detected.append(sensor.output(t).value)
    assert detected == [1.0, 2.0, 3.0]
    assert sensor.ta(2.0) == 1.0


def test_becomes_idle_when_queue_empties(sensor):
    sensor.dext(Event(7.0, 0), 0.0)
    sensor.dint(1.0)
    assert sensor.busy is False
    assert math.isinf(sensor.ta(1.0))


def test_other_ports_are_ignored(sensor):
    sensor.dext(Event(4.0, 1), 0.0)
    assert sensor.busy is False
    assert len(sensor.queue) == 0
    assert math.isinf(sensor.ta(0.0))


def test_new_arrival_after_idle_is_detected(sensor):
    sensor.dext(Event(1.0, 0), 0.0)
    sensor.dint(1.0)
    sensor.dext(Event(8.0, 0), 4.0)
    assert sensor.output(5.0) == Event(8.0, 0)


def test_entry_and_exit_sensors_behave_alike_with_distinct_labels():
    entry, exit_sensor = EntrySensor("entry"), ExitSensor("exit")
    for model in (entry, exit_sensor):
        model.init(0.0)
        model.dext(Event(2.0, 0), 0.0)
    assert entry.output(1.0) == exit_sensor.output(1.0) == Event(2.0, 0)
    assert entry.ta(0.0) == exit_sensor.ta(0.0) == 1.0
    assert entry.label != exit_sensor.label