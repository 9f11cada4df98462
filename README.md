# parkingsim

Atomic models for a discrete-event (DEVS) simulation of a parking lot with
a capacity of 30 vehicles. Each model follows the classic atomic-model
interface: `init`, `ta` (time advance), `dint` (internal transition),
`dext` (external transition), `output` (the output function) and `exit`.

## Building blocks

- `parkingsim.devs.Event` is a frozen dataclass carrying a `value` (a vehicle
  id as a float) and a `port` number (default 0).
- `parkingsim.devs.AtomicModel` is the base class of every model. It keeps
  `name`, `sigma` (time to the next internal transition, `devs.INFINITY`
  when passive) and `elapsed` (time since the last transition). Its default
  behaviour is that of a passive model; `exit()` passivates the model.
- `parkingsim.rng.MersenneTwister` is a self-contained 32-bit MT19937
  generator. `random_bits()` returns the next 32-bit integer, `random()` a
  float in [0, 1), and `seed(seed)` reinitialises the state. The default
  seed is 5489.

## Models

- `parkingsim.generator.ArrivalGenerator` emits consecutive vehicle ids
  (0, 1, 2, ...) on port 0, with exponentially distributed inter-arrival
  times of mean 10. It has no inputs.
- `parkingsim.sensors.EntrySensor` and `parkingsim.sensors.ExitSensor`
  (both `Sensor`s) take vehicle ids on port 0, detect one vehicle per time
  unit, queue the rest in arrival order, and emit each detected id on
  port 0.
- `parkingsim.controller.Controller` answers entry requests (input port 0)
  and exit requests (port 1) after a random delay in [0, 3), and tracks
  `occupancy` from vehicles that passed the entry barrier (port 2) or the
  exit barrier (port 3). It outputs entry granted on port 0, entry denied
  (lot full) on port 1, exit granted on port 2 and "vehicle registered" on
  port 3. Requests arriving while the matching process is busy wait in
  `queue` as `(vehicle id, input port)` pairs.
- `parkingsim.parking.ParkingLot` parks each incoming vehicle for a stay
  drawn uniformly from [120, 300), keeps `vehicles` ordered by remaining
  stay, and emits the id of the vehicle whose stay expires on port 0.
- `parkingsim.barriers.EntryBarrier` opens on a grant (port 0): 4 time
  units to open, a crossing time in [1, 3), 4 to close. On a denial
  (port 1) the vehicle turns away within [0, 2). Either way the vehicle id
  is emitted on port 0.
- `parkingsim.barriers.ExitBarrier` opens on a grant (port 0) with the same
  timing and emits the vehicle id on port 0.

Each model that draws random numbers owns its own `MersenneTwister`
seeded with 5489, so runs are reproducible. The models report what they do
through the standard `logging` module at DEBUG level, under loggers named
after their modules (for example `parkingsim.controller`).

## Example

```python
from parkingsim.generator import ArrivalGenerator
from parkingsim.sensors import EntrySensor

generator = ArrivalGenerator("generator")
sensor = EntrySensor("entry sensor")
generator.init(0.0)
sensor.init(0.0)

t = generator.ta(0.0)
event = generator.output(t)
generator.dint(t)
sensor.dext(event, t)
print(sensor.ta(t))  # 1.0: the sensor is now busy with the vehicle
```

## What the package does not do

The package provides the atomic models only. It has no coordinator or
coupled model that connects them and advances simulated time, and no
command to run a whole simulation: the caller routes each `Event` to the
right model and port, calls the transitions in order, and sets a model's
`elapsed` before calling its `dext`.

## Tests

```
pip install -e ".[test]"
pytest
```