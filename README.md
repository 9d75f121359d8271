# sensorsim

A small sensor-node simulator. Use it to test data-handling logic when no
real sensors are attached.

It has two parts:

- **Sampling pipeline** (`sensorsim.simulation`). It reads mock temperature,
  humidity and CO2 sensors once per interval. Each reading passes through a
  median filter and is stored in a 32-entry circular buffer. At the end it
  prints the min, max, median and population standard deviation for each
  sensor, laid out as a BLE packet summary.
- **Producer-consumer demo** (`sensorsim.rtos`). A producer thread puts random
  readings (0.0 to 99.9) into a bounded queue, and a slower consumer thread
  takes them out. When the queue is full, the new reading is dropped and
  reported as lost.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Run the sampling pipeline. By default it takes 20 measurements one second
apart and then prints the statistics:

```
sensorsim
sensorsim --count 5 --interval 0 --seed 1
```

| Option       | Default | Meaning                       |
|--------------|---------|-------------------------------|
| `--count`    | 20      | number of measurements        |
| `--interval` | 1.0     | seconds between measurements  |
| `--seed`     | random  | seed for the random generator |

Run the producer-consumer simulation. It runs until interrupted with Ctrl+C,
or for `--duration` seconds when that option is given:

```
sensorsim-rtos
sensorsim-rtos --duration 10 --seed 1
```

| Option               | Default | Meaning                               |
|----------------------|---------|---------------------------------------|
| `--queue-size`       | 16      | capacity of the shared queue          |
| `--produce-interval` | 1.0     | seconds between produced readings     |
| `--consume-interval` | 2.0     | seconds the consumer pauses per item  |
| `--seed`             | random  | seed for the random generator         |
| `--duration`         | none    | stop after this many seconds          |

Invalid values, such as a non-positive count or a negative interval, are
reported as usage errors.

## Library use

```python
import random

from sensorsim.circular_buffer import CircularBuffer
from sensorsim.median_filter import apply_median_filter
from sensorsim.sensors import SensorType, read_sensor
from sensorsim.stats import calculate_statistics

rng = random.Random(42)
buffer = CircularBuffer(32)
for _ in range(10):
    raw = read_sensor(0x48, SensorType.TEMPERATURE, rng)
    buffer.push(apply_median_filter([raw], 1))

stats = calculate_statistics(buffer.get_all())
print(stats.min, stats.max, stats.median, stats.std_dev)
```

- `CircularBuffer(capacity)` keeps the newest `capacity` values. Once it is
  full, each push drops the oldest value. `get_all()` returns the stored values
  from oldest to newest. `len()` gives the number of values stored.
- `read_sensor(device_address, sensor_type, rng)` returns a random reading:
  - temperature: 20.0–40.0 °C
  - humidity: 30–100 %
  - CO2: 400–1400 ppm

  The address does not affect the value. An unknown sensor type reads 0.0.
- `apply_median_filter(values, window_size)` returns the median of the first
  `window_size` values. It returns 0.0 for an empty window. If `window_size` is
  negative or larger than the input, it raises `ValueError`.
- `calculate_statistics(data)` returns a frozen `StatsResult` with `min`,
  `max`, `median` and `std_dev`. It raises `ValueError` for empty data.
- `run_simulation(measurements, interval, rng, out)` and
  `format_ble_report(temperature, humidity, co2)` in `sensorsim.simulation`
  drive the pipeline from code. `run_simulation` returns the three
  `StatsResult` values.
- `RtosSimulation` in `sensorsim.rtos` can be driven by hand or run with
  threads:
  - `produce_once()` returns `False` when a reading is dropped.
  - `consume_once(timeout)` returns `None` if it times out.
  - `run(stop)` runs both threads until the `threading.Event` is set.

## Limitations

- No real hardware is used. All readings come from a random number generator.
- The "BLE packet" is text printed to the output stream. Nothing is sent over
  Bluetooth or any other link.
- Readings and statistics are not stored anywhere once the process exits.