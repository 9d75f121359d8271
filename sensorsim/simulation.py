"""Periodic sampling of simulated sensors with a final statistics report."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import TextIO

from sensorsim.circular_buffer import BUFFER_SIZE, CircularBuffer
from sensorsim.median_filter import apply_median_filter
from sensorsim.sensors import SensorType, read_sensor
from sensorsim.stats import StatsResult, calculate_statistics

TEMPERATURE_ADDRESS = 0x48
HUMIDITY_ADDRESS = 0x40
CO2_ADDRESS = 0x61

DEFAULT_MEASUREMENTS = 20
DEFAULT_INTERVAL = 1.0
FILTER_WINDOW = 1

_SEPARATOR = "-" * 28


def _format_stats_line(label: str, stats: StatsResult) -> str:
    return (
        f"{label} -> Min: {stats.min:.2f}  Max: {stats.max:.2f}  "
        f"Median: {stats.median:.2f}  StdDev: {stats.std_dev:.2f}"
    )


def format_ble_report(
    temperature: StatsResult, humidity: StatsResult, co2: StatsResult
) -> str:
    """Render the statistics of the three sensors as a BLE packet summary."""
    lines = [
        "=== BLE Packet Simulation ===",
        _format_stats_line("Temperature", temperature),
        _format_stats_line("Humidity   ", humidity),
        _format_stats_line("CO2        ", co2),
    ]
    return "\n".join(lines)


def run_simulation(
    measurements: int = DEFAULT_MEASUREMENTS,
    interval: float = DEFAULT_INTERVAL,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> tuple[StatsResult, StatsResult, StatsResult]:
    """Sample every sensor ``measurements`` times and summarise the results.

    Each reading passes through a median filter, is printed and is kept in a
    ring buffer of the most recent values. Returns the statistics for
    temperature, humidity and CO2, in that order, after printing them.
    """
    if measurements < 1:
        raise ValueError(f"measurements must be positive, got {measurements}")
    if interval < 0:
        raise ValueError(f"interval must not be negative, got {interval}")
    stream = out if out is not None else sys.stdout
    source = rng if rng is not None else random.Random()

    sensors = (
        (TEMPERATURE_ADDRESS, SensorType.TEMPERATURE),
        (HUMIDITY_ADDRESS, SensorType.HUMIDITY),
        (CO2_ADDRESS, SensorType.CO2),
    )
    buffers = [CircularBuffer(BUFFER_SIZE) for _ in sensors]

    print("=== Sensor Simulation Started ===", file=stream)
    for number in range(1, measurements + 1):
        filtered = []
        for (address, kind), buffer in zip(sensors, buffers):
            raw = read_sensor(address, kind, source)
            value = apply_median_filter([raw], FILTER_WINDOW)
            buffer.push(value)
            filtered.append(value)

        temperature, humidity, co2 = filtered
        print(f"Measurement {number:02d}:", file=stream)
        print(f"  Temperature: {temperature:.2f} °C", file=stream)
        print(f"  Humidity   : {humidity:.2f} %", file=stream)
        print(f"  CO2        : {co2:.2f} ppm", file=stream)
        print(_SEPARATOR, file=stream, flush=True)

        if interval > 0:
            time.sleep(interval)

    temp_stats, humidity_stats, co2_stats = (
        calculate_statistics(buffer.get_all()) for buffer in buffers
    )
    print(file=stream)
    print(format_ble_report(temp_stats, humidity_stats, co2_stats), file=stream)
    print("=== Simulation Finished ===", file=stream, flush=True)
    return temp_stats, humidity_stats, co2_stats


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point for the sensor sampling simulation."""
    parser = argparse.ArgumentParser(
        description="Sample simulated sensors and report summary statistics."
    )
    parser.add_argument(
        "--count", type=int, default=DEFAULT_MEASUREMENTS,
        help="number of measurements to take",
    )
    parser.add_argument(
        "--interval", type=float, default=DEFAULT_INTERVAL,
        help="seconds between measurements",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        run_simulation(args.count, args.interval, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    sys.exit(main())