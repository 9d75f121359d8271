import io
import random
import re

import pytest

from sensorsim.simulation import format_ble_report, main, run_simulation
from sensorsim.stats import StatsResult


def _run(measurements, seed=1):
    out = io.StringIO()
    result = run_simulation(measurements, 0, random.Random(seed), out)
    return result, out.getvalue()


def test_values_stay_in_sensor_ranges():
    (temp, humidity, co2), _ = _run(10)
    assert 20.0 <= temp.min <= temp.median <= temp.max <= 40.0
    assert 30.0 <= humidity.min <= humidity.median <= humidity.max <= 100.0
    assert 400.0 <= co2.min <= co2.median <= co2.max <= 1400.0
    assert temp.std_dev >= 0.0


def test_output_lists_each_measurement():
    _, text = _run(5)
    assert "Measurement 01:" in text
    assert "Measurement 05:" in text
    assert "Measurement 06:" not in text
    assert text.count("Temperature:") == 5


def test_same_seed_gives_same_result():
    first, first_text = _run(7, seed=42)
    second, second_text = _run(7, seed=42)
    assert first == second
    assert first_text == second_text


def test_zero_measurements_rejected():
    with pytest.raises(ValueError):
        run_simulation(0, 0, random.Random(1), io.StringIO())


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        run_simulation(3, -1, random.Random(1), io.StringIO())


def test_statistics_cover_only_last_buffer_window():
    (temp, _, _), text = _run(40)
    readings = [float(v) for v in re.findall(r"Temperature: ([0-9.]+)", text)]
    assert len(readings) == 40
    window = readings[-32:]
    assert temp.min == pytest.approx(min(window))
    assert temp.max == pytest.approx(max(window))


def test_single_measurement_has_zero_spread():
    (temp, humidity, co2), _ = _run(1)
    for stats in (temp, humidity, co2):
        assert stats.min == stats.max == stats.median
        assert stats.std_dev == 0.0


def test_format_ble_report_layout():
    stats = StatsResult(min=1.0, max=2.0, median=3.0, std_dev=4.0)
    report = format_ble_report(stats, stats, stats)
    lines = report.splitlines()
    assert lines[0] == "=== BLE Packet Simulation ==="
    assert len(lines) == 4
    assert lines[1].startswith("Temperature -> ")
    assert lines[3].startswith("CO2")
    assert lines[1].endswith("Min: 1.00  Max: 2.00  Median: 3.00  StdDev: 4.00")


def test_report_is_printed_by_run():
    (temp, humidity, co2), text = _run(3)
    assert format_ble_report(temp, humidity, co2) in text


def test_main_runs(capsys):
    assert main(["--count", "2", "--interval", "0", "--seed", "3"]) == 0
    text = capsys.readouterr().out
    assert "Measurement 02:" in text
    assert text.rstrip().endswith("=== Simulation Finished ===")