import random

import pytest

from sensorsim.sensors import SensorType, read_sensor


class _FixedRng:
    """Returns a chosen draw: the lowest or the highest value allowed."""

    def __init__(self, highest):
        self.highest = highest

    def randrange(self, stop):
        return stop - 1 if self.highest else 0


@pytest.mark.parametrize(
    "sensor_type, low, high",
    [
        (SensorType.TEMPERATURE, 20.0, 40.0),
        (SensorType.HUMIDITY, 30.0, 100.0),
        (SensorType.CO2, 400.0, 1400.0),
    ],
)
def test_readings_stay_in_range(sensor_type, low, high):
    rng = random.Random(1234)
    for _ in range(500):
        value = read_sensor(0x48, sensor_type, rng)
        assert low <= value <= high


@pytest.mark.parametrize(
    "sensor_type, low",
    [
        (SensorType.TEMPERATURE, 20.0),
        (SensorType.HUMIDITY, 30.0),
        (SensorType.CO2, 400.0),
    ],
)
def test_lowest_draw_gives_range_start(sensor_type, low):
    assert read_sensor(0x40, sensor_type, _FixedRng(highest=False)) == low


def test_highest_co2_draw_is_upper_limit():
    assert read_sensor(0x61, SensorType.CO2, _FixedRng(highest=True)) == 1400.0


def test_highest_temperature_draw_stays_below_forty():
    value = read_sensor(0x48, SensorType.TEMPERATURE, _FixedRng(highest=True))
    assert 39.9 < value < 40.0


def test_same_seed_gives_same_readings():
    first = [read_sensor(0x48, t, random.Random(7)) for t in SensorType]
    second = [read_sensor(0x48, t, random.Random(7)) for t in SensorType]
    assert first == second


def test_integer_sensor_type_accepted():
    assert read_sensor(0x61, 2, _FixedRng(highest=False)) == 400.0


def test_unknown_sensor_type_reads_zero():
    assert read_sensor(0x10, 42, random.Random(0)) == 0.0