"""Simulated I2C sensor readings."""

from __future__ import annotations

import random
from enum import Enum


class SensorType(Enum):
    """Kinds of simulated sensor."""

    TEMPERATURE = 0
    HUMIDITY = 1
    CO2 = 2


def read_sensor(
    device_address: int,
    sensor_type: SensorType | int,
    rng: random.Random | None = None,
) -> float:
    """Return a plausible random measurement for the given sensor type.

    ``device_address`` identifies the device on the bus and does not affect
    the simulated value. Temperature lies in 20.0-40.0 °C, relative humidity
    in 30-100 % and CO2 in 400-1400 ppm. An unknown sensor type reads 0.0.
    """
    source = rng if rng is not None else random
    try:
        kind = SensorType(sensor_type)
    except ValueError:
        return 0.0

    if kind is SensorType.TEMPERATURE:
        return 20.0 + source.randrange(1000) / 50.0
    if kind is SensorType.HUMIDITY:
        return 30.0 + source.randrange(700) / 10.0
    return 400.0 + source.randrange(1001)