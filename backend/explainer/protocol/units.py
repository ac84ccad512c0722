"""Unit conversion for report measurements.

Distance, speed, temperature and pressure values are converted through a
base unit per axis (meters, m/s, Celsius, hPa).  Conversions never invent
a value: a missing magnitude converts to None.

Relative humidity is derived from air temperature and dew point with the
Magnus formula.
"""

import math
from typing import Optional, Union

from .constants import DistanceUnit, PressureUnit, SpeedUnit, TemperatureUnit

Unit = Union[DistanceUnit, SpeedUnit, TemperatureUnit, PressureUnit]

METERS_PER_STATUTE_MILE = 1609.344
METERS_PER_FOOT = 0.3048
HPA_PER_INHG = 33.8639
HPA_PER_MMHG = 1.333224

# Size of one unit expressed in the axis base unit
DISTANCE_FACTORS = {
    DistanceUnit.METERS: 1.0,
    DistanceUnit.STATUTE_MILES: METERS_PER_STATUTE_MILE,
    DistanceUnit.FEET: METERS_PER_FOOT,
}

SPEED_FACTORS = {
    SpeedUnit.METERS_PER_SECOND: 1.0,
    SpeedUnit.KNOTS: 1852.0 / 3600.0,
    SpeedUnit.KILOMETERS_PER_HOUR: 1.0 / 3.6,
    SpeedUnit.MILES_PER_HOUR: 0.44704,
}

PRESSURE_FACTORS = {
    PressureUnit.HECTOPASCAL: 1.0,
    PressureUnit.INCHES_HG: HPA_PER_INHG,
    PressureUnit.MM_HG: HPA_PER_MMHG,
}

_AXES = (DISTANCE_FACTORS, SPEED_FACTORS, PRESSURE_FACTORS)

# Magnus formula constants
MAGNUS_A = 17.502
MAGNUS_B = 240.97


def c_to_f(temp_c: float) -> float:
    return temp_c * 9.0 / 5.0 + 32.0


def f_to_c(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


def convert(value: Optional[float], from_unit: Unit, to_unit: Unit) -> Optional[float]:
    """Convert a magnitude between two units of the same axis.

    Args:
        value: Magnitude in from_unit, or None if not reported.
        from_unit: Unit the value is expressed in.
        to_unit: Target unit; must belong to the same axis as from_unit.

    Returns:
        Converted magnitude, or None when value is None.

    Raises:
        ValueError: if the units measure different quantities.
    """
    if isinstance(from_unit, TemperatureUnit) and isinstance(to_unit, TemperatureUnit):
        if value is None or from_unit == to_unit:
            return value
        if to_unit == TemperatureUnit.F:
            return c_to_f(value)
        return f_to_c(value)

    for factors in _AXES:
        if from_unit in factors and to_unit in factors:
            if value is None:
                return None
            if from_unit == to_unit:
                return value
            return value * factors[from_unit] / factors[to_unit]

    raise ValueError(f"Cannot convert {from_unit!r} to {to_unit!r}")


def relative_humidity(temp_c: Optional[float], dew_point_c: Optional[float]) -> Optional[float]:
    """Relative humidity in percent from air temperature and dew point.

    Returns None unless both values are reported.  The result is capped at
    100% since a reported dew point can exceed the air temperature by a
    rounding step.
    """
    if temp_c is None or dew_point_c is None:
        return None
    gamma_dew = (MAGNUS_A * dew_point_c) / (MAGNUS_B + dew_point_c)
    gamma_air = (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c)
    rh = 100.0 * math.exp(gamma_dew - gamma_air)
    return min(rh, 100.0)
