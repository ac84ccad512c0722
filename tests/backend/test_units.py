"""Tests for measurement unit conversion."""

import pytest

from explainer.protocol.constants import (
    DistanceUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
)
from explainer.protocol.group_types import Distance, Pressure, Speed, Temperature
from explainer.protocol.units import convert, relative_humidity

AXES = [
    (list(DistanceUnit), 1234.5),
    (list(SpeedUnit), 17.0),
    (list(TemperatureUnit), -12.5),
    (list(PressureUnit), 1013.25),
]


class TestConvert:
    def test_missing_value_stays_missing(self):
        assert convert(None, DistanceUnit.STATUTE_MILES, DistanceUnit.METERS) is None
        assert convert(None, TemperatureUnit.C, TemperatureUnit.F) is None
        assert convert(None, PressureUnit.INCHES_HG, PressureUnit.INCHES_HG) is None

    def test_statute_miles_to_meters(self):
        assert convert(2, DistanceUnit.STATUTE_MILES, DistanceUnit.METERS) == pytest.approx(3218.688)

    def test_statute_miles_to_feet(self):
        assert convert(1, DistanceUnit.STATUTE_MILES, DistanceUnit.FEET) == pytest.approx(5280)

    def test_knots_to_kmh(self):
        assert convert(10, SpeedUnit.KNOTS, SpeedUnit.KILOMETERS_PER_HOUR) == pytest.approx(18.52)

    def test_mph_to_mps(self):
        assert convert(10, SpeedUnit.MILES_PER_HOUR, SpeedUnit.METERS_PER_SECOND) == pytest.approx(4.4704)

    def test_celsius_to_fahrenheit(self):
        assert convert(20, TemperatureUnit.C, TemperatureUnit.F) == pytest.approx(68)
        assert convert(-40, TemperatureUnit.C, TemperatureUnit.F) == pytest.approx(-40)

    def test_fahrenheit_to_celsius(self):
        assert convert(212, TemperatureUnit.F, TemperatureUnit.C) == pytest.approx(100)

    def test_inhg_to_hpa(self):
        assert convert(29.92, PressureUnit.INCHES_HG, PressureUnit.HECTOPASCAL) == pytest.approx(1013.21, abs=0.01)

    def test_mmhg_to_hpa(self):
        assert convert(750, PressureUnit.MM_HG, PressureUnit.HECTOPASCAL) == pytest.approx(999.918)

    def test_same_unit_is_identity(self):
        assert convert(0.25, DistanceUnit.STATUTE_MILES, DistanceUnit.STATUTE_MILES) == 0.25

    def test_zero_is_a_value(self):
        assert convert(0, SpeedUnit.KNOTS, SpeedUnit.METERS_PER_SECOND) == 0

    @pytest.mark.parametrize("units,value", AXES)
    def test_round_trip_every_pair(self, units, value):
        for a in units:
            for b in units:
                there = convert(value, a, b)
                assert convert(there, b, a) == pytest.approx(value)

    def test_mixed_axes_rejected(self):
        with pytest.raises(ValueError):
            convert(1, DistanceUnit.METERS, SpeedUnit.KNOTS)
        with pytest.raises(ValueError):
            convert(1, TemperatureUnit.C, PressureUnit.HECTOPASCAL)


class TestMeasurementToUnit:
    def test_distance(self):
        assert Distance(1609.344, DistanceUnit.METERS).to_unit(DistanceUnit.STATUTE_MILES) == pytest.approx(1)

    def test_not_reported_measurements(self):
        assert not Distance().is_reported
        assert Distance().to_unit(DistanceUnit.FEET) is None
        assert Speed(None, SpeedUnit.KNOTS).to_unit(SpeedUnit.MILES_PER_HOUR) is None
        assert Temperature().to_unit(TemperatureUnit.F) is None
        assert Pressure().to_unit(PressureUnit.INCHES_HG) is None

    def test_zero_is_reported(self):
        assert Temperature(0).is_reported
        assert Temperature(0).to_unit(TemperatureUnit.F) == pytest.approx(32)


class TestRelativeHumidity:
    def test_saturated(self):
        assert relative_humidity(20, 20) == pytest.approx(100)

    def test_typical(self):
        rh = relative_humidity(20, 15)
        assert 72 < rh < 74

    def test_capped_at_100(self):
        assert relative_humidity(10, 11) == 100

    def test_missing_input(self):
        assert relative_humidity(None, 10) is None
        assert relative_humidity(10, None) is None
