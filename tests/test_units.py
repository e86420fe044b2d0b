"""Tests for wind speed and temperature conversions."""

from __future__ import annotations

import math

import pytest

from outfit_weather.exceptions import InvalidInputError
from outfit_weather.schemas import TemperatureUnit, WindUnit
from outfit_weather.units import (
    WINDY_THRESHOLD_KMH,
    c_to_f,
    convert_temperature,
    ensure_finite,
    f_to_c,
    format_temperature,
    format_wind_speed,
    from_kmh,
    is_windy,
    parse_wind_unit,
    to_kmh,
)


class TestParseWindUnit:
    """Resolve unit names to WindUnit."""

    def test_enum_passthrough(self) -> None:
        assert parse_wind_unit(WindUnit.MPH) is WindUnit.MPH

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("kmh", WindUnit.KMH),
            ("km/h", WindUnit.KMH),
            ("KMH", WindUnit.KMH),
            ("mph", WindUnit.MPH),
            ("ms", WindUnit.MS),
            ("m/s", WindUnit.MS),
            ("kn", WindUnit.KN),
            ("knots", WindUnit.KN),
        ],
    )
    def test_accepted_spellings(self, raw: str, expected: WindUnit) -> None:
        assert parse_wind_unit(raw) is expected

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="furlongs"):
            parse_wind_unit("furlongs")

    def test_unknown_unit_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            to_kmh(10, "beaufort")


class TestWindConversion:
    """to_kmh / from_kmh."""

    def test_kmh_identity(self) -> None:
        assert to_kmh(25.0, WindUnit.KMH) == 25.0

    def test_mph(self) -> None:
        assert to_kmh(10.0, "mph") == pytest.approx(16.0934, abs=1e-3)

    def test_ms(self) -> None:
        assert to_kmh(5.0, "ms") == pytest.approx(18.0)

    def test_kn(self) -> None:
        assert to_kmh(10.0, "kn") == pytest.approx(18.52)

    @pytest.mark.parametrize("unit", list(WindUnit))
    def test_from_kmh_inverts_to_kmh(self, unit: WindUnit) -> None:
        for speed in (0.0, 0.5, 14.9, 15.0, 123.456):
            assert to_kmh(from_kmh(speed, unit), unit) == pytest.approx(speed, abs=1e-6)

    def test_zero_stays_zero(self) -> None:
        for unit in WindUnit:
            assert to_kmh(0.0, unit) == 0.0


class TestIsWindy:
    """Windbreaker threshold."""

    def test_threshold_value(self) -> None:
        assert WINDY_THRESHOLD_KMH == 15.0

    def test_threshold_is_inclusive(self) -> None:
        assert is_windy(15, "kmh") is True

    def test_just_below_threshold(self) -> None:
        assert is_windy(14.9, "kmh") is False

    def test_default_unit_is_kmh(self) -> None:
        assert is_windy(20) is True

    def test_mph_converted_before_compare(self) -> None:
        # 9 mph is ~14.5 km/h, 10 mph is ~16.1 km/h
        assert is_windy(9, "mph") is False
        assert is_windy(10, "mph") is True

    def test_ms_and_knots(self) -> None:
        assert is_windy(4.2, "ms") is True  # 15.12 km/h
        assert is_windy(4.1, "ms") is False
        assert is_windy(8.1, "kn") is True  # 15.0 km/h
        assert is_windy(8.0, "kn") is False


class TestTemperature:
    """Celsius / Fahrenheit helpers."""

    def test_c_to_f(self) -> None:
        assert c_to_f(0) == 32
        assert c_to_f(100) == 212

    def test_f_to_c(self) -> None:
        assert f_to_c(32) == 0
        assert f_to_c(-40) == -40

    def test_convert_temperature(self) -> None:
        assert convert_temperature(20.0, TemperatureUnit.C) == 20.0
        assert convert_temperature(20.0, "F") == pytest.approx(68.0)

    def test_format_temperature(self) -> None:
        assert format_temperature(22.2, "F") == "72°"
        assert format_temperature(-3.6, "C") == "-4°"


class TestFormatWindSpeed:
    """Display strings for wind speeds."""

    def test_kmh(self) -> None:
        assert format_wind_speed(25.0, "kmh") == "25 km/h"

    def test_mph(self) -> None:
        assert format_wind_speed(24.14, "mph") == "15 mph"

    def test_ms(self) -> None:
        assert format_wind_speed(14.4, "ms") == "4 m/s"

    def test_kn(self) -> None:
        assert format_wind_speed(14.816, "kn") == "8 kn"


class TestEnsureFinite:
    """Reject NaN and infinity."""

    def test_finite_passthrough(self) -> None:
        assert ensure_finite(1.5) == 1.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(InvalidInputError, match="temperature"):
            ensure_finite(value, "temperature")
