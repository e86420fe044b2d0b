"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from datetime import UTC, date, datetime
from io import StringIO
from unittest.mock import patch

import pytest

from outfit_weather.cache import WeatherCache
from outfit_weather.cli import (
    cmd_cache,
    cmd_forecast,
    cmd_info,
    cmd_now,
    create_parser,
    main,
)
from outfit_weather.exceptions import WeatherApiError
from outfit_weather.flows import refresh
from outfit_weather.schemas import (
    DailyForecast,
    Location,
    WeatherReading,
    WeatherSnapshot,
)
from outfit_weather.store import MemoryStorage


def make_snapshot() -> WeatherSnapshot:
    return WeatherSnapshot(
        current=WeatherReading(
            temperature_c=5.0,
            weather_code=61,
            wind_speed=10.0,
            uv_index=3.0,
            is_day=True,
            observed_at=datetime(2026, 3, 2, 8, 0),
        ),
        location=Location(lat=45.5, lon=-122.6),
        timezone="America/Los_Angeles",
        daily=(
            DailyForecast(
                date=date(2026, 3, 2),
                temperature_max_c=11.0,
                temperature_min_c=3.0,
                weather_code=61,
            ),
            DailyForecast(
                date=date(2026, 3, 3),
                temperature_max_c=30.0,
                temperature_min_c=15.0,
                weather_code=0,
                uv_index_max=8.0,
            ),
        ),
    )


def now_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {"lat": None, "lon": None, "wind_unit": None, "temp_unit": None}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "outfit-weather"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_now_command(self) -> None:
        """Parser accepts now with location and units."""
        parser = create_parser()
        args = parser.parse_args(
            ["now", "--lat", "40.7", "--lon", "-74.0", "--wind-unit", "mph", "--temp-unit", "F"]
        )
        assert args.command == "now"
        assert args.lat == 40.7
        assert args.lon == -74.0
        assert args.wind_unit == "mph"
        assert args.temp_unit == "F"

    def test_parser_now_defaults(self) -> None:
        """Location and units default to None (filled from settings)."""
        args = create_parser().parse_args(["now"])
        assert args.lat is None
        assert args.wind_unit is None

    def test_parser_rejects_bad_temp_unit(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["now", "--temp-unit", "K"])

    def test_parser_forecast_command(self) -> None:
        args = create_parser().parse_args(["forecast"])
        assert args.command == "forecast"

    def test_parser_cache_command(self) -> None:
        args = create_parser().parse_args(["cache", "--clear"])
        assert args.command == "cache"
        assert args.clear is True


class TestCmdNow:
    """Tests for cmd_now function."""

    def test_prints_outfit(self) -> None:
        result = refresh._build_result(make_snapshot(), 0)

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", return_value=result),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_now(now_args())

        assert exit_code == 0
        output = mock_stdout.getvalue()
        assert result.recommendation.emojis in output
        assert result.one_liner in output
        assert "Slight rain" in output
        assert "Cold" in output
        assert "Offline" not in output

    def test_fahrenheit_and_mph(self) -> None:
        result = refresh._build_result(make_snapshot(), 0)

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", return_value=result),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_now(now_args(temp_unit="F", wind_unit="mph"))

        output = mock_stdout.getvalue()
        assert "41°F" in output
        assert "6 mph" in output

    def test_offline_notice(self) -> None:
        result = refresh._build_result(
            make_snapshot(), 0, age_seconds=3 * 3600, offline=True, from_cache=True
        )

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", return_value=result),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_now(now_args())

        assert "Offline: showing weather from 3 h ago" in mock_stdout.getvalue()

    def test_passes_settings_to_flow(self) -> None:
        result = refresh._build_result(make_snapshot(), 0)

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", return_value=result) as mock_flow,
            patch("sys.stdout", new=StringIO()),
        ):
            cmd_now(now_args(lat=40.7, lon=-74.0, wind_unit="km/h"))

        kwargs = mock_flow.call_args.kwargs
        assert kwargs["lat"] == 40.7
        assert kwargs["lon"] == -74.0
        assert kwargs["wind_unit"] == "kmh"

    def test_api_error_returns_one(self) -> None:
        error = WeatherApiError("Network error", "No internet connection.")

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", side_effect=error),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_now(now_args())

        assert exit_code == 1
        assert "No internet connection." in mock_stderr.getvalue()

    def test_bad_wind_unit_returns_one(self) -> None:
        with (
            patch("outfit_weather.flows.refresh.refresh_outfit") as mock_flow,
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_now(now_args(wind_unit="furlongs"))

        assert exit_code == 1
        mock_flow.assert_not_called()
        assert "furlongs" in mock_stderr.getvalue()


class TestCmdForecast:
    """Tests for cmd_forecast function."""

    def test_prints_each_day(self) -> None:
        result = refresh._build_result(make_snapshot(), 0)

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", return_value=result),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_forecast(now_args())

        assert exit_code == 0
        output = mock_stdout.getvalue()
        assert "Today" in output
        assert "Tomorrow" in output
        assert "30°/15°" in output

    def test_api_error_returns_one(self) -> None:
        error = WeatherApiError("Server Error 500", "Weather service is having issues.")

        with (
            patch("outfit_weather.flows.refresh.refresh_outfit", side_effect=error),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_forecast(now_args()) == 1


class TestCmdCache:
    """Tests for cmd_cache function."""

    @pytest.fixture
    def memory_cache(self, monkeypatch: pytest.MonkeyPatch) -> WeatherCache:
        cache = WeatherCache(
            MemoryStorage(),
            model=WeatherSnapshot,
            clock=lambda: datetime(2026, 3, 2, 16, 30, tzinfo=UTC),
        )
        monkeypatch.setattr(refresh, "cache", cache)
        return cache

    def test_empty(self, memory_cache: WeatherCache) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_cache(argparse.Namespace(clear=False))
        assert exit_code == 0
        assert "empty" in mock_stdout.getvalue()

    def test_shows_entry(self, memory_cache: WeatherCache) -> None:
        memory_cache.store(make_snapshot(), location=Location(lat=45.5, lon=-122.6))

        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_cache(argparse.Namespace(clear=False))

        output = mock_stdout.getvalue()
        assert "(45.5, -122.6)" in output
        assert "Forecast days: 2" in output

    def test_clear(self, memory_cache: WeatherCache) -> None:
        memory_cache.store(make_snapshot())

        with patch("sys.stdout", new=StringIO()):
            exit_code = cmd_cache(argparse.Namespace(clear=True))

        assert exit_code == 0
        assert memory_cache.get() is None


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        args = argparse.Namespace()
        exit_code = cmd_info(args)
        assert exit_code == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        args = argparse.Namespace()

        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(args)
            output = mock_stdout.getvalue()
            assert "Application" in output
            assert "Version" in output
            assert "Location" in output


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["outfit-weather"]):
            exit_code = main()
            assert exit_code == 0

    @pytest.mark.parametrize("command", ["now", "forecast", "cache", "info"])
    def test_command_dispatch(self, command: str) -> None:
        """Each command dispatches to its handler."""
        with (
            patch("sys.argv", ["outfit-weather", command]),
            patch(f"outfit_weather.cli.cmd_{command}", return_value=0) as mock_cmd,
        ):
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_debug_enables_logging(self) -> None:
        with (
            patch("sys.argv", ["outfit-weather", "--debug", "info"]),
            patch("outfit_weather.cli.logging.basicConfig") as mock_basic,
            patch("outfit_weather.cli.cmd_info", return_value=0),
        ):
            main()
            mock_basic.assert_called_once()

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["outfit-weather", "info"]),
            patch("outfit_weather.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            exit_code = main()
            assert exit_code == 1
