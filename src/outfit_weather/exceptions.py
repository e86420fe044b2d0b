"""Exception types raised by outfit-weather."""

from __future__ import annotations


class OutfitWeatherError(Exception):
    """Base exception for the package."""


class InvalidInputError(OutfitWeatherError, ValueError):
    """Raised for non-finite temperatures or unrecognized units."""


class WeatherApiError(OutfitWeatherError):
    """Weather provider request failed or returned unusable data.

    ``user_message`` is safe to show to end users; ``is_retryable`` tells the
    caller whether trying again later can help.
    """

    def __init__(self, message: str, user_message: str, *, is_retryable: bool = True) -> None:
        super().__init__(message)
        self.user_message = user_message
        self.is_retryable = is_retryable
