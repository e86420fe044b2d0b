"""
HTTP session for the Open-Meteo client, with the project's retry policy.

Which failed responses are worth another attempt is decided once, here, and
shared by two layers: urllib3 retries those statuses inside the session with
exponential backoff (1s, 2s, 4s, capped at 10s), and
``datasources.weather.forecast.error_for_status`` marks the same statuses as
retryable on the ``WeatherApiError`` it raises, so the refresh flow's own
task retry agrees with the transport.

Policy:

* 400 means the coordinates or query parameters were rejected. Repeating the
  request cannot succeed, so it is never retried.
* 404 is reported by Open-Meteo while the endpoint is briefly unavailable and
  is treated as temporary.
* 429 (rate limited) and every 5xx are temporary.
* Any other 4xx is a client error and is not retried.

Usage::

    from outfit_weather.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params=params)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from outfit_weather import __version__

#: Failed statuses that are retried, both in the session and by the flow.
RETRYABLE_STATUSES: frozenset[int] = frozenset({404, 429, *range(500, 600)})

MAX_RETRIES = 3
BACKOFF_MAX = 10  # seconds

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"outfit-weather/{__version__}"


def is_retryable_status(status: int) -> bool:
    """Whether a failed response with ``status`` may succeed if repeated."""
    if 400 <= status < 500:
        return status in RETRYABLE_STATUSES
    # 5xx and anything unexpected outside the client-error range
    return True


def build_retry(total: int = MAX_RETRIES) -> Retry:
    """urllib3 retry strategy for idempotent Open-Meteo requests."""
    return Retry(
        total=total,
        backoff_factor=1,
        backoff_max=BACKOFF_MAX,
        status_forcelist=sorted(RETRYABLE_STATUSES),
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # the final response is mapped by error_for_status
    )


DEFAULT_RETRY = build_retry()


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to every request that does not set one.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session used by the weather datasource.
session: requests.Session = create_session()
