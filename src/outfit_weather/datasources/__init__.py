"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── {feature}.py      # Fetch functions (one per endpoint/concept)
    └── parse.py          # Raw payload -> schemas models

Fetch functions return the provider's raw JSON and raise
``WeatherApiError`` on failure; parse functions turn that JSON into the
models in ``outfit_weather.schemas``. Wire new sources into
``flows/refresh.py``.
"""
