"""
Prefect flows for orchestrating refreshes.

- refresh.py - fetch weather, update the cache, compose the outfit,
  falling back to cached data when the fetch fails
"""
