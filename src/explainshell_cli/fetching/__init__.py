# src/explainshell_cli/fetching/__init__.py

"""Fetch layer for explainshell-cli.

One GET against ``<origin>/explain?cmd=<command>``. Raw markup out,
FetchError on any failure.
"""

from .base import FetchError, Fetcher
from .httpx_fetcher import HttpxFetcher

__all__ = [
    "Fetcher",
    "FetchError",
    "HttpxFetcher",
]
