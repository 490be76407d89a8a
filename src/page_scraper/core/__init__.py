"""Core scraper components."""

from .fetcher import HttpFetcher
from .protocols import (
    Fetcher,
    FetchOutcome,
    FetchSuccess,
    HttpError,
    Response,
    TransportError,
)

__all__ = [
    "Fetcher",
    "FetchOutcome",
    "FetchSuccess",
    "HttpError",
    "HttpFetcher",
    "Response",
    "TransportError",
]
