"""Protocol definitions for scraper components."""

from dataclasses import dataclass, field
from typing import Protocol, Union


@dataclass(frozen=True)
class Response:
    """HTTP response container."""

    url: str
    status: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    reason: str = ""
    encoding: str = "utf-8"

    @property
    def text(self) -> str:
        """Decode content using the response encoding."""
        try:
            return self.content.decode(self.encoding, errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class FetchSuccess:
    """The server answered with a 2xx status."""

    response: Response


@dataclass(frozen=True)
class HttpError:
    """The server answered, but with a non-success status."""

    status: int
    status_text: str


@dataclass(frozen=True)
class TransportError:
    """The request never produced a response."""

    message: str


FetchOutcome = Union[FetchSuccess, HttpError, TransportError]


class Fetcher(Protocol):
    """Protocol for URL fetchers."""

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch a URL and classify the outcome."""
        ...
