"""The scrape_page pipeline: fetch, parse, select, normalize, format."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .core import Fetcher, FetchSuccess, HttpError, TransportError
from .errors import describe_error
from .normalize import normalize_text
from .output import format_report
from .parser import HTML_CONTENT_TYPE, Document, parse_document

logger = logging.getLogger(__name__)

ERROR_PREFIXES = (
    "Error fetching URL:",
    "Error scraping page:",
    "Error: Failed to parse",
)

Parse = Callable[[str, str], Document | None]


@dataclass(frozen=True)
class ScrapeResponse:
    """Text payload returned for every scrape, successful or not."""

    text: str

    @property
    def is_error(self) -> bool:
        return self.text.startswith(ERROR_PREFIXES)

    def to_dict(self) -> dict:
        return {"content": [{"type": "text", "text": self.text}]}


async def scrape_page(
    url: str,
    query_selector: str,
    *,
    fetcher: Fetcher,
    parse: Parse = parse_document,
) -> ScrapeResponse:
    """Scrape ``url`` and report the text of elements matching ``query_selector``.

    Never raises: every failure is turned into a response text.
    """
    try:
        return await _run(url, query_selector, fetcher, parse)
    except Exception as exc:
        logger.exception("Scrape of %s failed", url)
        return ScrapeResponse(f"Error scraping page: {describe_error(exc)}")


async def _run(url: str, query_selector: str, fetcher: Fetcher, parse: Parse) -> ScrapeResponse:
    outcome = await fetcher.fetch(url)

    match outcome:
        case HttpError(status=status, status_text=status_text):
            return ScrapeResponse(f"Error fetching URL: {status} {status_text}")
        case TransportError(message=message):
            return ScrapeResponse(f"Error scraping page: {message}")
        case FetchSuccess(response=response):
            html = response.text
        case _:
            raise TypeError(f"Unexpected fetch outcome: {outcome!r}")

    logger.debug("resp %s", html)

    doc = parse(html, HTML_CONTENT_TYPE)
    if doc is None:
        return ScrapeResponse("Error: Failed to parse HTML document")
    logger.debug("parsed %s", url)

    elements = doc.select(query_selector)
    if not elements:
        return ScrapeResponse(f"No elements found matching selector: {query_selector}")

    texts = []
    for element in elements:
        text = normalize_text(element.text_content)
        if text is not None:
            texts.append(text)

    if not texts:
        return ScrapeResponse(
            f"Found {len(elements)} matching elements, but none contained text content"
        )

    return ScrapeResponse(format_report(url, query_selector, len(elements), texts))
