"""MCP server exposing the scrape_page tool over stdio."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .config import ScraperSettings
from .config import settings as default_settings
from .core import Fetcher, HttpFetcher
from .handler import scrape_page

SERVER_NAME = "WebScraper"


def build_fetcher(settings: ScraperSettings) -> HttpFetcher:
    return HttpFetcher(
        timeout=settings.timeout,
        user_agent=settings.user_agent,
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections,
    )


def build_server(
    settings: ScraperSettings | None = None,
    fetcher: Fetcher | None = None,
) -> FastMCP:
    """Create the MCP server with ``scrape_page`` as its only tool.

    When no fetcher is given, an HttpFetcher is built from ``settings`` and
    closed when the server shuts down.
    """
    settings = settings or default_settings
    owned = build_fetcher(settings) if fetcher is None else None
    active_fetcher = fetcher if fetcher is not None else owned

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            if owned is not None:
                await owned.close()

    mcp = FastMCP(SERVER_NAME, lifespan=lifespan)

    @mcp.tool(
        name="scrape_page",
        title="Web Page Scraper",
        description="Scrape web pages and extract content using CSS selectors",
        structured_output=False,
    )
    async def scrape_page_tool(
        url: Annotated[str, Field(description="The URL of the page to scrape")],
        query_selector: Annotated[
            str,
            Field(
                description="CSS selector to query elements (e.g., 'h1', '.class', '#id', 'div p')"
            ),
        ],
    ) -> str:
        response = await scrape_page(url, query_selector, fetcher=active_fetcher)
        return response.text

    return mcp


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(settings: ScraperSettings | None = None) -> None:
    """Serve scrape_page on stdin/stdout until the client disconnects."""
    settings = settings or default_settings
    configure_logging(settings.log_level)
    build_server(settings).run("stdio")
