"""Stdio MCP client used to exercise a running scrape_page server."""

import sys

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import TextContent


def server_parameters() -> StdioServerParameters:
    """Parameters that launch this package's server as a subprocess."""
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "page_scraper", "serve"],
    )


async def call_scrape_page(
    url: str,
    query_selector: str,
    params: StdioServerParameters | None = None,
) -> list[str]:
    """Start the server, call scrape_page once and return the text blocks."""
    async with stdio_client(params or server_parameters()) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            result = await session.call_tool(
                "scrape_page",
                arguments={"url": url, "query_selector": query_selector},
            )

    return [block.text for block in result.content if isinstance(block, TextContent)]
