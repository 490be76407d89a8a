"""CLI interface using typer."""

import asyncio

import typer

from .config import settings
from .handler import ScrapeResponse, scrape_page
from .server import build_fetcher, configure_logging

app = typer.Typer(
    name="page-scraper",
    help="MCP server that scrapes web pages with CSS selectors",
    no_args_is_help=True,
)


async def _scrape(url: str, selector: str) -> ScrapeResponse:
    """Run the scrape pipeline once against the network."""
    fetcher = build_fetcher(settings)
    try:
        return await scrape_page(url, selector, fetcher=fetcher)
    finally:
        await fetcher.close()


@app.command()
def serve():
    """Run the MCP server on stdin/stdout."""
    from .server import run

    run(settings)


@app.command()
def scrape(
    url: str = typer.Argument(..., help="URL of the page to scrape"),
    selector: str = typer.Argument(..., help="CSS selector, e.g. 'h1', '.class', 'div p'"),
):
    """Scrape a page in-process and print the report."""
    configure_logging(settings.log_level)
    response = asyncio.run(_scrape(url, selector))

    typer.echo(response.text)
    if response.is_error:
        raise typer.Exit(code=1)


@app.command()
def call(
    url: str = typer.Argument(..., help="URL of the page to scrape"),
    selector: str = typer.Argument(..., help="CSS selector, e.g. 'h1', '.class', 'div p'"),
):
    """Start the MCP server and call scrape_page through a stdio client."""
    from .client import call_scrape_page

    typer.echo(f"URL: {url}")
    typer.echo(f"Selector: {selector}")
    typer.echo("-" * 50)

    try:
        texts = asyncio.run(call_scrape_page(url, selector))
    except Exception as exc:
        typer.echo(f"Tool call failed: {exc}", err=True)
        raise typer.Exit(code=1)

    for text in texts:
        typer.echo(text)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"page-scraper {__version__}")


if __name__ == "__main__":
    app()
