"""MCP server that scrapes web pages with CSS selectors."""

__version__ = "0.1.0"
