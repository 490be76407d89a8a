"""Plain-text report for scrape results."""

from collections.abc import Sequence


def format_report(url: str, selector: str, total_matched: int, texts: Sequence[str]) -> str:
    """Build the report returned for a successful scrape.

    ``total_matched`` counts every element the selector matched, while the
    entries are numbered from 1 over ``texts`` only.
    """
    lines = [
        f'Found {total_matched} elements matching selector "{selector}" on {url}:',
        "",
    ]
    for i, text in enumerate(texts, 1):
        lines.append(f"Element {i}: {text}")
        lines.append("")

    return "\n".join(lines)
