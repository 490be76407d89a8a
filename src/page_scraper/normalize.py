"""Whitespace cleanup for extracted element text."""

import re

_LINE_BREAK_RUN = re.compile(r"\s*\n\s*")
_SPACE_RUN = re.compile(r"[^\S\n]+")
_BLANK_LINES = re.compile(r"\n\s*\n")


def normalize_text(raw: str | None) -> str | None:
    """Collapse whitespace in ``raw`` for a flat text report.

    Runs of whitespace that contain a line break become a single newline,
    every other run becomes a single space, and the result is trimmed.
    Returns None when nothing but whitespace is left.
    """
    if raw is None or not raw.strip():
        return None

    text = _LINE_BREAK_RUN.sub("\n", raw)
    text = _SPACE_RUN.sub(" ", text)
    text = _BLANK_LINES.sub("\n", text)
    text = text.strip()

    return text or None
