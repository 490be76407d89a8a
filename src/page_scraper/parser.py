"""HTML parsing and CSS selection on top of selectolax."""

from selectolax.parser import HTMLParser, Node

HTML_CONTENT_TYPE = "text/html"


class Element:
    """A matched element, read-only."""

    def __init__(self, node: Node):
        self._node = node

    @property
    def text_content(self) -> str | None:
        """Concatenated text of all descendants, or None when there is none."""
        text = self._node.text(deep=True, separator="", strip=False)
        return text or None


class Document:
    """A parsed HTML document."""

    def __init__(self, tree: HTMLParser):
        self._tree = tree

    def select(self, selector: str) -> list[Element]:
        """Return every element matching ``selector`` in document order."""
        return [Element(node) for node in self._tree.css(selector)]


def parse_document(markup: str, content_type: str = HTML_CONTENT_TYPE) -> Document | None:
    """Parse markup into a Document, or None if no tree could be built."""
    if content_type != HTML_CONTENT_TYPE:
        raise ValueError(f"Unsupported content type: {content_type}")

    tree = HTMLParser(markup)
    if tree.root is None:
        return None
    return Document(tree)
