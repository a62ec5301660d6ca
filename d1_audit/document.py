"""
Queryable view over a fetched HTML document

Wraps BeautifulSoup with the small set of lookups the checks need. Parsing is
best effort: arbitrary third-party markup must never raise out of here.
"""
from typing import List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import PreformattedString, Tag

from core.logging import get_logger

logger = get_logger(__name__, domain="d1")

INVISIBLE_TAGS = frozenset({"script", "style", "noscript", "template"})
HEAD_TAGS = frozenset({"head", "title"})
HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


class Document:
    """Parsed page with selector, attribute and text lookups"""

    def __init__(self, html: str, parser: str = "html.parser"):
        self.raw = html
        try:
            self.soup = BeautifulSoup(html, parser)
        except ParserRejectedMarkup as e:
            logger.warning(f"Parser rejected markup, auditing an empty document: {e}")
            self.soup = BeautifulSoup("", parser)

    def select(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector, in document order"""
        return self.soup.select(selector)

    def first(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self.select(selector))

    def attr(self, selector: str, name: str) -> Optional[str]:
        """
        Attribute of the first element matching ``selector``

        Only the first match is consulted, later matches are not searched.
        Multi-valued attributes such as ``rel`` are joined with a space.
        """
        element = self.first(selector)
        if element is None:
            return None
        return element_attr(element, name)

    def text(self, selector: str) -> str:
        """Concatenated text of every match, whitespace collapsed"""
        return collapse_whitespace("".join(element.get_text() for element in self.select(selector)))

    def visible_text(self) -> str:
        """Body text without script/style content, whitespace collapsed"""
        root = self.soup.body
        hidden = INVISIBLE_TAGS
        if root is None:
            # html.parser does not synthesize <body>
            root = self.soup
            hidden = INVISIBLE_TAGS | HEAD_TAGS
        parts = []
        for string in root.find_all(string=True):
            if isinstance(string, PreformattedString):
                continue  # comments, doctypes, CDATA
            if any(parent.name in hidden for parent in string.parents):
                continue
            parts.append(str(string))
        return collapse_whitespace("".join(parts))

    def heading_levels(self) -> List[int]:
        """Numeric level of every h1-h6 in document order"""
        return [int(heading.name[1]) for heading in self.select(HEADING_SELECTOR)]


def element_attr(element: Tag, name: str) -> Optional[str]:
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def element_text(element: Tag) -> str:
    return collapse_whitespace(element.get_text())

