"""
Content checks: H1, heading hierarchy, word count
"""
from ..document import element_text
from ..types import Category, Severity
from .base import check

H1_DETAIL_LENGTH = 80
H1_MESSAGE_LENGTH = 60
HEADING_SEQUENCE_SHOWN = 10
MIN_WORD_COUNT = 300


def hierarchy_broken(levels) -> bool:
    """True when any heading is more than one level deeper than the one before it"""
    return any(current - previous > 1 for previous, current in zip(levels, levels[1:]))


def word_count(text: str) -> int:
    return len([word for word in text.split(" ") if word])


@check("h1", "H1 Heading", Category.CONTENT)
def h1_check(self, context):
    headings = context.document.select("h1")
    if not headings:
        return self.emit(
            Severity.CRITICAL,
            "Missing H1 heading",
            fix="Add exactly one H1 that describes the page content",
        )
    if len(headings) > 1:
        return self.emit(
            Severity.WARNING,
            f"{len(headings)} H1 headings found",
            details=[element_text(h1)[:H1_DETAIL_LENGTH] for h1 in headings],
            fix="Use only one H1 per page",
        )
    return self.emit(Severity.PASSED, f'H1: "{element_text(headings[0])[:H1_MESSAGE_LENGTH]}"')


@check("heading-hierarchy", "Heading Structure", Category.CONTENT)
def heading_hierarchy_check(self, context):
    levels = context.document.heading_levels()
    if not levels:
        return self.emit(
            Severity.WARNING,
            "No headings found",
            fix="Add structured headings (H1→H2→H3) for better SEO",
        )
    if hierarchy_broken(levels):
        sequence = " → ".join(f"H{level}" for level in levels[:HEADING_SEQUENCE_SHOWN])
        return self.emit(
            Severity.WARNING,
            "Heading levels skip (e.g. H1→H3)",
            details=[f"Sequence: {sequence}"],
            fix="Use sequential heading levels without skipping",
        )
    return self.emit(Severity.PASSED, f"{len(levels)} headings, proper hierarchy")


@check("word-count", "Content Length", Category.CONTENT)
def word_count_check(self, context):
    words = word_count(context.document.visible_text())
    if words < MIN_WORD_COUNT:
        return self.emit(
            Severity.WARNING,
            f"Thin content ({words} words)",
            fix="Add more descriptive content (aim for 300+ words on key pages)",
        )
    return self.emit(Severity.PASSED, f"{words} words")
