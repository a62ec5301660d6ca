"""
Meta checks: title, description, canonical URL, language
"""
from ..types import Category, Severity
from .base import check

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160


def page_title(document) -> str:
    return document.text("title")


def meta_description(document) -> str:
    return (document.attr('meta[name="description"]', "content") or "").strip()


@check("meta-title", "Page Title", Category.META)
def title_check(self, context):
    title = page_title(context.document)
    if not title:
        return self.emit(
            Severity.CRITICAL,
            "Missing page title",
            fix="Add a descriptive <title> tag (50-60 characters)",
        )
    if len(title) < TITLE_MIN_LENGTH:
        return self.emit(
            Severity.WARNING,
            f"Title too short ({len(title)} chars)",
            details=[f'"{title}"'],
            fix="Expand to 50-60 characters with relevant keywords",
        )
    if len(title) > TITLE_MAX_LENGTH:
        return self.emit(
            Severity.WARNING,
            f"Title may be truncated ({len(title)} chars)",
            details=[f'"{title[:TITLE_MAX_LENGTH]}..."'],
            fix="Shorten to under 60 characters",
        )
    return self.emit(Severity.PASSED, f"Good title ({len(title)} chars)")


@check("meta-desc", "Meta Description", Category.META)
def description_check(self, context):
    description = meta_description(context.document)
    if not description:
        return self.emit(
            Severity.CRITICAL,
            "Missing meta description",
            fix='Add <meta name="description" content="..."> (150-160 chars)',
        )
    if len(description) < DESCRIPTION_MIN_LENGTH:
        return self.emit(
            Severity.WARNING,
            f"Description short ({len(description)} chars)",
            fix="Expand to 150-160 characters",
        )
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return self.emit(
            Severity.WARNING,
            f"Description may be truncated ({len(description)} chars)",
            fix="Shorten to under 160 characters",
        )
    return self.emit(Severity.PASSED, f"Good description ({len(description)} chars)")


@check("canonical", "Canonical URL", Category.META)
def canonical_check(self, context):
    if not context.document.attr('link[rel="canonical"]', "href"):
        return self.emit(
            Severity.WARNING,
            "Missing canonical URL",
            fix='Add <link rel="canonical" href="..."> to prevent duplicate content issues',
        )
    return self.emit(Severity.PASSED, "Canonical URL set")


@check("lang", "Language Attribute", Category.META)
def lang_check(self, context):
    lang = context.document.attr("html", "lang")
    if not lang:
        return self.emit(
            Severity.WARNING,
            "Missing lang attribute on <html>",
            fix='Add lang="en" (or appropriate language) to <html> tag',
        )
    return self.emit(Severity.PASSED, f"Language set: {lang}")
