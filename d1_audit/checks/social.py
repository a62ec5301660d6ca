"""
Social checks: Open Graph title/image/description and Twitter card
"""
from ..types import Category, Severity
from .base import check


def og_content(document, prop: str):
    return document.attr(f'meta[property="og:{prop}"]', "content")


@check("og-title", "OG Title", Category.SOCIAL)
def og_title_check(self, context):
    if not og_content(context.document, "title"):
        return self.emit(
            Severity.WARNING,
            "Missing Open Graph title",
            fix='Add <meta property="og:title" content="..."> for social sharing',
        )
    return self.emit(Severity.PASSED, "OG title set")


@check("og-image", "OG Image", Category.SOCIAL)
def og_image_check(self, context):
    if not og_content(context.document, "image"):
        return self.emit(
            Severity.WARNING,
            "Missing Open Graph image",
            fix='Add <meta property="og:image" content="..."> (1200×630px recommended)',
        )
    return self.emit(Severity.PASSED, "OG image set")


@check("og-desc", "OG Description", Category.SOCIAL)
def og_description_check(self, context):
    if not og_content(context.document, "description"):
        return self.emit(
            Severity.WARNING,
            "Missing Open Graph description",
            fix='Add <meta property="og:description" content="...">',
        )
    return self.emit(Severity.PASSED, "OG description set")


@check("twitter-card", "Twitter Card", Category.SOCIAL)
def twitter_card_check(self, context):
    card = context.document.attr('meta[name="twitter:card"]', "content")
    if not card:
        # Absence is informational, not scored
        return self.emit(
            Severity.INFO,
            "No Twitter card meta tags",
            fix='Add <meta name="twitter:card" content="summary_large_image"> for Twitter sharing',
        )
    return self.emit(Severity.PASSED, f"Twitter card: {card}")
