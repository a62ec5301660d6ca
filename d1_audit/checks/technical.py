"""
Technical checks: HTTPS, viewport, favicon, structured data, robots meta,
robots.txt and sitemap.xml

robots.txt and sitemap.xml are fetched by the coordinator before the battery
runs; these checks only map the AuxiliaryFetchResult to a severity. An
unreachable resource is ``info``, never ``warning`` or ``critical``.
"""
import json
from urllib.parse import urlparse

from core.logging import get_logger

from ..types import Category, Severity
from .base import check

logger = get_logger(__name__, domain="d1")

FAVICON_SELECTOR = 'link[rel="icon"], link[rel="shortcut icon"]'
JSON_LD_SELECTOR = 'script[type="application/ld+json"]'
RESTRICTIVE_ROBOTS_DIRECTIVES = ("noindex", "nofollow")
SITEMAP_ROOT_MARKERS = ("<urlset", "<sitemapindex")


def favicon_href(document):
    return document.attr(FAVICON_SELECTOR, "href")


def _format_type(value) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def declared_schema_type(data) -> str:
    """@type of a JSON-LD block, or the types of its @graph members"""
    if isinstance(data, dict):
        if data.get("@type"):
            return _format_type(data["@type"])
        graph = data.get("@graph")
        if isinstance(graph, list):
            types = [_format_type(node["@type"]) for node in graph if isinstance(node, dict) and node.get("@type")]
            if types:
                return ", ".join(types)
    return "Unknown"


def json_ld_types(blocks, url: str = ""):
    """Declared types of every parseable block; unparseable blocks are skipped"""
    types = []
    for block in blocks:
        try:
            data = json.loads(block.string or "")
        except ValueError as e:
            logger.debug(f"Skipping unparseable JSON-LD block on {url}: {e}")
            continue
        if not isinstance(data, (dict, list)):
            logger.debug(f"Skipping non-object JSON-LD block on {url}")
            continue
        types.append(declared_schema_type(data))
    return types


@check("https", "HTTPS", Category.TECHNICAL)
def https_check(self, context):
    if urlparse(context.url).scheme.lower() != "https":
        return self.emit(
            Severity.CRITICAL,
            "Not using HTTPS",
            fix="Enable SSL/HTTPS, required for SEO and security",
        )
    return self.emit(Severity.PASSED, "HTTPS enabled")


@check("viewport", "Mobile Viewport", Category.TECHNICAL)
def viewport_check(self, context):
    if not context.document.attr('meta[name="viewport"]', "content"):
        return self.emit(
            Severity.CRITICAL,
            "Missing viewport meta tag",
            fix='Add <meta name="viewport" content="width=device-width, initial-scale=1">',
        )
    return self.emit(Severity.PASSED, "Viewport configured")


@check("favicon", "Favicon", Category.TECHNICAL)
def favicon_check(self, context):
    if not favicon_href(context.document):
        return self.emit(
            Severity.WARNING,
            "No favicon found",
            fix="Add a favicon for browser tabs and bookmarks",
        )
    return self.emit(Severity.PASSED, "Favicon set")


@check("structured-data", "Structured Data", Category.TECHNICAL)
def structured_data_check(self, context):
    blocks = context.document.select(JSON_LD_SELECTOR)
    if not blocks:
        return self.emit(
            Severity.WARNING,
            "No JSON-LD structured data found",
            fix="Add Schema.org markup (Product, Organization, BreadcrumbList) for rich snippets",
        )
    types = json_ld_types(blocks, context.url)
    return self.emit(
        Severity.PASSED,
        f"{len(blocks)} JSON-LD block(s)",
        details=[f"Types: {', '.join(types)}"] if types else None,
    )


@check("robots-meta", "Robots Meta", Category.TECHNICAL)
def robots_meta_check(self, context):
    robots = (context.document.attr('meta[name="robots"]', "content") or "").lower()
    if any(directive in robots for directive in RESTRICTIVE_ROBOTS_DIRECTIVES):
        return self.emit(
            Severity.WARNING,
            f"Page has restrictive robots: {robots}",
            fix="Remove noindex/nofollow if you want this page indexed",
        )
    return self.emit(Severity.PASSED, "No indexing restrictions")


@check("robots-txt", "robots.txt", Category.TECHNICAL)
def robots_txt_check(self, context):
    result = context.robots_txt
    if not result.reachable:
        return self.emit(Severity.INFO, "Could not check robots.txt")
    if result.status_code == 200 and "user-agent" in result.text.lower():
        return self.emit(Severity.PASSED, "robots.txt found")
    return self.emit(
        Severity.WARNING,
        "No valid robots.txt",
        fix="Create a robots.txt to guide search engine crawlers",
    )


@check("sitemap", "XML Sitemap", Category.TECHNICAL)
def sitemap_check(self, context):
    result = context.sitemap_xml
    if not result.reachable:
        return self.emit(Severity.INFO, "Could not check sitemap")
    if result.status_code == 200 and any(marker in result.text for marker in SITEMAP_ROOT_MARKERS):
        return self.emit(Severity.PASSED, "Sitemap found")
    return self.emit(
        Severity.WARNING,
        "No sitemap.xml found",
        fix="Create a sitemap.xml and submit to Google Search Console",
    )
