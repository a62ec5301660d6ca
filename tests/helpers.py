"""
Test Helper Utilities

Scripted fetcher, HTML page builders and check-context builders shared across
the test suite.
"""
from typing import Dict, List, Optional, Union

from d0_gateway.exceptions import FetchNetworkError
from d0_gateway.types import AuxiliaryFetchResult, AuxiliaryOutcome, FetchResponse
from d1_audit.checks.base import AuditContext
from d1_audit.document import Document
from d1_audit.models import PageMetadata

Outcome = Union[FetchResponse, Exception]

SHOP_URL = "https://shop.example.com/"
ROBOTS_URL = "https://shop.example.com/robots.txt"
SITEMAP_URL = "https://shop.example.com/sitemap.xml"

ROBOTS_TXT = "User-agent: *\nDisallow: /checkout\nSitemap: https://shop.example.com/sitemap.xml\n"
SITEMAP_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
    "<url><loc>https://shop.example.com/</loc></url></urlset>"
)

# 45 characters
GOOD_TITLE = "Handmade Ceramic Mugs and Bowls | Clay & Kiln"
# 125 characters
GOOD_DESCRIPTION = (
    "Shop small-batch ceramic mugs, bowls and plates, thrown by hand in our Portland studio "
    "and glazed in food-safe colours daily."
)


class FakeFetcher:
    """HttpFetcher answering from a URL -> response/exception table"""

    def __init__(self, routes: Optional[Dict[str, Outcome]] = None):
        self.routes = dict(routes or {})
        self.calls: List[dict] = []

    async def fetch(self, url, *, timeout, max_redirects, user_agent):
        self.calls.append({"url": url, "timeout": timeout, "max_redirects": max_redirects, "user_agent": user_agent})
        outcome = self.routes.get(url)
        if outcome is None:
            raise FetchNetworkError(url, "Connection refused")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


def ok(url: str, text: str, status_code: int = 200) -> FetchResponse:
    return FetchResponse(url=url, status_code=status_code, text=text, headers={"content-type": "text/html"})


def words(count: int) -> str:
    return " ".join(f"word{i}" for i in range(count))


def build_page(
    title: Optional[str] = GOOD_TITLE,
    description: Optional[str] = GOOD_DESCRIPTION,
    head_extra: str = "",
    body: Optional[str] = None,
    lang: Optional[str] = "en",
) -> str:
    """Assemble a small HTML page; pass None to omit a part"""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    head.append(head_extra)
    if body is None:
        body = "<h1>Clay &amp; Kiln</h1><h2>Mugs</h2><p>Our mugs.</p>"
    lang_attr = f' lang="{lang}"' if lang else ""
    return f"<!DOCTYPE html><html{lang_attr}><head>{''.join(head)}</head><body>{body}</body></html>"


def complete_page() -> str:
    """A page that passes every document check"""
    head_extra = (
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        '<link rel="canonical" href="https://shop.example.com/">'
        '<link rel="icon" href="/favicon.ico">'
        '<meta name="robots" content="index, follow">'
        '<meta property="og:title" content="Clay &amp; Kiln">'
        '<meta property="og:image" content="https://shop.example.com/og.jpg">'
        '<meta property="og:description" content="Handmade ceramics">'
        '<meta name="twitter:card" content="summary_large_image">'
        '<script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization"}</script>'
    )
    body = (
        "<h1>Clay &amp; Kiln</h1><h2>Mugs</h2><h3>Stoneware</h3><h2>Bowls</h2>"
        f"<p>{words(320)}</p>"
        '<img src="/mug.jpg" alt="Blue stoneware mug" loading="lazy">'
    )
    return build_page(head_extra=head_extra, body=body)


def aux_ok(url: str, text: str, status_code: int = 200) -> AuxiliaryFetchResult:
    return AuxiliaryFetchResult(url=url, outcome=AuxiliaryOutcome.OK, status_code=status_code, text=text)


def aux_failed(url: str, outcome: AuxiliaryOutcome = AuxiliaryOutcome.UNREACHABLE) -> AuxiliaryFetchResult:
    return AuxiliaryFetchResult(url=url, outcome=outcome, error="failed")


def make_context(
    html: str = "",
    url: str = SHOP_URL,
    meta: Optional[PageMetadata] = None,
    robots_txt: Optional[AuxiliaryFetchResult] = None,
    sitemap_xml: Optional[AuxiliaryFetchResult] = None,
) -> AuditContext:
    return AuditContext(
        url=url,
        document=Document(html),
        meta=meta or PageMetadata(),
        robots_txt=robots_txt or aux_ok(ROBOTS_URL, ROBOTS_TXT),
        sitemap_xml=sitemap_xml or aux_ok(SITEMAP_URL, SITEMAP_XML),
    )


def site_routes(html: str, url: str = SHOP_URL) -> Dict[str, Outcome]:
    """Routes for a healthy shop: page, robots.txt and sitemap.xml"""
    return {
        url: ok(url, html),
        ROBOTS_URL: ok(ROBOTS_URL, ROBOTS_TXT),
        SITEMAP_URL: ok(SITEMAP_URL, SITEMAP_XML),
    }
