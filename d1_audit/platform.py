"""
E-commerce platform detection

Shopify storefronts are recognised from literal markers in the raw HTML or a
Shopify-only meta tag. Matching is case-sensitive substring matching.
"""
from typing import Dict, List

from .document import Document

PLATFORM_SIGNATURES: Dict[str, Dict[str, List[str]]] = {
    "shopify": {
        "substrings": ["Shopify.theme", "cdn.shopify.com"],
        "selectors": ['meta[name="shopify-checkout-api-token"]'],
    },
}


def matches_platform(document: Document, platform: str) -> bool:
    signatures = PLATFORM_SIGNATURES[platform]
    if any(marker in document.raw for marker in signatures["substrings"]):
        return True
    return any(document.first(selector) is not None for selector in signatures["selectors"])


def is_shopify(document: Document) -> bool:
    return matches_platform(document, "shopify")
