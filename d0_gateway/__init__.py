"""
D0 Gateway - the only place the auditor talks to the network

Fetches the audited page and its robots.txt / sitemap.xml.
"""

from .exceptions import FetchError, FetchNetworkError, FetchStatusError, FetchTimeoutError
from .fetcher import HttpxFetcher, fetch_auxiliary, fetch_page, origin_resource
from .types import AuxiliaryFetchResult, AuxiliaryOutcome, FetchResponse, HttpFetcher

__all__ = [
    "AuxiliaryFetchResult",
    "AuxiliaryOutcome",
    "FetchError",
    "FetchNetworkError",
    "FetchResponse",
    "FetchStatusError",
    "FetchTimeoutError",
    "HttpFetcher",
    "HttpxFetcher",
    "fetch_auxiliary",
    "fetch_page",
    "origin_resource",
]
