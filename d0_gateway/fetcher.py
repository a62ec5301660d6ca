"""
HTTP fetcher for audited pages and their auxiliary resources

Main page: single attempt, bounded timeout, capped redirects, non-2xx is an error.
robots.txt / sitemap.xml: single attempt, short timeout, any status accepted,
failures are returned as an AuxiliaryFetchResult instead of raised.
"""
import asyncio
from typing import Optional
from urllib.parse import urljoin

import httpx

from core.logging import get_logger

from .exceptions import FetchError, FetchNetworkError, FetchStatusError, FetchTimeoutError
from .types import AuxiliaryFetchResult, AuxiliaryOutcome, FetchResponse, HttpFetcher

logger = get_logger(__name__, domain="d0")


class HttpxFetcher:
    """HttpFetcher backed by httpx.AsyncClient, one client per call"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def fetch(
        self,
        url: str,
        *,
        timeout: float,
        max_redirects: int,
        user_agent: str,
    ) -> FetchResponse:
        """
        GET a URL following redirects

        Raises:
            FetchTimeoutError: when the whole exchange exceeds ``timeout``
            FetchNetworkError: on DNS/connection/TLS errors or too many redirects
        """
        try:
            response = await asyncio.wait_for(
                self._get(url, timeout=timeout, max_redirects=max_redirects, user_agent=user_agent),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise FetchTimeoutError(url, timeout)
        except httpx.TooManyRedirects:
            raise FetchNetworkError(url, f"Maximum number of redirects ({max_redirects}) exceeded")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchNetworkError(url, str(e) or e.__class__.__name__)

        return FetchResponse(
            url=str(response.url),
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )

    async def _get(self, url: str, *, timeout: float, max_redirects: int, user_agent: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            max_redirects=max_redirects,
            headers={"User-Agent": user_agent},
            transport=self._transport,
        ) as client:
            return await client.get(url)


async def fetch_page(
    fetcher: HttpFetcher,
    url: str,
    *,
    timeout: float,
    max_redirects: int,
    user_agent: str,
) -> FetchResponse:
    """Fetch the audited page, treating any non-2xx answer as a failure"""
    response = await fetcher.fetch(url, timeout=timeout, max_redirects=max_redirects, user_agent=user_agent)
    if not response.is_success:
        raise FetchStatusError(url, response.status_code)
    return response


def origin_resource(url: str, path: str) -> str:
    """Resolve an absolute path such as /robots.txt against the page's origin"""
    return urljoin(url, path)


async def fetch_auxiliary(
    fetcher: HttpFetcher,
    url: str,
    *,
    timeout: float,
    max_redirects: int,
    user_agent: str,
) -> AuxiliaryFetchResult:
    """Best-effort fetch; every failure is folded into the returned result"""
    try:
        response = await fetcher.fetch(url, timeout=timeout, max_redirects=max_redirects, user_agent=user_agent)
    except FetchTimeoutError as e:
        logger.info(f"Auxiliary fetch timed out: {url}")
        return AuxiliaryFetchResult(url=url, outcome=AuxiliaryOutcome.TIMED_OUT, error=e.message)
    except FetchError as e:
        logger.info(f"Auxiliary fetch failed: {url} ({e.message})")
        return AuxiliaryFetchResult(url=url, outcome=AuxiliaryOutcome.UNREACHABLE, error=e.message)

    return AuxiliaryFetchResult(
        url=url,
        outcome=AuxiliaryOutcome.OK,
        status_code=response.status_code,
        text=response.text,
    )
