"""
Audit Coordinator

Runs one audit end to end: fetch the page, parse it, fetch robots.txt and
sitemap.xml concurrently, evaluate the check battery in its fixed order and
fold the findings into an AuditReport.

``audit_url`` never raises. A failed main fetch yields a report holding a
single critical ``fetch`` finding; a failed auxiliary fetch only downgrades
its own check to ``info``.
"""
import asyncio
import re
import time
from typing import List, Optional

from core.config import Settings, get_settings
from core.logging import get_logger
from core.metrics import metrics
from d0_gateway import (
    AuxiliaryFetchResult,
    AuxiliaryOutcome,
    FetchError,
    HttpFetcher,
    HttpxFetcher,
    fetch_auxiliary,
    fetch_page,
    origin_resource,
)

from .checks import CHECK_BATTERY, AuditContext
from .checks.meta import meta_description, page_title
from .checks.social import og_content
from .checks.technical import favicon_href
from .document import Document
from .models import AuditReport, Finding, PageMetadata
from .platform import is_shopify
from .scoring import build_report, round_half_up
from .types import Category, Severity

logger = get_logger(__name__, domain="d1")

HTTP_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Strip whitespace and default to https:// when no http(s) scheme is given"""
    url = (url or "").strip()
    if not HTTP_SCHEME.match(url):
        url = f"https://{url}"
    return url


def fetch_failure_finding(reason: str) -> Finding:
    return Finding(
        id="fetch",
        name="Page Fetch",
        category=Category.TECHNICAL,
        severity=Severity.CRITICAL,
        message=f"Failed to fetch: {reason}",
        fix="Ensure the URL is correct and the server is accessible",
    )


def audit_error_finding(reason: str) -> Finding:
    return Finding(
        id="audit",
        name="Audit",
        category=Category.TECHNICAL,
        severity=Severity.CRITICAL,
        message=f"Audit could not be completed: {reason}",
    )


def html_size_kb(html: str) -> int:
    return round_half_up(len(html.encode("utf-8")) / 1024)


def extract_metadata(document: Document, response_time_ms: int, size_kb: int) -> PageMetadata:
    return PageMetadata(
        title=page_title(document) or None,
        description=meta_description(document) or None,
        og_image=og_content(document, "image") or None,
        favicon=favicon_href(document) or None,
        response_time_ms=response_time_ms,
        html_size_kb=size_kb,
        is_shopify=is_shopify(document),
    )


class AuditCoordinator:
    """
    Audits one URL at a time

    The fetcher and settings are injected so tests and callers can swap the
    network layer; nothing is cached between audits.
    """

    def __init__(self, fetcher: Optional[HttpFetcher] = None, settings: Optional[Settings] = None):
        self.fetcher = fetcher or HttpxFetcher()
        self.settings = settings or get_settings()

    async def audit(self, url: str) -> AuditReport:
        """Audit ``url``; every failure is reported as a finding, never raised"""
        url = normalize_url(url)
        started = time.monotonic()
        log = logger.with_context(url=url)
        log.info(f"Starting audit of {url}")

        try:
            findings, meta = await self._run(url)
        except Exception as e:
            log.exception(f"Audit of {url} aborted")
            findings, meta = [audit_error_finding(str(e) or e.__class__.__name__)], PageMetadata()

        report = build_report(url, findings, meta)
        duration = time.monotonic() - started
        metrics.track_audit(report.grade.value, duration, report.summary.to_dict())
        log.info(
            f"Finished audit of {url}: score={report.score} grade={report.grade.value}",
            extra={"score": report.score, "grade": report.grade.value, "duration_ms": int(duration * 1000)},
        )
        return report

    async def _run(self, url: str):
        started = time.monotonic()
        try:
            response = await fetch_page(
                self.fetcher,
                url,
                timeout=self.settings.request_timeout,
                max_redirects=self.settings.max_redirects,
                user_agent=self.settings.user_agent,
            )
        except FetchError as e:
            logger.warning(f"Main fetch failed for {url}: {e.message}")
            metrics.track_fetch_failure("main")
            return [fetch_failure_finding(e.message)], PageMetadata()

        response_time_ms = int((time.monotonic() - started) * 1000)
        document = Document(response.text)
        meta = extract_metadata(document, response_time_ms, html_size_kb(response.text))

        robots_txt, sitemap_xml = await self._fetch_auxiliary(url)
        context = AuditContext(
            url=url,
            document=document,
            meta=meta,
            robots_txt=robots_txt,
            sitemap_xml=sitemap_xml,
        )
        return self.run_checks(context), meta

    async def _fetch_auxiliary(self, url: str):
        """Fetch robots.txt and sitemap.xml concurrently, results in that order"""
        targets = [("robots", origin_resource(url, "/robots.txt")), ("sitemap", origin_resource(url, "/sitemap.xml"))]
        results = await asyncio.gather(
            *(
                fetch_auxiliary(
                    self.fetcher,
                    target,
                    timeout=self.settings.auxiliary_timeout,
                    max_redirects=self.settings.max_redirects,
                    user_agent=self.settings.user_agent,
                )
                for _, target in targets
            ),
            return_exceptions=True,
        )

        resolved = []
        for (kind, target), result in zip(targets, results):
            if isinstance(result, BaseException):
                logger.warning(f"Unexpected error fetching {target}: {result}")
                result = AuxiliaryFetchResult(url=target, outcome=AuxiliaryOutcome.UNREACHABLE, error=str(result))
            if not result.reachable:
                metrics.track_fetch_failure(kind)
            resolved.append(result)
        return resolved

    @staticmethod
    def run_checks(context: AuditContext) -> List[Finding]:
        """Evaluate CHECK_BATTERY in order, dropping checks that emit nothing"""
        findings = []
        for check in CHECK_BATTERY:
            finding = check.run(context)
            if finding is not None:
                findings.append(finding)
        return findings


async def audit_url(
    url: str,
    fetcher: Optional[HttpFetcher] = None,
    settings: Optional[Settings] = None,
) -> AuditReport:
    """Audit a single URL and return its report"""
    return await AuditCoordinator(fetcher=fetcher, settings=settings).audit(url)
