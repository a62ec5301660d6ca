"""
Type definitions for gateway domain
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Protocol


@dataclass(frozen=True)
class FetchResponse:
    """A completed HTTP exchange"""

    url: str
    status_code: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HttpFetcher(Protocol):
    """Anything able to GET a URL with a timeout and redirect cap"""

    async def fetch(
        self,
        url: str,
        *,
        timeout: float,
        max_redirects: int,
        user_agent: str,
    ) -> FetchResponse:
        ...


class AuxiliaryOutcome(str, Enum):
    """How a best-effort fetch of robots.txt / sitemap.xml ended"""

    OK = "ok"
    TIMED_OUT = "timed_out"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class AuxiliaryFetchResult:
    """Result of an auxiliary fetch; never raised, always returned"""

    url: str
    outcome: AuxiliaryOutcome
    status_code: Optional[int] = None
    text: str = ""
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        return self.outcome == AuxiliaryOutcome.OK
