"""
Audit data model

Finding, PageMetadata and AuditReport are frozen dataclasses. ``to_dict``
produces the JSON shape consumed by the UI and the report exporter, so the
camelCase keys in ``PageMetadata.to_dict`` are part of that contract.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .types import Category, Grade, Severity


@dataclass(frozen=True)
class Finding:
    """One check's output"""

    id: str
    name: str
    category: Category
    severity: Severity
    message: str
    details: Optional[Tuple[str, ...]] = None
    fix: Optional[str] = None

    def __post_init__(self):
        # Unknown category or severity raises ValueError here
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "severity", Severity(self.severity))
        if self.details is not None:
            object.__setattr__(self, "details", tuple(self.details))

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "status": self.severity.value,
            "message": self.message,
        }
        if self.details is not None:
            data["details"] = list(self.details)
        if self.fix is not None:
            data["fix"] = self.fix
        return data


@dataclass(frozen=True)
class PageMetadata:
    """Facts about the fetched page, set once after the fetch"""

    title: Optional[str] = None
    description: Optional[str] = None
    og_image: Optional[str] = None
    favicon: Optional[str] = None
    response_time_ms: int = 0
    html_size_kb: int = 0
    is_shopify: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "ogImage": self.og_image,
            "favicon": self.favicon,
            "responseTimeMs": self.response_time_ms,
            "htmlSizeKb": self.html_size_kb,
            "isShopify": self.is_shopify,
        }


@dataclass(frozen=True)
class Summary:
    """Finding count per severity"""

    critical: int = 0
    warnings: int = 0
    passed: int = 0
    info: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.warnings + self.passed + self.info

    @property
    def scorable(self) -> int:
        return self.critical + self.warnings + self.passed

    def to_dict(self) -> Dict[str, int]:
        return {
            "critical": self.critical,
            "warnings": self.warnings,
            "passed": self.passed,
            "info": self.info,
        }


@dataclass(frozen=True)
class AuditReport:
    """The complete result of one audit"""

    url: str
    score: int
    grade: Grade
    checks: Tuple[Finding, ...]
    summary: Summary
    meta: PageMetadata
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "score": self.score,
            "grade": self.grade.value,
            "checks": [finding.to_dict() for finding in self.checks],
            "summary": self.summary.to_dict(),
            "meta": self.meta.to_dict(),
        }
