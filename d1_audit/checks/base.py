"""
Base types for the check battery

A check is a plain function wrapped by the ``check`` decorator into a ``Check``
carrying its stable id, display name and category. ``Check.run`` never raises.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from core.logging import get_logger
from d0_gateway.types import AuxiliaryFetchResult

from ..document import Document
from ..models import Finding, PageMetadata
from ..types import Category, Severity

logger = get_logger(__name__, domain="d1")


@dataclass(frozen=True)
class AuditContext:
    """Everything a check may read; built once per audit, never mutated"""

    url: str
    document: Document
    meta: PageMetadata
    robots_txt: AuxiliaryFetchResult
    sitemap_xml: AuxiliaryFetchResult


@dataclass(frozen=True)
class Check:
    """A single named check bound to its evaluation function"""

    id: str
    name: str
    category: Category
    evaluate: Callable[["Check", AuditContext], Optional[Finding]]

    def emit(
        self,
        severity: Severity,
        message: str,
        details: Optional[Iterable[str]] = None,
        fix: Optional[str] = None,
    ) -> Finding:
        return Finding(
            id=self.id,
            name=self.name,
            category=self.category,
            severity=severity,
            message=message,
            details=tuple(details) if details is not None else None,
            fix=fix,
        )

    def run(self, context: AuditContext) -> Optional[Finding]:
        """Evaluate the check; an unexpected error becomes a critical finding"""
        try:
            return self.evaluate(self, context)
        except Exception as e:
            logger.exception(f"Check {self.id} failed for {context.url}")
            return Finding(
                id=self.id,
                name=self.name,
                category=Category.TECHNICAL,
                severity=Severity.CRITICAL,
                message=f"{self.name} check failed: {e}",
            )


def check(check_id: str, name: str, category: Category):
    """Turn ``func(check, context)`` into a ``Check``"""

    def decorator(func: Callable[[Check, AuditContext], Optional[Finding]]) -> Check:
        return Check(id=check_id, name=name, category=category, evaluate=func)

    return decorator
