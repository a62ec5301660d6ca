"""
D1 Audit - single-page SEO audit engine

Fetches a page, runs the 22-check battery and returns a scored AuditReport.
"""

from .coordinator import AuditCoordinator, audit_url, normalize_url
from .document import Document
from .models import AuditReport, Finding, PageMetadata, Summary
from .scoring import build_report, calculate_score, grade_from_score, summarize
from .types import Category, Grade, Severity

__all__ = [
    # Entry points
    "audit_url",
    "AuditCoordinator",
    "normalize_url",
    # Models
    "AuditReport",
    "Finding",
    "PageMetadata",
    "Summary",
    "Document",
    # Scoring
    "build_report",
    "calculate_score",
    "grade_from_score",
    "summarize",
    # Types
    "Category",
    "Grade",
    "Severity",
]
