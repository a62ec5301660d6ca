"""Score and grade an ordered list of findings.

Pure functions, no I/O. ``info`` findings are counted in the summary but are
excluded from the score denominator.
"""
import math
from datetime import datetime
from typing import Iterable, Optional

from .models import AuditReport, Finding, PageMetadata, Summary
from .types import Grade, Severity

# Contribution of each scorable severity to the score
SEVERITY_WEIGHTS = {
    Severity.PASSED: 1.0,
    Severity.WARNING: 0.4,
    Severity.CRITICAL: 0.0,
}

# (minimum score, grade), highest first
GRADE_THRESHOLDS = [
    (90, Grade.A_PLUS),
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
]


def summarize(findings: Iterable[Finding]) -> Summary:
    """Tally findings per severity"""
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity] += 1
    return Summary(
        critical=counts[Severity.CRITICAL],
        warnings=counts[Severity.WARNING],
        passed=counts[Severity.PASSED],
        info=counts[Severity.INFO],
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_score(summary: Summary) -> int:
    """
    Weighted share of scorable findings, 0-100

    score = round((passed * 1.0 + warnings * 0.4) / max(1, scorable) * 100)
    """
    weighted = (
        summary.passed * SEVERITY_WEIGHTS[Severity.PASSED]
        + summary.warnings * SEVERITY_WEIGHTS[Severity.WARNING]
        + summary.critical * SEVERITY_WEIGHTS[Severity.CRITICAL]
    )
    score = round_half_up(weighted / max(1, summary.scorable) * 100)
    return max(0, min(score, 100))


def grade_from_score(score: int) -> Grade:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return Grade.F


def build_report(
    url: str,
    findings: Iterable[Finding],
    meta: PageMetadata,
    timestamp: Optional[datetime] = None,
) -> AuditReport:
    """Fold findings and page metadata into the final report"""
    checks = tuple(findings)
    summary = summarize(checks)
    score = calculate_score(summary)
    report_kwargs = {"timestamp": timestamp} if timestamp is not None else {}
    return AuditReport(
        url=url,
        score=score,
        grade=grade_from_score(score),
        checks=checks,
        summary=summary,
        meta=meta,
        **report_kwargs,
    )
