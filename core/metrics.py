"""
Core metrics collection for ShopAudit using Prometheus
"""
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, Info, generate_latest

from core.config import settings
from core.logging import get_logger

# Create a global registry for the application
REGISTRY = CollectorRegistry()

app_info = Info("shopaudit_app", "ShopAudit application information", registry=REGISTRY)

# Request metrics
request_count = Counter(
    "shopaudit_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=REGISTRY,
)

request_duration = Histogram(
    "shopaudit_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=REGISTRY,
)

# Audit metrics
audits_completed = Counter(
    "shopaudit_audits_total",
    "Total number of audits completed",
    ["grade"],
    registry=REGISTRY,
)

audit_duration = Histogram(
    "shopaudit_audit_duration_seconds",
    "Wall-clock time of a single audit",
    buckets=(0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 30.0),
    registry=REGISTRY,
)

findings_emitted = Counter(
    "shopaudit_findings_total",
    "Findings emitted by severity",
    ["severity"],
    registry=REGISTRY,
)

fetch_failures = Counter(
    "shopaudit_fetch_failures_total",
    "Failed fetches by resource kind",
    ["kind"],
    registry=REGISTRY,
)


class MetricsCollector:
    """Helper class for collecting metrics"""

    def __init__(self):
        self.logger = get_logger("metrics")
        app_info.info({"version": settings.app_version, "environment": settings.environment})

    def track_request(self, method: str, endpoint: str, status: int, duration: float):
        """Track HTTP request metrics"""
        request_count.labels(method=method, endpoint=endpoint, status=str(status)).inc()
        request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def track_audit(self, grade: str, duration: float, severities: dict):
        """Track a finished audit and the severities it produced"""
        audits_completed.labels(grade=grade).inc()
        audit_duration.observe(duration)
        for severity, count in severities.items():
            if count:
                findings_emitted.labels(severity=severity).inc(count)

    def track_fetch_failure(self, kind: str):
        """Track a failed main or auxiliary fetch"""
        fetch_failures.labels(kind=kind).inc()

    def get_metrics(self) -> bytes:
        """Get current metrics in Prometheus format"""
        return generate_latest(REGISTRY)


# Global metrics collector instance
metrics = MetricsCollector()


def get_metrics_response() -> tuple[bytes, str]:
    """Get metrics response for Prometheus endpoint"""
    return metrics.get_metrics(), CONTENT_TYPE_LATEST
