"""
Tests for structured logging and Prometheus metrics
"""
import json
import logging

from core.logging import ContextTextFormatter, CustomJsonFormatter, LoggerAdapter, get_logger
from core.metrics import REGISTRY, get_metrics_response, metrics


class TestLogging:
    def test_get_logger_carries_context(self):
        logger = get_logger("tests.audit", domain="d1")

        assert isinstance(logger, LoggerAdapter)
        assert logger.extra == {"domain": "d1"}

    def test_with_context_extends_without_mutating(self):
        base = get_logger("tests.audit", domain="d1")
        scoped = base.with_context(url="https://shop.example.com/")

        assert scoped.extra == {"domain": "d1", "url": "https://shop.example.com/"}
        assert base.extra == {"domain": "d1"}

    def test_json_formatter_adds_standard_fields(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("d1_audit.coordinator", logging.INFO, __file__, 1, "Finished audit", None, None)
        record.score = 87

        data = json.loads(formatter.format(record))

        assert data["message"] == "Finished audit"
        assert data["level"] == "INFO"
        assert data["logger"] == "d1_audit.coordinator"
        assert data["app"] == "ShopAudit"
        assert data["score"] == 87
        assert "msg" not in data

    def test_adapter_flattens_context_into_record(self):
        logger = get_logger("tests.audit", domain="d1").with_context(url="https://shop.example.com/")
        _, kwargs = logger.process("Starting audit", {"extra": {"score": 90}})

        assert kwargs["extra"]["url"] == "https://shop.example.com/"
        assert kwargs["extra"]["score"] == 90
        assert kwargs["extra"]["context"] == {"domain": "d1", "url": "https://shop.example.com/"}

    def test_json_formatter_drops_context_block(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("d1_audit.coordinator", logging.INFO, __file__, 1, "Starting audit", None, None)
        record.domain = "d1"
        record.context = {"domain": "d1"}

        data = json.loads(formatter.format(record))

        assert data["domain"] == "d1"
        assert "context" not in data

    def test_text_formatter_appends_context(self):
        formatter = ContextTextFormatter("%(levelname)s %(message)s")
        record = logging.LogRecord("d1_audit.coordinator", logging.WARNING, __file__, 1, "Main fetch failed", None, None)
        record.context = {"url": "https://shop.example.com/", "domain": "d1"}

        assert formatter.format(record) == "WARNING Main fetch failed [domain=d1 url=https://shop.example.com/]"


class TestMetrics:
    def test_track_audit_counts_grade_and_severities(self):
        before_grade = REGISTRY.get_sample_value("shopaudit_audits_total", {"grade": "B"}) or 0
        before_warning = REGISTRY.get_sample_value("shopaudit_findings_total", {"severity": "warnings"}) or 0

        metrics.track_audit("B", 1.2, {"critical": 0, "warnings": 3, "passed": 10, "info": 1})

        assert REGISTRY.get_sample_value("shopaudit_audits_total", {"grade": "B"}) == before_grade + 1
        assert REGISTRY.get_sample_value("shopaudit_findings_total", {"severity": "warnings"}) == before_warning + 3

    def test_track_fetch_failure(self):
        before = REGISTRY.get_sample_value("shopaudit_fetch_failures_total", {"kind": "robots"}) or 0

        metrics.track_fetch_failure("robots")

        assert REGISTRY.get_sample_value("shopaudit_fetch_failures_total", {"kind": "robots"}) == before + 1

    def test_metrics_response(self):
        body, content_type = get_metrics_response()

        assert b"shopaudit_http_requests_total" in body
        assert content_type.startswith("text/plain")
