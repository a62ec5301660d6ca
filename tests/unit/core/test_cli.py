"""
Tests for the ShopAudit command-line interface
"""
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from core.cli import cli
from core.logging import setup_logging
from d1_audit.models import Finding, PageMetadata
from d1_audit.scoring import build_report
from d1_audit.types import Category, Severity


@pytest.fixture
def runner():
    yield CliRunner()
    # The audit command points logging at the runner's stderr
    setup_logging()


@pytest.fixture
def report():
    findings = [
        Finding(id="meta-title", name="Page Title", category=Category.META, severity=Severity.PASSED, message="Good title (45 chars)"),
        Finding(
            id="img-alt",
            name="Image Alt Text",
            category=Category.IMAGES,
            severity=Severity.WARNING,
            message="1/3 images missing alt text",
            details=("/hero.jpg",),
        ),
        Finding(id="twitter-card", name="Twitter Card", category=Category.SOCIAL, severity=Severity.INFO, message="No Twitter card meta tags"),
    ]
    return build_report("https://shop.example.com/", findings, PageMetadata(title="Shop"))


def fake_audit(report, seen):
    async def audit_url(url, settings=None):
        seen["url"] = url
        seen["settings"] = settings
        return report

    return audit_url


class TestAuditCommand:
    def test_prints_summary(self, runner, report):
        seen = {}
        with patch("d1_audit.coordinator.audit_url", fake_audit(report, seen)):
            result = runner.invoke(cli, ["audit", "shop.example.com"])

        assert result.exit_code == 0
        assert seen["url"] == "shop.example.com"
        assert "Score: 70/100  Grade: B" in result.output
        assert "Critical: 0  Warnings: 1  Passed: 1  Info: 1" in result.output
        assert "[!] Image Alt Text: 1/3 images missing alt text" in result.output
        assert "      /hero.jpg" in result.output

    def test_json_output(self, runner, report):
        with patch("d1_audit.coordinator.audit_url", fake_audit(report, {})):
            result = runner.invoke(cli, ["audit", "https://shop.example.com/", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["score"] == 70
        assert data["checks"][1]["details"] == ["/hero.jpg"]

    def test_timeout_overrides_settings(self, runner, report):
        seen = {}
        with patch("d1_audit.coordinator.audit_url", fake_audit(report, seen)):
            result = runner.invoke(cli, ["audit", "shop.example.com", "--timeout", "7.5"])

        assert result.exit_code == 0
        assert seen["settings"].request_timeout == 7.5

    def test_out_of_range_timeout_rejected(self, runner):
        result = runner.invoke(cli, ["audit", "shop.example.com", "--timeout", "0.1"])

        assert result.exit_code == 2

    def test_url_argument_required(self, runner):
        result = runner.invoke(cli, ["audit"])
        assert result.exit_code != 0


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "2.0.0" in result.output
