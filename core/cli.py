"""
Command-line interface for ShopAudit
"""
import asyncio
import json
import sys

import click

from core.config import get_settings, settings
from core.logging import get_logger, setup_logging

logger = get_logger(__name__)

SEVERITY_MARKERS = {
    "critical": "✗",
    "warning": "!",
    "passed": "✓",
    "info": "i",
}


@click.group()
@click.version_option(version=settings.app_version)
def cli():
    """ShopAudit CLI - single-page SEO auditor"""
    pass


@cli.command()
@click.argument("url")
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
@click.option("--timeout", type=click.FloatRange(1, 60), default=None, help="Main page fetch timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Log fetch and check activity to stderr")
def audit(url: str, as_json: bool, timeout: float, verbose: bool):
    """Audit a single URL"""
    from d1_audit.coordinator import audit_url

    setup_logging(level="DEBUG" if verbose else "WARNING", log_format="text", stream=sys.stderr)

    audit_settings = get_settings()
    if timeout is not None:
        audit_settings = audit_settings.model_copy(update={"request_timeout": timeout})
    logger.debug(f"Auditing {url} with request_timeout={audit_settings.request_timeout}s")

    report = asyncio.run(audit_url(url, settings=audit_settings))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"{report.url}")
    click.echo(f"Score: {report.score}/100  Grade: {report.grade.value}")
    summary = report.summary
    click.echo(
        f"Critical: {summary.critical}  Warnings: {summary.warnings}  "
        f"Passed: {summary.passed}  Info: {summary.info}"
    )
    click.echo("")
    for finding in report.checks:
        marker = SEVERITY_MARKERS[finding.severity.value]
        click.echo(f"[{marker}] {finding.name}: {finding.message}")
        for detail in finding.details or ():
            click.echo(f"      {detail}")


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to")
@click.option("--port", default=8000, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def runserver(host: str, port: int, reload: bool):
    """Run the FastAPI development server"""
    import uvicorn

    click.echo(f"Starting {settings.app_name} server on {host}:{port}")
    click.echo(f"Environment: {settings.environment}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
