"""
Performance checks: response time and HTML size
"""
from ..types import Category, Severity
from .base import check

RESPONSE_TIME_CRITICAL_MS = 3000
RESPONSE_TIME_WARNING_MS = 1500
HTML_SIZE_WARNING_KB = 500


@check("response-time", "Response Time", Category.PERFORMANCE)
def response_time_check(self, context):
    elapsed = context.meta.response_time_ms
    if elapsed > RESPONSE_TIME_CRITICAL_MS:
        return self.emit(
            Severity.CRITICAL,
            f"Slow response ({elapsed / 1000:.1f}s)",
            fix="Optimize server response time, aim for under 1 second",
        )
    if elapsed > RESPONSE_TIME_WARNING_MS:
        return self.emit(
            Severity.WARNING,
            f"Response time: {elapsed / 1000:.1f}s",
            fix="Consider CDN or server optimization",
        )
    return self.emit(Severity.PASSED, f"Fast response ({elapsed}ms)")


@check("page-size", "HTML Size", Category.PERFORMANCE)
def page_size_check(self, context):
    size = context.meta.html_size_kb
    if size > HTML_SIZE_WARNING_KB:
        return self.emit(
            Severity.WARNING,
            f"Large HTML ({size}KB)",
            fix="Reduce HTML size, consider minification and removing inline styles/scripts",
        )
    return self.emit(Severity.PASSED, f"HTML size: {size}KB")
