"""
Gateway-specific exceptions

``message`` is the short reason shown in a ``fetch`` finding.
"""
from core.exceptions import ShopAuditError


class FetchError(ShopAuditError):
    """Base exception for failed page fetches"""

    error_code = "FETCH_ERROR"
    status_code = 502

    def __init__(self, url: str, message: str, **details):
        self.url = url
        super().__init__(message, details={"url": url, **details})


class FetchTimeoutError(FetchError):
    """Fetch did not complete within its timeout"""

    error_code = "FETCH_TIMEOUT"
    status_code = 504

    def __init__(self, url: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(url, f"Timed out after {timeout_seconds:g}s", timeout_seconds=timeout_seconds)


class FetchNetworkError(FetchError):
    """DNS, connection, TLS or redirect-limit failure"""


class FetchStatusError(FetchError):
    """Server answered with a non-success status"""

    error_code = "FETCH_STATUS"

    def __init__(self, url: str, http_status: int):
        self.http_status = http_status
        super().__init__(url, f"HTTP {http_status}", http_status=http_status)
