"""
Exception hierarchy for ShopAudit

Subclasses set ``error_code`` and ``status_code`` as class defaults; both can
still be overridden per instance.
"""
from typing import Any, Dict, Optional


class ShopAuditError(Exception):
    """Base exception for all ShopAudit errors"""

    error_code = "SHOPAUDIT_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Body for API error responses"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ShopAuditError):
    """Rejected audit request input"""

    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, **details):
        if field:
            details = {"field": field, **details}
        super().__init__(message, details=details)
