"""Core utilities and configuration for ShopAudit"""
from core.config import settings
from core.exceptions import ShopAuditError, ValidationError
from core.logging import get_logger

__all__ = [
    "settings",
    "get_logger",
    "ShopAuditError",
    "ValidationError",
]
