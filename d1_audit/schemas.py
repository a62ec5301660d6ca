"""
Audit API Schemas

Pydantic request/response models and the URL validation performed before the
engine is invoked.
"""
from typing import Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

from .coordinator import normalize_url

_http_url = TypeAdapter(HttpUrl)


class AuditRequest(BaseModel):
    """Request body for POST /api/audit"""

    url: Optional[str] = Field(default=None, description="Page to audit; https:// is assumed when no scheme is given")

    model_config = {"json_schema_extra": {"example": {"url": "example-store.com"}}}


class ApiInfoResponse(BaseModel):
    """Response for GET /api/audit"""

    name: str
    version: str
    endpoints: Dict[str, str]


class ErrorResponse(BaseModel):
    """Error body returned for rejected audit requests"""

    error: str


def validate_target_url(url: Optional[str]) -> str:
    """
    Normalize a submitted URL and check it is auditable

    Raises:
        ValidationError: "URL is required" for a missing/blank value,
            "Invalid URL format" when the normalized value is not an http(s) URL
    """
    if url is None or not str(url).strip():
        raise ValidationError("URL is required", field="url")

    target = normalize_url(str(url))
    try:
        _http_url.validate_python(target)
    except PydanticValidationError:
        raise ValidationError("Invalid URL format", field="url", value=target)

    if not urlparse(target).hostname:
        raise ValidationError("Invalid URL format", field="url", value=target)
    return target
