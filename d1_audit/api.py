"""
Audit API Endpoints

POST /api/audit runs a synchronous audit of one URL and returns the report.
GET /api/audit describes the API.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.config import settings
from core.exceptions import ValidationError
from core.logging import get_logger

from .coordinator import AuditCoordinator
from .schemas import ApiInfoResponse, AuditRequest, ErrorResponse, validate_target_url

logger = get_logger(__name__, domain="d1")

router = APIRouter(prefix="/api/audit", tags=["audit"])


def get_coordinator() -> AuditCoordinator:
    """Dependency returning a fresh coordinator per request"""
    return AuditCoordinator()


@router.get("", response_model=ApiInfoResponse, summary="Describe the audit API")
async def api_info() -> ApiInfoResponse:
    return ApiInfoResponse(
        name=f"{settings.app_name} API",
        version=settings.app_version,
        endpoints={"POST /api/audit": "Run SEO audit on a URL"},
    )


@router.post(
    "",
    summary="Run SEO audit on a URL",
    responses={400: {"model": ErrorResponse}},
)
async def run_audit(
    request: AuditRequest,
    coordinator: AuditCoordinator = Depends(get_coordinator),
) -> JSONResponse:
    """
    Audit a single page

    The URL is normalized (https:// assumed) and validated first; a rejected
    URL returns 400 with ``{"error": ...}``. Otherwise the serialized
    AuditReport is returned, including when the target itself could not be
    fetched.
    """
    try:
        target = validate_target_url(request.url)
    except ValidationError as e:
        logger.info(f"Rejected audit request: {e.message}", extra={"details": e.details})
        return JSONResponse(status_code=e.status_code, content=ErrorResponse(error=e.message).model_dump())

    report = await coordinator.audit(target)
    return JSONResponse(content=report.to_dict())
