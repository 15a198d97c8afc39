from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.core.health_checks import check_mongodb
from app.core.settings import get_settings
from app.models.base.health import HealthCheck

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheck,
    summary="Health check de l'API",
    description="Retourne le statut de l'API et de MongoDB.",
)
async def health() -> JSONResponse:
    """
    Health check endpoint standard

    Returns:
        200 si tout OK, 503 si MongoDB est injoignable
    """
    checks = {"database": await check_mongodb()}

    has_errors = any(check != "ok" for check in checks.values())
    overall_status = "degraded" if has_errors else "ok"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if has_errors else status.HTTP_200_OK

    response = HealthCheck(
        status=overall_status,
        version=get_settings().api_version,
        checks=checks,
    )
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
