from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.dto.response_format import ErrorResponse
from app.core.errors import StatesApiError, StorageError
from app.core.logging_config import get_loggers


def register_exception_handlers(app: FastAPI):
    """Enregistre les gestionnaires d'exceptions globaux pour standardiser les réponses."""

    @app.exception_handler(StatesApiError)
    async def states_api_error_handler(request: Request, exc: StatesApiError):
        """Erreurs métier (InvalidInput, NotFound, StorageError)."""
        if isinstance(exc, StorageError):
            # Le détail a déjà été loggé par le store ; on ne renvoie rien d'interne
            message = "Internal Error"
        else:
            message = exc.message
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_detail(message, code=exc.code).model_dump(
                exclude_none=True
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Gestionnaire pour les exceptions HTTP standards (dont 404 route inconnue)."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_detail(
                {"message": str(exc.detail)}, code=f"HTTP_{exc.status_code}"
            ).model_dump(exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Gestionnaire pour les erreurs de validation Pydantic."""
        errors = []
        for error in exc.errors():
            errors.append(
                {
                    "field": " -> ".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
            )

        return JSONResponse(
            status_code=422,
            content=ErrorResponse.from_detail(
                {"message": "Validation failed", "details": errors}
            ).model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Gestionnaire pour les exceptions non capturées."""
        _, error_logger = get_loggers()
        error_logger.error(
            "Unhandled error on %s %s: %r", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse.from_detail(
                "Internal Error", code="INTERNAL_ERROR"
            ).model_dump(exclude_none=True),
        )
