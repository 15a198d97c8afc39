import time

from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import get_loggers


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Journalise chaque requête : méthode, origine, chemin, statut, durée."""

    def __init__(self, app, exclude_paths=("/ping",)):
        super().__init__(app)
        self.exclude_paths = exclude_paths

    async def dispatch(self, request, call_next):
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        generic_logger, _ = get_loggers()
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        generic_logger.info(
            "%s\t%s\t%s\t%s\t%.1fms",
            request.method,
            request.headers.get("origin", "-"),
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
