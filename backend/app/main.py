# backend/app/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import routers
from app.core.exception_handlers import register_exception_handlers
from app.core.logging_config import get_loggers
from app.core.middleware import RequestLogMiddleware
from app.core.settings import get_settings
from app.db.mongodb import close_client
from app.db.seed_indexes import ensure_indexes
from app.services.reference_table import get_reference_table


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    settings = get_settings()
    generic_logger, _ = get_loggers()

    # Référentiel chargé une seule fois, partagé en lecture par toutes les requêtes
    app.state.reference_table = get_reference_table()
    generic_logger.info("Reference table loaded (%d states)", len(app.state.reference_table))

    if settings.ensure_indexes_on_startup:
        await ensure_indexes()

    yield  # l'app tourne ici

    # --- shutdown ---
    close_client()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

    # ⚠️ Ordre des middlewares : le dernier ajouté est le plus externe.
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for r in routers:
        app.include_router(r)
    return app


app = create_app()
