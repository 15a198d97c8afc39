# backend/app/api/routes/__init__.py

from .base import router as base_router
from .health import router as health_router
from .states import router as states_router

routers = [
    base_router,
    health_router,
    states_router,
]
