# backend/app/api/routes/base.py
# Routes de base (accueil, ping).

from fastapi import APIRouter

from app.core.settings import get_settings

router = APIRouter()


@router.get("/", summary="Accueil de l'API")
async def root():
    """Nom et version de l'API, point d'entrée des ressources."""
    settings = get_settings()
    return {"name": settings.app_name, "version": settings.api_version, "resources": ["/states"]}


@router.get(
    "/ping",
    tags=["Health"],
    summary="Vérification de santé de l'API",
    description="Retourne un message 'pong' permettant de tester que l'API répond.",
)
async def ping():
    """Health-check API.

    Returns:
        dict: Statut et message de réponse.
    """
    return {"status": "ok", "message": "pong"}
