# backend/app/api/deps.py
# Dépendances FastAPI : validation du code d'état (path) et construction des services.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Path, status

from app.core.settings import get_settings
from app.db.mongodb import get_collection
from app.services.funfact_service import FunFactService
from app.services.funfact_store import FunFactStore
from app.services.reference_table import ReferenceTable, get_reference_table
from app.services.states_service import StatesService

Reference = Annotated[ReferenceTable, Depends(get_reference_table)]


def get_funfact_store() -> FunFactStore:
    """Store branché sur la collection configurée (`settings.funfacts_collection`)."""
    return FunFactStore(get_collection(get_settings().funfacts_collection))


Store = Annotated[FunFactStore, Depends(get_funfact_store)]


def get_states_service(reference: Reference, store: Store) -> StatesService:
    return StatesService(reference, store)


def get_funfact_service(reference: Reference, store: Store) -> FunFactService:
    return FunFactService(reference, store)


def verify_state_code(
    reference: Reference,
    code: str = Path(..., description="Abréviation de l'État (insensible à la casse, ex. `ga`)."),
) -> str:
    """Valider et normaliser le code d'état passé dans l'URL.

    Description:
        Met le code en majuscules et vérifie qu'il appartient au référentiel. Les
        services en aval reçoivent donc toujours un code connu.

    Raises:
        HTTPException: 400 si le code est vide ou inconnu.

    Returns:
        str: Code en majuscules.
    """
    code = (code or "").strip()
    if not code:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="State parameter is required.")

    upper = code.upper()
    if upper not in reference:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid state abbreviation parameter",
        )
    return upper


StateCode = Annotated[str, Depends(verify_state_code)]
StatesSvc = Annotated[StatesService, Depends(get_states_service)]
FunFactSvc = Annotated[FunFactService, Depends(get_funfact_service)]
