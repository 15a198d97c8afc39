# backend/app/api/routes/states.py
# Routes "/states" : référentiel fusionné avec les fun facts, CRUD des fun facts par position.

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Query, status

from app.api.deps import FunFactSvc, StateCode, StatesSvc
from app.api.dto.response_format import DeleteOutcome
from app.core.errors import InvalidInput
from app.models.funfact_dto import (
    FunFactDeleteIn,
    FunFactPatchIn,
    StateCodeIn,
    StateDocumentIn,
    body_field,
)
from app.services.reference_table import Contiguity

router = APIRouter(prefix="/states", tags=["states"])


# --- COLLECTION -----------------------------------------------------------


@router.get(
    "",
    summary="Lister les États",
    description=(
        "Retourne les 50 États avec leurs fun facts (champ `funfacts` absent si aucun).\n\n"
        "- `contig=true` : 48 États contigus\n"
        "- `contig=false` : AK et HI uniquement"
    ),
)
async def list_states(
    service: StatesSvc,
    contig: str | None = Query(None, description="`true` / `false` ; toute autre valeur est ignorée."),
):
    return await service.list_states(Contiguity.from_query(contig))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Créer le document de fun facts d'un État",
)
async def create_state_document(service: FunFactSvc, payload: StateDocumentIn | None = None):
    payload = payload or StateDocumentIn()
    document = await service.create_document(payload.stateCode, payload.funfacts)
    return document.to_response()


@router.delete(
    "",
    response_model=DeleteOutcome,
    summary="Supprimer le document de fun facts (code dans le corps)",
)
async def delete_state_document_by_body(service: FunFactSvc, payload: StateCodeIn | None = None):
    if payload is None or not payload.code:
        raise InvalidInput("A state code is required.")
    deleted = await service.delete_all_for(payload.code.upper())
    return DeleteOutcome(deletedCount=deleted)


# --- ÉTAT -----------------------------------------------------------------


@router.get("/{code}", summary="Détail d'un État")
async def get_state(code: StateCode, service: StatesSvc):
    """Fiche de l'État, avec `funfacts` seulement si la liste est non vide."""
    return await service.get_state(code)


@router.delete(
    "/{code}",
    response_model=DeleteOutcome,
    summary="Supprimer tous les fun facts d'un État",
    description="Supprime le document ; `deletedCount=0` si rien n'existait.",
)
async def delete_state_document(code: StateCode, service: FunFactSvc):
    return DeleteOutcome(deletedCount=await service.delete_all_for(code))


# --- FUN FACTS ------------------------------------------------------------


@router.get("/{code}/funfact", summary="Un fun fact au hasard")
async def get_random_funfact(code: StateCode, service: StatesSvc):
    return {"funfact": await service.get_random_fact(code)}


@router.post(
    "/{code}/funfact",
    status_code=status.HTTP_201_CREATED,
    summary="Ajouter des fun facts",
    description="Ajoute `funfacts` (liste) en fin de liste ; crée le document si besoin.",
)
async def add_funfacts(code: StateCode, service: FunFactSvc, payload: Any = Body(None)):
    document = await service.add_facts(code, body_field(payload, "funfacts"))
    return document.to_response()


@router.patch(
    "/{code}/funfact",
    summary="Remplacer un fun fact",
    description="`index` est 1-based : `1` désigne le premier fait.",
)
async def patch_funfact(code: StateCode, service: FunFactSvc, payload: FunFactPatchIn | None = None):
    payload = payload or FunFactPatchIn()
    document = await service.replace_fact_at(code, payload.index, payload.funfact)
    return document.to_response()


@router.delete(
    "/{code}/funfact",
    summary="Supprimer un fun fact",
    description="`index` est 1-based ; les faits suivants sont décalés.",
)
async def delete_funfact(code: StateCode, service: FunFactSvc, payload: FunFactDeleteIn | None = None):
    payload = payload or FunFactDeleteIn()
    document = await service.delete_fact_at(code, payload.index)
    return document.to_response()


# --- ATTRIBUTS DU RÉFÉRENTIEL ---------------------------------------------


@router.get("/{code}/capital", summary="Capitale")
async def get_capital(code: StateCode, service: StatesSvc):
    return service.get_capital(code)


@router.get("/{code}/nickname", summary="Surnom")
async def get_nickname(code: StateCode, service: StatesSvc):
    return service.get_nickname(code)


@router.get("/{code}/population", summary="Population (séparateur de milliers)")
async def get_population(code: StateCode, service: StatesSvc):
    return service.get_population(code)


@router.get("/{code}/admission", summary="Date d'admission dans l'Union")
async def get_admission(code: StateCode, service: StatesSvc):
    return service.get_admission(code)
