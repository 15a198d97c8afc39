# backend/app/models/funfact_dto.py
# Corps de requêtes des endpoints fun facts.
#
# Les champs requis sont optionnels côté schéma : leur présence est vérifiée par les
# services pour renvoyer les messages historiques de l'API (400) plutôt qu'un 422.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def body_field(body: Any, name: str) -> Any:
    """Lire un champ d'un corps JSON brut ; None si le corps n'est pas un objet.

    Utilisé par `POST /states/{code}/funfact`, dont le corps est accepté tel quel.
    """
    if isinstance(body, dict):
        return body.get(name)
    return None


class FunFactPatchIn(BaseModel):
    """Remplacement d'un fun fact par position (1 = premier)."""

    index: int | None = Field(None, description="Position 1-based du fait à remplacer.")
    funfact: str | None = Field(None, description="Nouveau texte.")


class FunFactDeleteIn(BaseModel):
    """Suppression d'un fun fact par position (1 = premier)."""

    index: int | None = Field(None, description="Position 1-based du fait à supprimer.")


class StateDocumentIn(BaseModel):
    """Création explicite d'un document (`POST /states`)."""

    stateCode: str | None = None
    funfacts: Any = None


class StateCodeIn(BaseModel):
    """Suppression d'un document par code passé dans le corps (`DELETE /states`)."""

    code: str | None = None
