# backend/app/models/funfact.py
# Document Mongo des fun facts d'un État : { _id, stateCode, funfacts[] }.

from __future__ import annotations

from pydantic import Field

from app.core.bson_utils import MongoBaseModel


class FunFactDocument(MongoBaseModel):
    """Document de fun facts.

    Description:
        Un document par code d'état (index unique sur `stateCode`). Une liste vide
        est valide et distincte de l'absence de document. L'existence d'un État
        de référence pour `stateCode` n'est pas contrôlée ici.

    Attributes:
        state_code (str): Code en majuscules (alias Mongo/JSON `stateCode`).
        funfacts (list[str]): Faits, dans l'ordre d'ajout.
    """

    state_code: str = Field(..., alias="stateCode")
    funfacts: list[str] = Field(default_factory=list)

    def to_response(self) -> dict:
        """Sérialisation JSON renvoyée aux clients (`_id` en hex)."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
