from typing import Any, Optional, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Format standardisé pour les réponses d'erreur.

    `message` reste au premier niveau pour les clients existants de l'API.
    """

    message: str
    code: str = "ERROR"
    details: Optional[list[dict[str, Any]]] = None

    @classmethod
    def from_detail(cls, detail: Union[str, dict[str, Any]], code: str = "VALIDATION_ERROR"):
        """Créer une réponse d'erreur à partir d'un détail."""
        if isinstance(detail, str):
            return cls(message=detail, code=code)
        return cls(**{"code": code, **detail})


class DeleteOutcome(BaseModel):
    """Résultat d'une suppression de document (jamais en erreur si absent)."""

    acknowledged: bool = True
    deletedCount: int = 0
