# backend/app/core/errors.py
# Erreurs métier levées par les services et converties en réponses HTTP par les exception handlers.


class StatesApiError(Exception):
    """Erreur de base de l'API.

    Attributes:
        message (str): Message court, lisible, renvoyé au client.
        status_code (int): Code HTTP à utiliser pour la réponse.
        code (str): Code machine (ex. "NOT_FOUND").
    """

    default_status = 500
    code = "ERROR"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.default_status


class InvalidInput(StatesApiError):
    """Champ requis absent ou mal formé."""

    default_status = 400
    code = "INVALID_INPUT"


class NotFound(StatesApiError):
    """Aucun état / aucun fun fact correspondant.

    Le code HTTP dépend de l'endpoint (400, 404...), il est fourni par l'appelant.
    """

    default_status = 404
    code = "NOT_FOUND"


class StorageError(StatesApiError):
    """Échec MongoDB. Le message exposé au client reste générique."""

    default_status = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal Error"):
        super().__init__(message)


class DuplicateDocument(InvalidInput):
    """Un document de fun facts existe déjà pour ce code (index unique)."""

    code = "DUPLICATE_DOCUMENT"
