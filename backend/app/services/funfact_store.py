# backend/app/services/funfact_store.py
# Accès MongoDB aux documents de fun facts. Toute erreur du driver est loggée puis convertie en StorageError.

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.bson_utils import dump_mongo
from app.core.errors import DuplicateDocument, StorageError
from app.core.logging_config import get_loggers
from app.models.funfact import FunFactDocument


@contextmanager
def storage_errors(operation: str, state_code: str | None = None) -> Iterator[None]:
    """Convertir les erreurs PyMongo en `StorageError` après les avoir loggées.

    Args:
        operation: Nom de l'opération (pour le log).
        state_code: Code concerné, si applicable.
    """
    try:
        yield
    except PyMongoError as e:
        _, error_logger = get_loggers()
        error_logger.error("MongoDB %s failed (stateCode=%s): %r", operation, state_code, e)
        raise StorageError() from e


class FunFactStore:
    """Store des documents `{ _id, stateCode, funfacts }`.

    Description:
        Expose le contrat find/create/save/delete consommé par les services.
        Aucune règle métier ici : les contrôles d'index et d'existence sont
        faits par `FunFactService`.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialiser le store.

        Args:
            collection: Collection Motor des fun facts.
        """
        self.collection = collection

    async def find_one(self, state_code: str) -> FunFactDocument | None:
        with storage_errors("find_one", state_code):
            doc = await self.collection.find_one({"stateCode": state_code})
        return FunFactDocument.model_validate(doc) if doc else None

    async def find_all(self) -> list[FunFactDocument]:
        """Lecture en une fois de toute la collection (≤ 50 documents attendus)."""
        with storage_errors("find_all"):
            docs = await self.collection.find({}).to_list(length=None)
        return [FunFactDocument.model_validate(d) for d in docs]

    async def create(self, state_code: str, funfacts: list[str]) -> FunFactDocument:
        """Insérer un nouveau document.

        Raises:
            DuplicateDocument: Si un document existe déjà pour ce code (index unique).
            StorageError: Pour toute autre erreur MongoDB.
        """
        document = FunFactDocument(stateCode=state_code, funfacts=list(funfacts))
        with storage_errors("create", state_code):
            try:
                result = await self.collection.insert_one(dump_mongo(document))
            except DuplicateKeyError as e:
                raise DuplicateDocument(f"Fun facts already exist for {state_code}.") from e
        document.id = result.inserted_id
        return document

    async def save(self, document: FunFactDocument) -> FunFactDocument:
        """Remplacer le document existant (dernier écrivain gagnant)."""
        with storage_errors("save", document.state_code):
            await self.collection.replace_one(
                {"_id": document.id},
                dump_mongo(document),
            )
        return document

    async def delete_one(self, state_code: str) -> int:
        """Supprimer le document d'un code ; renvoie le nombre de documents supprimés (0 ou 1)."""
        with storage_errors("delete_one", state_code):
            result = await self.collection.delete_one({"stateCode": state_code})
        return result.deleted_count
