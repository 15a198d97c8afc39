# backend/app/services/funfact_service.py
# Mutations des fun facts : ajout (upsert), remplacement / suppression par position 1-based, suppression du document.

from __future__ import annotations

from typing import Any

from app.core.errors import DuplicateDocument, InvalidInput, NotFound
from app.core.logging_config import get_loggers
from app.models.funfact import FunFactDocument
from app.services.funfact_store import FunFactStore
from app.services.reference_table import ReferenceTable

# Les erreurs « fait introuvable » des endpoints PATCH/DELETE /funfact sont historiquement des 400
MUTATION_NOT_FOUND_STATUS = 400


def resolve_fact_position(facts: list[str], index: int) -> int | None:
    """Convertir une position externe 1-based en indice de liste.

    Description:
        Valide si `1 <= index <= len(facts)`, bornes comprises : `index == len(facts)`
        désigne le dernier fait. Seul point de contrôle des bornes pour les mutations.

    Args:
        facts: Liste courante (au moment de l'opération).
        index: Position fournie par le client.

    Returns:
        int | None: Indice 0-based, ou None si hors bornes.
    """
    if 1 <= index <= len(facts):
        return index - 1
    return None


def validate_funfacts(funfacts: Any) -> list[str]:
    """Contrôle de présence/type d'une liste de fun facts envoyée par un client.

    Raises:
        InvalidInput: Valeur absente, pas une liste, ou éléments non textuels.
    """
    if funfacts is None:
        raise InvalidInput("State fun facts value required")
    if not isinstance(funfacts, list):
        raise InvalidInput("State fun facts value must be an array")
    if not all(isinstance(fact, str) for fact in funfacts):
        raise InvalidInput("State fun facts must be strings")
    return funfacts


class FunFactService:
    """Service de mutation des fun facts.

    Description:
        Chaque opération lit le document, applique la règle puis le sauvegarde.
        Pas de verrou : deux mutations concurrentes sur le même code se
        résolvent en « dernier écrivain gagnant » côté MongoDB.
    """

    def __init__(self, reference: ReferenceTable, store: FunFactStore):
        self.reference = reference
        self.store = store
        self.logger, _ = get_loggers()

    def _state_name(self, code: str) -> str:
        record = self.reference.by_code(code)
        return record.state if record else code

    async def _load_non_empty(self, code: str) -> FunFactDocument:
        document = await self.store.find_one(code)
        if document is None or not document.funfacts:
            raise NotFound(
                f"No Fun Facts found for {self._state_name(code)}",
                status_code=MUTATION_NOT_FOUND_STATUS,
            )
        return document

    def _position(self, document: FunFactDocument, index: int) -> int:
        position = resolve_fact_position(document.funfacts, index)
        if position is None:
            raise NotFound(
                f"No Fun Fact found at that index for {self._state_name(document.state_code)}",
                status_code=MUTATION_NOT_FOUND_STATUS,
            )
        return position

    async def create_document(self, state_code: str | None, funfacts: Any = None) -> FunFactDocument:
        """Créer explicitement le document d'un code (`POST /states`).

        Raises:
            InvalidInput: `stateCode` absent, fun facts mal formés, ou document déjà existant.
        """
        if not state_code:
            raise InvalidInput("stateCode is required.")
        facts = [] if funfacts is None else validate_funfacts(funfacts)
        document = await self.store.create(state_code.upper(), facts)
        self.logger.info("Fun facts document created for %s (%d facts)", document.state_code, len(facts))
        return document

    async def add_facts(self, code: str, funfacts: Any) -> FunFactDocument:
        """Ajouter des fun facts en fin de liste, en créant le document au besoin.

        Description:
            Seule mutation autorisée à matérialiser un document. Une liste vide est
            acceptée (ajout sans effet, ou création d'un document vide).

        Args:
            code: Code validé.
            funfacts: Valeur brute du corps de requête.

        Returns:
            FunFactDocument: Document complet après mise à jour.
        """
        facts = validate_funfacts(funfacts)

        document = await self.store.find_one(code)
        if document is None:
            try:
                document = await self.store.create(code, facts)
            except DuplicateDocument:
                # Créé entre la lecture et l'insertion : on repasse par l'ajout en fin de liste
                document = await self.store.find_one(code)
                if document is None:
                    raise
            else:
                self.logger.info("Added %d fun facts to %s", len(facts), code)
                return document

        document.funfacts.extend(facts)
        document = await self.store.save(document)

        self.logger.info("Added %d fun facts to %s", len(facts), code)
        return document

    async def replace_fact_at(self, code: str, index: int | None, funfact: str | None) -> FunFactDocument:
        """Remplacer le fun fact à la position `index` (1-based).

        Raises:
            InvalidInput: `index` ou `funfact` absent.
            NotFound: Aucun fait pour cet État, ou position hors bornes (400).
        """
        if index is None:
            raise InvalidInput("State fun fact index value required")
        if funfact is None:
            raise InvalidInput("State fun fact value required")

        document = await self._load_non_empty(code)
        document.funfacts[self._position(document, index)] = funfact
        return await self.store.save(document)

    async def delete_fact_at(self, code: str, index: int | None) -> FunFactDocument:
        """Supprimer le fun fact à la position `index` (1-based).

        Description:
            Supprimer le dernier fait laisse un document avec une liste vide ; le
            document n'est pas supprimé.

        Raises:
            InvalidInput: `index` absent.
            NotFound: Aucun fait pour cet État, ou position hors bornes (400).
        """
        if index is None:
            raise InvalidInput("State fun fact index value required")

        document = await self._load_non_empty(code)
        del document.funfacts[self._position(document, index)]
        return await self.store.save(document)

    async def delete_all_for(self, code: str) -> int:
        """Supprimer le document du code ; 0 si absent (pas une erreur)."""
        deleted = await self.store.delete_one(code)
        if deleted:
            self.logger.info("Fun facts document deleted for %s", code)
        return deleted
