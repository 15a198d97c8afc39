# backend/app/services/states_service.py
# Lecture : fusion du référentiel statique avec les fun facts MongoDB, projections d'attributs, fait aléatoire.

from __future__ import annotations

import random
from typing import Any

from app.core.errors import NotFound
from app.core.utils import format_thousands
from app.models.funfact import FunFactDocument
from app.models.state import StateRecord
from app.services.funfact_store import FunFactStore
from app.services.reference_table import Contiguity, ReferenceTable


def merge_state(record: StateRecord, document: FunFactDocument | None) -> dict[str, Any]:
    """Construire la vue fusionnée d'un État.

    Description:
        `funfacts` n'est ajouté que si le document existe et que sa liste est
        non vide : l'absence du champ signifie « aucun fait », jamais une liste vide.

    Args:
        record: Fiche de référence.
        document: Document de fun facts, ou None.

    Returns:
        dict: Vue JSON-sérialisable.
    """
    view = record.model_dump()
    if document is not None and document.funfacts:
        view["funfacts"] = list(document.funfacts)
    return view


class StatesService:
    """Service de lecture des États.

    Description:
        Combine le `ReferenceTable` (immuable) et le `FunFactStore` (MongoDB).
        Les codes reçus ont déjà été validés et mis en majuscules par la
        dépendance `verify_state_code`.
    """

    def __init__(
        self,
        reference: ReferenceTable,
        store: FunFactStore,
        rng: random.Random | None = None,
    ):
        self.reference = reference
        self.store = store
        self.rng = rng or random.Random()

    def _record(self, code: str) -> StateRecord:
        record = self.reference.by_code(code)
        if record is None:
            raise NotFound(f"State code {code} not found.", status_code=404)
        return record

    async def list_states(self, contiguity: Contiguity = Contiguity.ALL) -> list[dict[str, Any]]:
        """Lister les États (filtrés) avec leurs fun facts.

        Args:
            contiguity: Filtre de contiguïté.

        Returns:
            list[dict]: Vues fusionnées, dans l'ordre du référentiel.
        """
        records = self.reference.filter(contiguity)
        documents = {doc.state_code: doc for doc in await self.store.find_all()}
        return [merge_state(r, documents.get(r.code)) for r in records]

    async def get_state(self, code: str) -> dict[str, Any]:
        record = self._record(code)
        return merge_state(record, await self.store.find_one(code))

    async def get_random_fact(self, code: str) -> str:
        """Tirer un fun fact au hasard (uniforme sur la liste).

        Raises:
            NotFound: Si aucun document ou liste vide (404).
        """
        record = self._record(code)
        document = await self.store.find_one(code)
        if document is None or not document.funfacts:
            raise NotFound(f"No Fun Facts found for {record.state}", status_code=404)
        return document.funfacts[self.rng.randrange(len(document.funfacts))]

    # --- projections du référentiel (pas d'accès MongoDB) ---

    def get_capital(self, code: str) -> dict[str, str]:
        record = self._record(code)
        return {"state": record.state, "capital": record.capital_city}

    def get_nickname(self, code: str) -> dict[str, str]:
        record = self._record(code)
        return {"state": record.state, "nickname": record.nickname}

    def get_population(self, code: str) -> dict[str, str]:
        record = self._record(code)
        return {"state": record.state, "population": format_thousands(record.population)}

    def get_admission(self, code: str) -> dict[str, str]:
        record = self._record(code)
        return {"state": record.state, "admitted": record.admission_date}
