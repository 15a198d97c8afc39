# backend/app/services/reference_table.py
# Référentiel des États en mémoire : chargé une fois au démarrage, lecture seule ensuite.

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path

from app.core.settings import get_settings
from app.models.state import StateRecord


class Contiguity(str, Enum):
    """Filtre de contiguïté pour le listing des États."""

    ALL = "all"
    CONTIGUOUS = "contiguous"
    NON_CONTIGUOUS = "non_contiguous"

    @classmethod
    def from_query(cls, contig: str | None) -> "Contiguity":
        """Traduire le paramètre `?contig=` (`true`/`false`, autre valeur = pas de filtre)."""
        if contig == "true":
            return cls.CONTIGUOUS
        if contig == "false":
            return cls.NON_CONTIGUOUS
        return cls.ALL


class ReferenceTable:
    """Table code → `StateRecord`, immuable.

    Description:
        Conserve l'ordre naturel du jeu de données (ordre alphabétique des noms
        dans le fichier packagé). Sûre en lecture concurrente : rien n'y est
        modifié après construction.
    """

    def __init__(self, records: list[StateRecord]):
        self._records: tuple[StateRecord, ...] = tuple(records)
        self._by_code: dict[str, StateRecord] = {r.code: r for r in self._records}
        if len(self._by_code) != len(self._records):
            raise ValueError("Duplicate state code in reference data")

    @classmethod
    def load(cls, path: str | Path) -> "ReferenceTable":
        """Charger le référentiel depuis un fichier JSON (liste d'objets).

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            pydantic.ValidationError: Si une entrée est incomplète.
        """
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
        return cls([StateRecord.model_validate(row) for row in rows])

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def all(self) -> tuple[StateRecord, ...]:
        return self._records

    def by_code(self, code: str) -> StateRecord | None:
        return self._by_code.get(code)

    def filter(self, contiguity: Contiguity = Contiguity.ALL) -> list[StateRecord]:
        """Sélectionner les États selon leur contiguïté, dans l'ordre du référentiel."""
        if contiguity is Contiguity.CONTIGUOUS:
            return [r for r in self._records if r.is_contiguous]
        if contiguity is Contiguity.NON_CONTIGUOUS:
            return [r for r in self._records if not r.is_contiguous]
        return list(self._records)


@lru_cache
def get_reference_table() -> ReferenceTable:
    """Accès unique au référentiel (chargé au premier appel, puis mis en cache)."""
    return ReferenceTable.load(get_settings().states_data_path)
