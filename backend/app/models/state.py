# backend/app/models/state.py
# Référentiel statique des États américains (chargé une fois depuis le JSON packagé, jamais modifié).

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

NON_CONTIGUOUS_CODES = frozenset({"AK", "HI"})


class StateRecord(BaseModel):
    """Fiche de référence d'un État.

    Attributes:
        state (str): Nom (ex. "California").
        slug (str): Nom normalisé pour les URLs (ex. "new-york").
        code (str): Abréviation postale sur 2 lettres, clé primaire.
        nickname (str): Surnom officiel.
        admission_date (str): Date d'admission dans l'Union (YYYY-MM-DD).
        admission_number (int): Rang d'admission.
        capital_city (str): Capitale.
        population (int): Population.
        population_rank (int): Rang de population.
    """

    state: str
    slug: str
    code: str
    nickname: str
    admission_date: str
    admission_number: int
    capital_city: str
    population: int
    population_rank: int

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_contiguous(self) -> bool:
        """True pour les 48 États contigus (tout sauf AK et HI)."""
        return self.code not in NON_CONTIGUOUS_CODES
