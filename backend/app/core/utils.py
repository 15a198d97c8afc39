# backend/app/core/utils.py
# Fonctions utilitaires transverses (horodatage UTC, formatage).

import datetime as dt


def utcnow():
    """Date/heure UTC (timezone-aware).

    Returns:
        datetime.datetime: Timestamp UTC (aware).
    """
    return dt.datetime.now(dt.timezone.utc)


def format_thousands(value: int) -> str:
    """Formate un entier avec des virgules comme séparateur de milliers (ex. 39,512,223)."""
    return f"{value:,}"
