"""Configuration du système de logging centralisé."""

import glob
import logging
import logging.handlers
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from app.core.settings import get_settings

GENERIC_LOGGER_NAME = "states_api.generic"
ERROR_LOGGER_NAME = "states_api.errors"


def _rotating_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    logs_dir: str | Path = "logs", retention_days: int = 30
) -> tuple[logging.Logger, logging.Logger]:
    """Configure le système de logging avec rotation quotidienne.

    Args:
        logs_dir: Dossier des fichiers de log.
        retention_days: Durée de conservation des fichiers tournés.

    Returns:
        tuple: (logger_generic, logger_errors)
    """
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    cleanup_old_logs(logs_dir, retention_days=retention_days)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Logger générique (INFO+) : requêtes HTTP, démarrage, mutations
    generic_logger = logging.getLogger(GENERIC_LOGGER_NAME)
    generic_logger.setLevel(logging.INFO)
    if not generic_logger.handlers:  # Éviter les doublons
        generic_logger.addHandler(_rotating_handler(logs_dir / "generic.log", formatter))

    # Logger erreurs (ERROR+) : échecs MongoDB, exceptions non capturées
    error_logger = logging.getLogger(ERROR_LOGGER_NAME)
    error_logger.setLevel(logging.ERROR)
    if not error_logger.handlers:
        error_logger.addHandler(_rotating_handler(logs_dir / "errors.log", formatter))

    return generic_logger, error_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> None:
    """Supprime les logs tournés plus anciens que retention_days.

    Les fichiers tournés portent le suffixe `.YYYY-MM-DD` ajouté par
    `TimedRotatingFileHandler`.
    """
    cutoff_str = (datetime.now() - timedelta(days=retention_days)).strftime("%Y-%m-%d")

    for pattern in (f"{logs_dir}/generic.log.*", f"{logs_dir}/errors.log.*"):
        for file_path in glob.glob(pattern):
            date_part = file_path.rsplit(".", 1)[-1]
            if len(date_part) != 10 or date_part.count("-") != 2:
                continue
            if date_part < cutoff_str:
                try:
                    os.remove(file_path)
                except OSError:
                    continue


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger]] = None


def get_loggers() -> tuple[logging.Logger, logging.Logger]:
    """Retourne les loggers configurés (singleton)."""
    global _loggers
    if _loggers is None:
        settings = get_settings()
        _loggers = setup_logging(settings.log_dir, settings.log_retention_days)
    return _loggers
