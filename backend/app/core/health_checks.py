from pymongo.errors import PyMongoError

from app.core.logging_config import get_loggers
from app.db.mongodb import get_db


async def check_mongodb() -> str:
    """
    Vérifie la connexion MongoDB

    Returns:
        "ok" si connecté, "error" sinon (le détail part dans le log d'erreurs)
    """
    try:
        await get_db().command("ping")
        return "ok"
    except PyMongoError as e:
        _, error_logger = get_loggers()
        error_logger.error(f"MongoDB health check failed: {e}")
        return "error"
