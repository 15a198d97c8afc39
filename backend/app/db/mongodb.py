# backend/app/db/mongodb.py
# Initialise le client MongoDB (Motor) à partir des settings et expose des helpers d'accès aux collections.

from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.core.settings import get_settings


@lru_cache
def get_client() -> AsyncIOMotorClient:
    """Client Motor unique pour le process.

    Description:
        Motor ne se connecte qu'au premier appel réseau : construire le client
        ne nécessite pas un serveur joignable.
    """
    return AsyncIOMotorClient(get_settings().mongodb_uri)


def get_db() -> AsyncIOMotorDatabase:
    """Base configurée (`settings.mongodb_db`)."""
    return get_client()[get_settings().mongodb_db]


def get_collection(name: str) -> AsyncIOMotorCollection:
    """Retourne une collection MongoDB par son nom.

    Description:
        Accède à `db[name]` et renvoie l'objet collection. Si la collection n'existe pas
        encore côté serveur, MongoDB la créera à la première insertion.

    Args:
        name (str): Nom de la collection (ex. "states").

    Returns:
        AsyncIOMotorCollection: Instance de collection MongoDB asynchrone.
    """
    return get_db()[name]


def close_client() -> None:
    """Ferme le client (arrêt de l'application)."""
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()
