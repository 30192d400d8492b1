import logging

from motor.motor_asyncio import AsyncIOMotorClient
from ..config import get_settings
from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class MongoDB:
    client: AsyncIOMotorClient = None
    db = None

db = MongoDB()

def get_database():
    """
    Retourne l'instance de la base de données.
    Initialise la connexion si nécessaire (le client Motor se connecte paresseusement).
    """
    if db.client is None:
        settings = get_settings()
        if not settings.database_url:
            raise ConfigurationError("DATABASE_URL is required for the mongo storage backend")
        db.client = AsyncIOMotorClient(settings.database_url)
        db.db = db.client[settings.mongo_db_name]
        logger.info(f"[Mongo] Connected to database: {settings.mongo_db_name}")

    return db.db


def get_collection():
    """Collection holding one document per video, keyed by video id."""
    return get_database()[get_settings().mongo_collection]


async def ensure_indexes():
    """
    Crée les index nécessaires pour la collection des vidéos.
    """
    collection = get_collection()

    # _id (video id) is indexed by MongoDB; status drives report listing
    await collection.create_index([("status", 1)], name="status_index")
    await collection.create_index([("updatedAt", -1)], name="updated_at_index")

    logger.info("[Mongo] Indexes ensured: status, updatedAt")


def close_mongo_connection():
    """Ferme la connexion MongoDB."""
    if db.client:
        db.client.close()
        db.client = None
        db.db = None
        logger.info("[Mongo] Connection closed")
