from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from healthhub.config import get_settings
from healthhub.utils.logger import get_logger

logger = get_logger("database")

_mongo_client: AsyncIOMotorClient | None = None


async def init_db(
    client: AsyncIOMotorClient | None = None,
    database_name: str | None = None,
) -> None:
    """Initialize MongoDB (Beanie) and register document models.

    `client` lets scripts and tests hand in an already built Motor-compatible
    client; otherwise one is created from MONGODB_URI. `database_name`
    overrides the configured database.
    """
    global _mongo_client
    settings = get_settings()
    _mongo_client = client or AsyncIOMotorClient(settings.MONGODB_URI)
    database_name = database_name or settings.database_name
    from healthhub.models import DOCUMENT_MODELS

    await init_beanie(
        database=_mongo_client[database_name],
        document_models=DOCUMENT_MODELS,
    )
    logger.info(f"Beanie initialized on database '{database_name}'")


def get_client() -> AsyncIOMotorClient:
    if _mongo_client is None:
        raise RuntimeError("Database is not initialized; call init_db() first")
    return _mongo_client


async def close_db() -> None:
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def ping_db() -> bool:
    """Check MongoDB connectivity."""
    if not _mongo_client:
        return False
    try:
        await _mongo_client.admin.command("ping")
        return True
    except Exception:
        logger.warning("MongoDB ping failed", exc_info=True)
        return False
