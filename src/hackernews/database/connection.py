"""
Document store connection management
"""

from typing import Any

from pymongo import AsyncMongoClient

from ..config import Settings, settings
from ..logging import get_logger

logger = get_logger(__name__)


def create_mongo_client(config: Settings | None = None) -> AsyncMongoClient:
    """Create the process-wide MongoDB client.

    The client owns its connection pool; create it once at startup and pass
    it to whatever needs the store.
    """
    config = config or settings
    client: AsyncMongoClient = AsyncMongoClient(
        config.mongodb_url,
        serverSelectionTimeoutMS=config.mongodb_timeout_ms,
    )
    logger.info(
        "MongoDB client created",
        database=config.mongodb_database,
        collection=config.mongodb_collection,
    )
    return client


def get_database(client: Any, config: Settings | None = None) -> Any:
    """Get the configured database from a client."""
    config = config or settings
    return client[config.mongodb_database]


def get_links_collection(client: Any, config: Settings | None = None) -> Any:
    """Get the links collection from a client."""
    config = config or settings
    return get_database(client, config)[config.mongodb_collection]


async def check_database_connection(client: Any) -> tuple[bool, str | None]:
    """
    Ping the store and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        await client.admin.command("ping")
        return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Connection refused" in error_str or "ServerSelectionTimeout" in error_type:
            return False, (
                f"Cannot connect to MongoDB: {error_str}\n"
                f"The database server appears to be down or unreachable.\n"
                f"Please check that MongoDB is running and HACKERNEWS_MONGODB_URL is correct."
            )
        elif "Authentication failed" in error_str or "OperationFailure" in error_type:
            return False, (
                f"MongoDB authentication failed: {error_str}\n"
                f"Please check the credentials in HACKERNEWS_MONGODB_URL."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


async def close_mongo_client(client: Any) -> None:
    """Close a client created by ``create_mongo_client``."""
    await client.close()
    logger.info("MongoDB client closed")
