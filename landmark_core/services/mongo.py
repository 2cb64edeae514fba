"""Shared MongoDB connection helper for the read-only store adapters."""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def connect_collection(
    mongo_uri: str, database_name: str, collection_name: str
) -> Optional[Collection]:
    """Open ``database_name.collection_name``; ``None`` when MongoDB is unreachable."""
    try:
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=2000)
        # Test connection
        client.server_info()
    except PyMongoError as exc:
        logger.warning("MongoDB not available: %s", exc)
        return None

    logger.info("MongoDB connection established for %s.%s", database_name, collection_name)
    return client[database_name][collection_name]
