"""
Database module for the Hackernews backend
"""

from .connection import (
    check_database_connection,
    close_mongo_client,
    create_mongo_client,
    get_database,
    get_links_collection,
)

__all__ = [
    "check_database_connection",
    "close_mongo_client",
    "create_mongo_client",
    "get_database",
    "get_links_collection",
]
