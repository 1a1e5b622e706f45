"""
Startup validation for the Hackernews application.
"""

from __future__ import annotations

from typing import Any

from .config import Settings, is_production, settings
from .database.connection import check_database_connection
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection(client: Any) -> dict[str, Any]:
    """
    Validate that the document store is reachable.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await check_database_connection(client)

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


async def validate_startup_configuration(
    client: Any, config: Settings | None = None
) -> dict[str, Any]:
    """
    Run all startup checks.

    Raises:
        ValidationError: if a check fails in a production environment
    """
    config = config or settings

    database_results = await validate_database_connection(client)
    results = {
        "overall_valid": database_results["valid"],
        "database": database_results,
        "environment": config.environment,
    }

    if not results["overall_valid"] and is_production(config):
        raise ValidationError("Critical configuration validation failed in production")

    return results
