"""
Tests for startup validation and the database connection check
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from hackernews.config import Settings
from hackernews.database.connection import check_database_connection
from hackernews.validation import ValidationError, validate_startup_configuration


def make_client(command: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.admin.command = command
    return client


class TestCheckDatabaseConnection:
    """Tests for check_database_connection."""

    @pytest.mark.asyncio
    async def test_ping_succeeds(self):
        command = AsyncMock(return_value={"ok": 1.0})

        success, error = await check_database_connection(make_client(command))

        assert success is True
        assert error is None
        command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_unreachable_server(self):
        client = make_client(
            AsyncMock(side_effect=ServerSelectionTimeoutError("localhost:27017: Connection refused"))
        )

        success, error = await check_database_connection(client)

        assert success is False
        assert "Cannot connect to MongoDB" in error
        assert "HACKERNEWS_MONGODB_URL" in error

    @pytest.mark.asyncio
    async def test_authentication_failure(self):
        client = make_client(AsyncMock(side_effect=OperationFailure("Authentication failed.")))

        success, error = await check_database_connection(client)

        assert success is False
        assert error.startswith("MongoDB authentication failed")

    @pytest.mark.asyncio
    async def test_other_error(self):
        client = make_client(AsyncMock(side_effect=RuntimeError("boom")))

        success, error = await check_database_connection(client)

        assert success is False
        assert error == "Database connection error (RuntimeError): boom"


class TestValidateStartupConfiguration:
    """Tests for validate_startup_configuration."""

    @pytest.mark.asyncio
    async def test_reachable_store(self):
        client = make_client(AsyncMock(return_value={"ok": 1.0}))

        results = await validate_startup_configuration(client, Settings(environment="development"))

        assert results["overall_valid"] is True
        assert results["database"]["connection_info"]["status"] == "connected"

    @pytest.mark.asyncio
    async def test_unreachable_store_in_development_reports(self):
        client = make_client(AsyncMock(side_effect=ServerSelectionTimeoutError("refused")))

        results = await validate_startup_configuration(client, Settings(environment="development"))

        assert results["overall_valid"] is False
        assert len(results["database"]["errors"]) == 1

    @pytest.mark.asyncio
    async def test_unreachable_store_in_production_raises(self):
        client = make_client(AsyncMock(side_effect=ServerSelectionTimeoutError("refused")))

        with pytest.raises(ValidationError):
            await validate_startup_configuration(client, Settings(environment="production"))
