"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from hackernews.config import Settings
from hackernews.links import LinkRepository


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an isolated test database."""
    return Settings(
        mongodb_database="hackernews_test",
        mongodb_collection="links",
        environment="test",
        debug=False,
    )


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """In-memory async MongoDB client."""
    return AsyncMongoMockClient()


@pytest.fixture
def links_collection(mongo_client: AsyncMongoMockClient, test_settings: Settings) -> Any:
    return mongo_client[test_settings.mongodb_database][test_settings.mongodb_collection]


@pytest.fixture
def link_repository(links_collection: Any) -> LinkRepository:
    return LinkRepository(links_collection)


@pytest.fixture
def mock_info(link_repository: LinkRepository) -> MagicMock:
    """Create a mock GraphQL info object carrying the repository."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(),
        "link_repository": link_repository,
    }
    return info


@pytest.fixture
def api_client(
    monkeypatch: pytest.MonkeyPatch,
    test_settings: Settings,
    mongo_client: AsyncMongoMockClient,
) -> Generator[TestClient, None, None]:
    """TestClient for an app wired to the in-memory store, lifespan included."""
    from hackernews.api.app import create_app

    monkeypatch.setattr(
        "hackernews.validation.validate_startup_configuration",
        AsyncMock(return_value={"overall_valid": True, "database": {"errors": []}}),
    )

    app = create_app(test_settings, mongo_client=mongo_client)
    with TestClient(app) as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
