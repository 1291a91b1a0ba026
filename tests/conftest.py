"""
pytest configuration and shared fixtures.

Layout:
- unit/: isolated tests (no database, collaborators mocked)
- integration/: repository against an in-memory SQLite database

Usage:
    # run everything
    uv run pytest

    # unit tests only
    uv run pytest tests/unit/
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from basic_repository.core.config import Settings
from basic_repository.core.infrastructure.database.repository import (
    SQLModelRepository,
)
from basic_repository.core.infrastructure.database.session import TransactionManager
from tests.models import Tag, User

# ============================================
# Configuration fixtures
# ============================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test environment."""
    return Settings(
        ENVIRONMENT="local",
        LOG_LEVEL="DEBUG",
        DATABASE_URL="sqlite://",
        DATABASE_ECHO=False,
    )


# ============================================
# Database fixtures
# ============================================


@pytest.fixture
def test_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with all tables created.

    StaticPool keeps the single connection alive, so every session sees the
    same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def transaction_manager(test_engine: Engine) -> TransactionManager:
    return TransactionManager(test_engine)


@pytest.fixture
def repository(transaction_manager: TransactionManager) -> SQLModelRepository:
    return SQLModelRepository(transaction_manager)


@pytest.fixture
def mock_transaction_manager() -> MagicMock:
    """Mock transaction manager (for pure unit tests)."""
    manager = MagicMock(spec=TransactionManager)
    session = MagicMock()
    manager.scope.return_value.__enter__.return_value = session
    manager.scope.return_value.__exit__.return_value = False
    manager.session = session
    return manager


# ============================================
# Domain fixtures
# ============================================


@pytest.fixture
def populated(repository: SQLModelRepository) -> list[User]:
    """Three users and two tags already stored."""
    users = [
        repository.save(User(name="Ann", email="ann@example.com")),
        repository.save(User(name="Bob", email="bob@example.com", active=False)),
        repository.save(User(name="Cid", email="cid@example.com")),
    ]
    repository.save(Tag(label="red"))
    repository.save(Tag(label="blue"))
    return users
