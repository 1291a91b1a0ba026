"""Repository dependency providers.

Usable directly or with ``fastapi.Depends``:

    @router.get("/users/{user_id}")
    def read_user(user_id: int, repository: Repository = Depends(get_repository)):
        return repository.find(User, user_id)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import Engine

from basic_repository.core.config import settings
from basic_repository.core.domain.repository import Repository
from basic_repository.core.infrastructure.database.repository import (
    SQLModelRepository,
)
from basic_repository.core.infrastructure.database.session import (
    TransactionManager,
    create_db_engine,
)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine(settings)


@lru_cache(maxsize=1)
def get_transaction_manager() -> TransactionManager:
    return TransactionManager(get_engine())


def get_repository(
    transaction_manager: TransactionManager = Depends(get_transaction_manager),
) -> Repository:
    return SQLModelRepository(transaction_manager)


def reset_dependencies() -> None:
    """Drop the cached engine and transaction manager."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_transaction_manager.cache_clear()
    get_engine.cache_clear()
