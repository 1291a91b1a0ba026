"""Generic SQLModel repository."""

from basic_repository.core.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    NullArgumentError,
)
from basic_repository.core.domain.repository import Persistable, Repository
from basic_repository.core.infrastructure.database.base_model import BaseModel
from basic_repository.core.infrastructure.database.query import QueryBuilder
from basic_repository.core.infrastructure.database.repository import (
    SQLModelRepository,
)
from basic_repository.core.infrastructure.database.session import (
    TransactionManager,
    create_db_engine,
)

__all__ = [
    "BaseModel",
    "DomainException",
    "EntityNotFoundError",
    "NullArgumentError",
    "Persistable",
    "QueryBuilder",
    "Repository",
    "SQLModelRepository",
    "TransactionManager",
    "create_db_engine",
]
