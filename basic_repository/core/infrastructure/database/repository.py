"""Generic SQLModel repository implementation."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlmodel import Session

from basic_repository.core.domain.exceptions import (
    EntityNotFoundError,
    NullArgumentError,
)
from basic_repository.core.domain.repository import P, Persistable, Repository, T
from basic_repository.core.infrastructure.database.query import QueryBuilder
from basic_repository.core.infrastructure.database.session import TransactionManager
from basic_repository.core.infrastructure.logging import RepositoryEvents


class SQLModelRepository(Repository):
    """Repository delegating to a SQLModel session and QueryBuilder.

    Each public method runs in its own transaction scope, or joins the one
    opened by ``transaction()``.
    """

    def __init__(self, transaction_manager: TransactionManager):
        self.transaction_manager = transaction_manager
        self.logger = logger

    @contextmanager
    def transaction(self) -> Generator[Session, None, None]:
        with self.transaction_manager.scope() as session:
            yield session

    def find(self, entity_type: type[T], entity_id: Any) -> T | None:
        if entity_id is None:
            return None
        with self.transaction_manager.scope() as session:
            return session.get(entity_type, entity_id)

    def find_all(self, entity_type: type[T], *where: Any) -> list[T]:
        with self.transaction_manager.scope() as session:
            return self._query(session, entity_type).where(*where).fetch()

    def save(self, entity: P) -> P:
        if entity is None:
            raise NullArgumentError("entity")
        if not isinstance(entity, Persistable):
            raise TypeError(
                f"{type(entity).__name__} does not implement Persistable"
            )

        created = entity.is_new()
        with self.transaction_manager.scope() as session:
            merged = session.merge(entity)
            # flush so generated keys are populated before returning
            session.flush()
            entity_type, entity_id = type(merged).__name__, merged.id
            self.transaction_manager.on_commit(
                lambda: RepositoryEvents.entity_saved(
                    entity_type=entity_type,
                    entity_id=entity_id,
                    created=created,
                )
            )
            return merged

    def delete(self, entity: Any) -> None:
        if entity is None:
            raise NullArgumentError("entity")
        with self.transaction_manager.scope() as session:
            self._remove(session, entity)

    def delete_by_id(self, entity_type: type[T], entity_id: Any) -> None:
        if entity_type is None:
            raise NullArgumentError("entity_type")
        if entity_id is None:
            raise NullArgumentError("entity_id")

        with self.transaction_manager.scope():
            entity = self.find(entity_type, entity_id)
            if entity is None:
                raise EntityNotFoundError(entity_type.__name__, entity_id)
            self.delete(entity)

    def exists(self, entity_type: type[T], *where: Any) -> bool:
        with self.transaction_manager.scope() as session:
            return self._query(session, entity_type).where(*where).fetch_count() > 0

    def not_exists(self, entity_type: type[T], *where: Any) -> bool:
        return not self.exists(entity_type, *where)

    def delete_all(self, entity_type: type[T]) -> None:
        with self.transaction_manager.scope():
            entities = self.find_all(entity_type)
            for entity in entities:
                self.delete(entity)
            count = len(entities)
            self.transaction_manager.on_commit(
                lambda: RepositoryEvents.entities_bulk_deleted(
                    entity_type=entity_type.__name__, count=count
                )
            )

    def _remove(self, session: Session, entity: Any) -> None:
        if entity not in session:
            entity = session.merge(entity)
        session.delete(entity)
        # flush so later lookups in the same scope no longer see the row
        session.flush()
        entity_type, entity_id = type(entity).__name__, getattr(entity, "id", None)
        self.logger.debug(f"Removed {entity_type} {entity_id}")
        self.transaction_manager.on_commit(
            lambda: RepositoryEvents.entity_deleted(
                entity_type=entity_type,
                entity_id=entity_id,
            )
        )

    @staticmethod
    def _query(session: Session, entity_type: type[T]) -> QueryBuilder[T]:
        return QueryBuilder(session, entity_type)
