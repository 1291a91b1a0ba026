"""Predicate query builder over a SQLModel session."""

from typing import Any, Generic, Self, TypeVar

from sqlalchemy import func
from sqlmodel import Session, select

T = TypeVar("T")


class QueryBuilder(Generic[T]):
    """Query rooted at one entity type.

    Predicates added with ``where`` accumulate and are combined with AND.

    Usage:
        QueryBuilder(session, User).where(User.name == "Ann").fetch()
    """

    def __init__(self, session: Session, entity_type: type[T]):
        self.session = session
        self.entity_type = entity_type
        self._where: list[Any] = []

    def where(self, *predicates: Any) -> Self:
        self._where.extend(p for p in predicates if p is not None)
        return self

    def fetch(self) -> list[T]:
        """Materialize all matching entities."""
        statement = select(self.entity_type).where(*self._where)
        return list(self.session.exec(statement).all())

    def fetch_count(self) -> int:
        """Count matching rows without loading them."""
        statement = (
            select(func.count()).select_from(self.entity_type).where(*self._where)
        )
        return self.session.exec(statement).one()
