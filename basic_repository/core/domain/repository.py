"""Generic repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Persistable(Protocol):
    """Entity with an identifier that knows whether it was stored yet."""

    id: Any

    def is_new(self) -> bool: ...


P = TypeVar("P", bound=Persistable)


class Repository(ABC):
    """Type-agnostic CRUD and predicate queries.

    Every method takes the entity class, so a single repository instance
    serves all mapped types. Predicates are boolean expressions over the
    entity's columns and are combined with AND.
    """

    @abstractmethod
    def find(self, entity_type: type[T], entity_id: Any) -> T | None:
        """Look up an entity by primary key."""
        pass

    @abstractmethod
    def find_all(self, entity_type: type[T], *where: Any) -> list[T]:
        """Return all entities matching every predicate."""
        pass

    @abstractmethod
    def save(self, entity: P) -> P:
        """Insert or update an entity and return the persisted instance."""
        pass

    @abstractmethod
    def delete(self, entity: Any) -> None:
        """Remove an entity."""
        pass

    @abstractmethod
    def delete_by_id(self, entity_type: type[T], entity_id: Any) -> None:
        """Remove the entity with the given primary key."""
        pass

    @abstractmethod
    def exists(self, entity_type: type[T], *where: Any) -> bool:
        """Check whether at least one entity matches the predicates."""
        pass

    @abstractmethod
    def not_exists(self, entity_type: type[T], *where: Any) -> bool:
        """Check whether no entity matches the predicates."""
        pass

    @abstractmethod
    def delete_all(self, entity_type: type[T]) -> None:
        """Remove every entity of the given type, one by one."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[Any]:
        """Group several operations into one atomic unit."""
        pass
