"""Database engine and transaction scope management."""

from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from basic_repository.core.config import Settings, settings
from basic_repository.core.infrastructure.health import (
    DatabaseHealthResult,
    HealthStatus,
)
from basic_repository.core.infrastructure.logging import RepositoryEvents

_ON_COMMIT = "on_commit_callbacks"


def create_db_engine(config: Settings | None = None) -> Engine:
    """Create an engine from settings."""
    config = config or settings
    return create_engine(config.DATABASE_URL, **config.engine_options)


class TransactionManager:
    """Hands out transaction scopes bound to one engine.

    The first scope entered in a context opens a session and a transaction.
    Scopes entered while it is active join it and share its session; only the
    outermost scope commits, and any exception escaping it rolls back
    everything done inside.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            engine,
            class_=Session,
            expire_on_commit=False,
        )
        self._current: ContextVar[Session | None] = ContextVar(
            f"transaction_session_{id(self)}", default=None
        )

    @property
    def current_session(self) -> Session | None:
        """Session of the active scope, if any."""
        return self._current.get()

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the outermost active scope has committed.

        Callbacks of a scope that rolls back are discarded.
        """
        session = self._current.get()
        if session is None:
            raise RuntimeError("on_commit requires an active transaction scope")
        session.info.setdefault(_ON_COMMIT, []).append(callback)

    @contextmanager
    def scope(self) -> Generator[Session, None, None]:
        """Acquire a transactional session.

        Usage:
            with manager.scope() as session:
                session.add(entity)
        """
        active = self._current.get()
        if active is not None:
            yield active
            return

        session = self._session_factory()
        token = self._current.set(session)
        try:
            with session.begin():
                yield session
        except Exception as e:
            logger.warning(f"Transaction rolled back: {e!r}")
            RepositoryEvents.transaction_rolled_back(error=repr(e))
            raise
        else:
            for callback in session.info.pop(_ON_COMMIT, []):
                callback()
        finally:
            self._current.reset(token)
            session.close()


def create_all(engine: Engine) -> None:
    """Create tables for every SQLModel table class imported so far."""
    SQLModel.metadata.create_all(engine)


def init_db(engine: Engine) -> None:
    """Verify the connection and create missing tables."""
    try:
        with engine.begin() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection established successfully")
    except Exception as e:
        logger.error(f"Failed to connect to database: {e}")
        raise

    create_all(engine)


def check_db_health(engine: Engine) -> DatabaseHealthResult:
    """Run a trivial query and report connectivity."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return DatabaseHealthResult(
            status=HealthStatus.OK,
            connected=True,
            dialect=engine.dialect.name,
        )
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return DatabaseHealthResult(
            status=HealthStatus.ERROR,
            connected=False,
            dialect=engine.dialect.name,
            error=str(e),
        )
