"""Logging configuration with structlog integration.

Two loggers are used:
1. loguru: general debug logging
2. structlog: structured events for committed writes and rollbacks
"""

import logging
import sys
from typing import Any

import structlog
from loguru import logger

from basic_repository.core.config import Settings, settings


def setup_logging(config: Settings | None = None) -> None:
    """Configure loguru and structlog at the configured level.

    Local runs render structlog events for the console, other environments
    emit JSON lines.
    """
    config = config or settings
    level = config.LOG_LEVEL.upper()

    if config.ENVIRONMENT == "local":
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level, logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    logger.remove()
    logger.add(sys.stderr, level=level)

    logger.info(f"Logging configured with level: {level}")


# ============================================================================
# Repository event logger
# ============================================================================


class RepositoryEvents:
    """Structured log events emitted by the repository.

    Write events are emitted from commit callbacks, so they only describe
    changes that reached the database.

    Usage:
        from basic_repository.core.infrastructure.logging import RepositoryEvents

        RepositoryEvents.entity_saved(entity_type="User", entity_id=1, created=True)
    """

    _log = structlog.get_logger("repository.events")

    @classmethod
    def entity_saved(
        cls,
        entity_type: str,
        entity_id: Any,
        created: bool,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "entity_saved",
            event_type="save",
            entity_type=entity_type,
            entity_id=entity_id,
            created=created,
            **extra,
        )

    @classmethod
    def entity_deleted(
        cls,
        entity_type: str,
        entity_id: Any,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "entity_deleted",
            event_type="delete",
            entity_type=entity_type,
            entity_id=entity_id,
            **extra,
        )

    @classmethod
    def entities_bulk_deleted(
        cls,
        entity_type: str,
        count: int,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "entities_bulk_deleted",
            event_type="delete_all",
            entity_type=entity_type,
            count=count,
            **extra,
        )

    @classmethod
    def transaction_rolled_back(
        cls,
        error: str,
        **extra: Any,
    ) -> None:
        cls._log.warning(
            "transaction_rolled_back",
            event_type="rollback",
            error=error,
            **extra,
        )
