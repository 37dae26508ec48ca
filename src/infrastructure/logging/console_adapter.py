"""Console logging adapter.

Writes structured events to stdout through structlog. The renderer is the only
thing that differs between environments:

- development: coloured key=value lines for humans
- everything else: one JSON object per line

Usage:
    logger = ConsoleAdapter(use_json=True, level="INFO", app="Seedbed")
    logger.bind(component="data_seeder").info("site_created", alias_id="s1")

Does NOT inherit from LoggerProtocol (PEP 544 structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _resolve_level(level: str) -> int:
    """Map a level name to its numeric value, INFO when unknown."""
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _build_processors(use_json: bool) -> list[structlog.types.Processor]:
    """Processor chain shared by every adapter instance."""
    renderer: structlog.types.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        renderer,
    ]


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    """Flatten an exception into error_type/error_message fields."""
    if error is None:
        return context
    return {
        **context,
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


class ConsoleAdapter:
    """Structured stdout logger implementing LoggerProtocol.

    Configuring an adapter reconfigures structlog for the process, so the
    container creates one and shares it (see get_logger()).
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        **static_context: Any,
    ) -> None:
        """Configure structlog and bind static context.

        Args:
            use_json: JSON lines when True, coloured console when False.
            level: Minimum level name. Unknown names fall back to INFO.
            **static_context: Fields added to every event (e.g. app, environment).
        """
        structlog.configure(
            processors=_build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        logger = structlog.get_logger()
        self._logger = logger.bind(**static_context) if static_context else logger

    @classmethod
    def _wrap(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug event."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info event."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning event."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message: Event name.
            error: Optional exception, logged as error_type and error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event (same fields as error())."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events carry the given context.

        The structlog configuration is not touched.
        """
        return self._wrap(self._logger.bind(**context))
