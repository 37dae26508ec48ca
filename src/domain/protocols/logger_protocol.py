"""LoggerProtocol definition for structured logging.

Logging is backend-agnostic: callers pass a short event name plus key-value
context, never pre-formatted strings. Implementations must keep secrets
(passwords, password hashes) out of log output.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("site_created", site_id=str(site.id), alias_id=site.alias_id)

    # Scoped logging with bind()
    seed_logger = logger.bind(component="data_seeder")
    seed_logger.info("seeding_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the standard five levels plus context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event name or short message.
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return a new logger with permanently bound context.

        The original logger is left unchanged.

        Args:
            **context: Context included in every subsequent log call.

        Returns:
            New logger instance with bound context.
        """
        ...
