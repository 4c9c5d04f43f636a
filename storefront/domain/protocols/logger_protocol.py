"""Structured logging port.

Implementations must emit key-value context and never log secrets (passwords,
tokens, OTP codes).

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("user_registered", user_id=str(user.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("login_failed", email=email)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add its type and text.
            **context: Structured key-value context.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event."""
        ...
