"""Unified exception hierarchy for pyfoundation.

All library exceptions inherit from PyFoundationException, enabling unified
error handling: catch PyFoundationException to handle every library error,
or catch a specific subclass for targeted handling.

Categories:
- InvalidArgumentException: rejected constructor arguments and configuration
  (unsupported session clients, unknown options, invalid builtin types)

Failures raised by an injected store client (``redis.RedisError``,
``OSError``) are never wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class PyFoundationException(Exception):
    """Base exception for all pyfoundation errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_OPTIONS_UNSUPPORTED").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class InvalidArgumentException(PyFoundationException, ValueError):
    """An argument or configuration value was rejected at construction time."""
