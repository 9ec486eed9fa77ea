"""
Structured error types for the guestbook.

Every failure the core can produce is one of a small set of typed errors.
The repository and the rendering layer raise them; only the HTTP boundary
turns them into status codes and user-visible messages.

Manifesto:
    - **Typed kinds:** One class per failure kind (database, write, read, render)
    - **Never swallowed:** Errors travel to the boundary unchanged
    - **Chained causes:** The underlying store/template exception is kept as ``cause``
    - **Boundary mapping:** ``status_code`` and ``public_message`` live on the error,
      the mapping to a response lives in ``guestbook.api.middleware.errors``

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                     GuestbookError                        │
        │            (category, context, cause)                     │
        ├──────────────────────────────────────────────────────────┤
        │  DatabaseError   WriteError   ReadError   RenderError     │
        │  (DATABASE)      (WRITE)      (READ)      (RENDER)        │
        │                                                           │
        │  ConfigError                                              │
        │  (CONFIG)                                                 │
        └──────────────────────────────────────────────────────────┘

Examples:
    Wrapping a store failure:

    >>> import sqlite3
    >>> try:
    ...     raise sqlite3.OperationalError("no such table: record")
    ... except sqlite3.Error as e:
    ...     err = wrap_database_error(e, operation="list")
    >>> err.public_message
    'no such table: record'
    >>> err.context.operation
    'list'

Tags:
    error-handling, exception-hierarchy, guestbook, boundary-mapping
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories used for logging and boundary mapping.

    Attributes:
        DATABASE: Any failure from the store layer (connect, execute, schema)
        WRITE: The append path could not be carried out as expected
        READ: The listing path failed after a successful fetch
        RENDER: A template could not be rendered
        CONFIG: Invalid or missing configuration
        INTERNAL: Bugs, unexpected state
    """

    DATABASE = "DATABASE"
    WRITE = "WRITE"
    READ = "READ"
    RENDER = "RENDER"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        operation: Repository or render operation that failed (``append``, ``list``, ...)
        location: Store location the operation ran against
        template: Template name, for render failures
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    location: str | None = None
    template: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "location", "template"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class GuestbookError(Exception):
    """
    Base exception for all guestbook errors.

    Subclasses set ``default_category`` and ``default_public_message``.
    Every kind maps to HTTP 500 at the boundary; the kinds differ in the
    message callers see.

    Examples:
        >>> error = GuestbookError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(operation="append").context.operation
        'append'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_public_message: str | None = None
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    @property
    def public_message(self) -> str:
        """Message returned to HTTP callers."""
        if self.default_public_message is not None:
            return self.default_public_message
        return self.message

    def with_context(self, **kwargs: Any) -> GuestbookError:
        """
        Add context to this error (fluent API).

        Usage:
            raise RenderError("bad template").with_context(template="entry.html")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class DatabaseError(GuestbookError):
    """Store-layer failure. The underlying store message is surfaced to callers."""

    default_category = ErrorCategory.DATABASE


class WriteError(GuestbookError):
    """The append path could not invoke the repository as expected."""

    default_category = ErrorCategory.WRITE
    default_public_message = "fail to write"

    def __init__(self, message: str = "fail to write", **kwargs: Any):
        super().__init__(message, **kwargs)


class ReadError(GuestbookError):
    """The listing path failed, typically a render failure after a successful fetch."""

    default_category = ErrorCategory.READ
    default_public_message = "fail to read"

    def __init__(self, message: str = "fail to read", **kwargs: Any):
        super().__init__(message, **kwargs)


class RenderError(GuestbookError):
    """A template could not be rendered."""

    default_category = ErrorCategory.RENDER

    @property
    def public_message(self) -> str:
        return f"fail to render: {self.message}"


class ConfigError(GuestbookError):
    """Invalid configuration, e.g. an unsupported store location."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def wrap_database_error(
    error: Exception,
    *,
    operation: str | None = None,
    location: str | None = None,
) -> DatabaseError:
    """Build a :class:`DatabaseError` that carries the store's own message."""
    return DatabaseError(
        str(error) or error.__class__.__name__,
        context=ErrorContext(operation=operation, location=location),
        cause=error,
    )


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, GuestbookError):
        return error.category
    if isinstance(error, sqlite3.Error):
        return ErrorCategory.DATABASE
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "GuestbookError",
    "DatabaseError",
    "WriteError",
    "ReadError",
    "RenderError",
    "ConfigError",
    "wrap_database_error",
    "categorize_error",
]
