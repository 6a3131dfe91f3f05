"""Identifier exception hierarchy.

Every identifier type gets its own subclass of :class:`InvalidIdError`,
generated alongside the type (see :mod:`sigil.foundation.ids.factory`).
Exceptions carry a machine-readable error code and structured context so
call sites can log them consistently.

Example:
    >>> from sigil.foundation.ids import Identifier
    >>> class WorkspaceId(Identifier): ...
    >>> WorkspaceId("acme corp")
    Traceback (most recent call last):
    ...
    WorkspaceIdInvalidFmt: `acme corp` is not a valid `WorkspaceId`.
    `WorkspaceId`s must contain only letters, numbers, or underscores.
"""

from __future__ import annotations

from typing import Any, ClassVar

from sigil.foundation.ids.grammar import ID_GRAMMAR_DESCRIPTION

__all__ = [
    "IdentifierError",
    "InvalidIdError",
    "InvalidIdLiteralError",
]


class IdentifierError(Exception):
    """Base class for all identifier errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (identifier type, value).
    """

    error_code: str = "IDENTIFIER_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize identifier error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class InvalidIdError(IdentifierError, ValueError):
    """Raised when text does not satisfy the identifier grammar.

    Produced only by checked construction and checked parsing. Subclasses
    ``ValueError`` so generic parsing code and pydantic validators treat it
    as an ordinary value error.

    The rejected text is always stored as an independent ``str``, so the
    error stays usable after a borrowed candidate's source is gone.

    Attributes:
        error_code: "INVALID_ID" (class constant).
        id_type_name: Name of the identifier type that rejected the value.
        value: The rejected text.
    """

    error_code: str = "INVALID_ID"
    id_type_name: ClassVar[str] = "Identifier"

    def __init__(self, value: str) -> None:
        """Initialize invalid identifier error.

        Args:
            value: The rejected text, already copied into a ``str``.
        """
        self.value = value
        type_name = self.id_type_name
        message = (
            f"`{value}` is not a valid `{type_name}`.\n"
            f"`{type_name}`s {ID_GRAMMAR_DESCRIPTION}."
        )
        super().__init__(message, {"id_type": type_name, "value": value})

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.value,))


class InvalidIdLiteralError(InvalidIdError):
    """Raised when a checked literal does not satisfy the grammar.

    Literals are built once, usually at module import, so this error
    surfaces as an import-time failure rather than a request-time one.

    Attributes:
        error_code: "INVALID_ID_LITERAL" (class constant).
    """

    error_code: str = "INVALID_ID_LITERAL"
