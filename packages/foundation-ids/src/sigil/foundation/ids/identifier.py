"""Validated identifier base class.

:class:`Identifier` is the shared engine behind every identifier type.
Subclassing it stamps out a distinct, named type with its own error type;
all behaviour (validation, storage, conversion, comparison) is inherited.

Example:
    >>> from sigil.foundation.ids import Identifier, TextView
    >>> class WorkspaceId(Identifier):
    ...     '''Workspace identifier.'''
    >>> WorkspaceId("acme_prod")
    WorkspaceId('acme_prod')
    >>> WorkspaceId.parse("acme_prod") == WorkspaceId(TextView("acme_prod"))
    True
    >>> WorkspaceId.InvalidFmt.__name__
    'WorkspaceIdInvalidFmt'
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from functools import total_ordering
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic_core import core_schema

from sigil.foundation.ids import grammar
from sigil.foundation.ids.exceptions import InvalidIdError, InvalidIdLiteralError
from sigil.foundation.ids.text import Ownership, Text, TextView, ownership_of, to_owned

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

__all__ = ["Identifier", "require_python_name"]

logger = logging.getLogger(__name__)


def require_python_name(kind: str, name: str) -> str:
    """Return ``name`` if it is usable as a Python class or function name.

    Raises:
        ValueError: If ``name`` is not a valid Python identifier.
    """
    if not name.isidentifier():
        msg = f"Invalid {kind} name: {name!r} is not a valid Python identifier"
        raise ValueError(msg)
    return name


def _make_error_types(
    id_type: type[Identifier], error_name: str
) -> tuple[type[InvalidIdError], type[InvalidIdLiteralError]]:
    """Build the per-type error classes for ``id_type``.

    Each error class derives from the parent identifier type's error class,
    so ``except WorkspaceId.InvalidFmt`` also catches errors raised by
    subclasses of ``WorkspaceId``.
    """
    namespace = {
        "__module__": id_type.__module__,
        "__doc__": f"Error indicating the `{id_type.__name__}` provided is not in the correct format.",
        "id_type_name": id_type.__name__,
    }
    invalid_fmt = type(error_name, (id_type.InvalidFmt,), dict(namespace))
    invalid_fmt.__qualname__ = f"{id_type.__qualname__}.InvalidFmt"

    namespace["__doc__"] = f"Error indicating a `{id_type.__name__}` literal is not valid."
    invalid_literal = type(
        f"{error_name}Literal",
        (invalid_fmt, id_type.InvalidLiteral),
        namespace,
    )
    invalid_literal.__qualname__ = f"{id_type.__qualname__}.InvalidLiteral"
    return invalid_fmt, invalid_literal


@total_ordering
class Identifier:
    """Text value guaranteed to match the identifier grammar.

    The content is either owned (a ``str``) or borrowed (a
    :class:`~sigil.foundation.ids.text.TextView` into a longer string).
    Equality, hashing and ordering only look at the characters, never at
    the storage mode, and an identifier compares equal to a plain ``str``
    with the same characters so that dictionaries keyed by identifiers can
    be probed with strings. Identifiers of different types never compare
    equal.

    Subclass keyword arguments:
        error_name: Name of the generated error class. Defaults to
            ``<TypeName>InvalidFmt``.
        literal_name: Name of the checked literal helper for this type, see
            :func:`~sigil.foundation.ids.literals.literal_constructor`.

    Attributes:
        InvalidFmt: Error class raised by checked construction.
        InvalidLiteral: Error class raised by checked literals.
        literal_name: Name of the literal helper, if any.

    Raises:
        InvalidIdError: From checked construction when the text is invalid
            (always as the type's own ``InvalidFmt`` subclass).
        TypeError: If the candidate is not text.
    """

    __slots__ = ("_content",)

    _content: Text

    InvalidFmt: ClassVar[type[InvalidIdError]] = InvalidIdError
    InvalidLiteral: ClassVar[type[InvalidIdLiteralError]] = InvalidIdLiteralError
    literal_name: ClassVar[str | None] = None

    is_valid_id = staticmethod(grammar.is_valid_id)

    def __init_subclass__(
        cls,
        *,
        error_name: str | None = None,
        literal_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        error_name = require_python_name("error type", error_name or f"{cls.__name__}InvalidFmt")
        cls.InvalidFmt, cls.InvalidLiteral = _make_error_types(cls, error_name)
        if literal_name is not None:
            cls.literal_name = require_python_name("literal", literal_name)
        logger.debug(
            "Defined identifier type %s.%s (error type %s)",
            cls.__module__,
            cls.__qualname__,
            error_name,
        )

    # -- construction -------------------------------------------------------

    def __init__(self, candidate: Text) -> None:
        candidate = self._check_text(candidate)
        if not grammar.is_valid_id(candidate):
            raise self.InvalidFmt(to_owned(candidate))
        object.__setattr__(self, "_content", candidate)

    @staticmethod
    def _check_text(candidate: Any) -> Text:
        if isinstance(candidate, TextView):
            return candidate
        if isinstance(candidate, str):
            # Drop str subclasses (StrEnum members and the like).
            return str.__str__(candidate)
        msg = f"Identifier content must be str or TextView, got {type(candidate).__name__}"
        raise TypeError(msg)

    @classmethod
    def new(cls, candidate: Text) -> Self:
        """Return a new identifier if ``candidate`` is valid.

        The result keeps the candidate's storage mode: a ``str`` is owned, a
        :class:`~sigil.foundation.ids.text.TextView` stays borrowed.

        Most call sites building constants should use the checked literal
        helpers in :mod:`sigil.foundation.ids.literals` instead.

        Raises:
            InvalidIdError: ``cls.InvalidFmt`` holding a copy of the text.
        """
        return cls(candidate)

    @classmethod
    def try_from(cls, candidate: Text) -> Self:
        """Fallible conversion from owned text or a long-lived view.

        Same as :meth:`new`; kept as a separate name for conversion call
        sites.
        """
        return cls(candidate)

    @classmethod
    def parse(cls, text: Text) -> Self:
        """Parse user input into an owned identifier.

        Unlike :meth:`new`, the result never borrows: views are copied
        before validation.

        Raises:
            InvalidIdError: ``cls.InvalidFmt`` holding the text.
        """
        return cls(to_owned(cls._check_text(text)))

    @classmethod
    def new_unchecked(cls, candidate: Text) -> Self:
        """Return a new identifier without running the validator.

        The caller is responsible for ``candidate`` matching the grammar,
        for example because it was checked by a literal helper. Invalid text
        stored this way is not detected later.
        """
        self = cls.__new__(cls)
        object.__setattr__(self, "_content", candidate)
        return self

    # -- access -------------------------------------------------------------

    @property
    def ownership(self) -> Ownership:
        """Storage mode of the content."""
        return ownership_of(self._content)

    @property
    def is_borrowed(self) -> bool:
        return self.ownership is Ownership.BORROWED

    @property
    def is_owned(self) -> bool:
        return self.ownership is Ownership.OWNED

    def as_str(self) -> str:
        """Return the identifier text."""
        return str(self._content)

    def into_inner(self) -> Text:
        """Return the underlying text, keeping its storage mode."""
        return self._content

    def into_static(self) -> Self:
        """Return an owned copy of this identifier.

        Use before the source string of a borrowed identifier goes away. The
        content is copied, not re-validated.
        """
        return type(self).new_unchecked(to_owned(self._content))

    @contextmanager
    def edit_unchecked(self) -> Iterator[io.StringIO]:
        """Edit the content in place without validation.

        Yields a text buffer positioned after the current content. When the
        block exits normally the buffer's value becomes the (owned) content;
        if the block raises, the content is left untouched.

        Like :meth:`new_unchecked`, the caller must keep the content within
        the grammar. The hash changes with the content, so never edit an
        identifier that is stored in a set or used as a dict key.

        Example:
            >>> ws = WorkspaceId("acme")
            >>> with ws.edit_unchecked() as buf:
            ...     _ = buf.write("_prod")
            >>> ws
            WorkspaceId('acme_prod')
        """
        buffer = io.StringIO(self.as_str())
        buffer.seek(0, io.SEEK_END)
        yield buffer
        object.__setattr__(self, "_content", buffer.getvalue())

    # -- read-only str behaviour ------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; private names never delegate
        # so half-built instances (copy, unpickling) fail cleanly.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.as_str(), name)

    def __len__(self) -> int:
        return len(self._content)

    def __getitem__(self, key: int | slice) -> str:
        return self.as_str()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_str())

    def __contains__(self, item: str) -> bool:
        return item in self.as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __format__(self, format_spec: str) -> str:
        return format(self.as_str(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_str()!r})"

    # -- value semantics ----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            if type(other) is not type(self):
                return NotImplemented
            return self._content == other._content
        if isinstance(other, str | TextView):
            return self._content == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            if type(other) is not type(self):
                return NotImplemented
            return self.as_str() < other.as_str()
        if isinstance(other, str | TextView):
            return self.as_str() < str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._content)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).new_unchecked, (self.as_str(),))

    # -- pydantic -----------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_text]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(schema)
        json_schema["pattern"] = f"^{grammar.ID_PATTERN.pattern}$"
        return json_schema
