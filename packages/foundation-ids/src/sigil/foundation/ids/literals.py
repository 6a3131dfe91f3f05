"""Checked identifier literals.

Literal text is validated once per identifier type, when first seen
(normally at module import). Every call then builds a fresh value through
:meth:`Identifier.new_unchecked`, so editing one constant never leaks into
another. A bad literal in a module fails the import instead of a later
request.

Example:
    >>> from sigil.foundation.ids import Identifier
    >>> from sigil.foundation.ids.literals import id_literal, literal_constructor
    >>> class WorkspaceId(Identifier, literal_name="workspace_id"): ...
    >>> DEFAULT_WORKSPACE = id_literal(WorkspaceId, "default")
    >>> workspace_id = literal_constructor(WorkspaceId)
    >>> workspace_id("default") == DEFAULT_WORKSPACE
    True
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, TypeVar

from sigil.foundation.ids.identifier import Identifier

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["id_literal", "literal_constructor"]

logger = logging.getLogger(__name__)

IdT = TypeVar("IdT", bound=Identifier)

LITERAL_CHECK_CACHE_SIZE = 1024

@lru_cache(maxsize=LITERAL_CHECK_CACHE_SIZE)
def _check_literal(id_type: type[Identifier], text: str) -> None:
    if not id_type.is_valid_id(text):
        raise id_type.InvalidLiteral(text)
    logger.debug("Checked %s literal %r", id_type.__name__, text)

def id_literal(id_type: type[IdT], text: str) -> IdT:
    """Return a checked identifier constant.

    Validation results are cached per ``(id_type, text)`` pair; the returned
    value is always a new instance holding an owned ``str``.

    Args:
        id_type: Identifier type to build.
        text: Literal text. Must be a ``str``; subclasses such as ``StrEnum``
            members are stored as plain ``str``.

    Returns:
        The identifier value.

    Raises:
        InvalidIdLiteralError: ``id_type.InvalidLiteral`` if ``text`` does
            not match the grammar.
        TypeError: If ``text`` is not a ``str``.
    """
    if not isinstance(text, str):
        msg = f"Identifier literals must be str, got {type(text).__name__}"
        raise TypeError(msg)
    text = str.__str__(text)
    _check_literal(id_type, text)
    return id_type.new_unchecked(text)


def literal_constructor(id_type: type[IdT]) -> Callable[[str], IdT]:
    """Return a literal helper bound to ``id_type``.

    The helper is named after ``id_type.literal_name`` when the type
    declares one.

    Example:
        >>> profile_id = literal_constructor(ProfileId)
        >>> profile_id("default")
        ProfileId('default')
    """

    def build(text: str) -> IdT:
        return id_literal(id_type, text)

    name = id_type.literal_name or f"{id_type.__name__}_literal"
    build.__name__ = name
    build.__qualname__ = name
    build.__doc__ = f"Return a checked `{id_type.__name__}` constant."
    return build
