"""Port interface for validated identifiers.

Code that accepts "any identifier type" should depend on this protocol
rather than on :class:`~sigil.foundation.ids.Identifier`, so that other
implementations (for example an ORM column wrapper) can satisfy it.

Example:
    >>> from sigil.foundation.ids.ports import ValidatedId
    >>> def storage_key(prefix: str, ident: ValidatedId) -> str:
    ...     return f"{prefix}:{ident.as_str()}"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sigil.foundation.ids.text import Ownership, Text


@runtime_checkable
class ValidatedId(Protocol):
    """Read and conversion surface shared by every identifier type.

    The protocol is runtime_checkable to enable isinstance() verification
    in tests and at plugin boundaries.
    """

    @property
    def ownership(self) -> Ownership:
        """Storage mode of the content."""
        ...

    def as_str(self) -> str:
        """Return the identifier text."""
        ...

    def into_inner(self) -> Text:
        """Return the underlying text, keeping its storage mode."""
        ...

    def into_static(self) -> ValidatedId:
        """Return an owned copy of the identifier."""
        ...
