"""Borrowed and owned text backing identifier values.

An identifier either *owns* its text (a plain ``str``) or *borrows* a span
of a larger string through a :class:`TextView`. Borrowing avoids slicing,
and therefore copying, when the identifier is cut out of text that is kept
alive anyway (a config file, a request path, a token stream).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

__all__ = ["Ownership", "Text", "TextView", "ownership_of", "to_owned"]


class Ownership(StrEnum):
    """Storage mode of identifier content."""

    BORROWED = "borrowed"
    OWNED = "owned"


@dataclass(frozen=True, slots=True)
class TextView:
    """Zero-copy view over ``source[start:stop]``.

    Bounds follow slice conventions but must already be in range; negative
    indices are not accepted.

    Attributes:
        source: The string that owns the characters.
        start: Index of the first viewed character.
        stop: Index one past the last viewed character. ``None`` means the
            end of ``source``; it is normalised to ``len(source)``.

    Raises:
        ValueError: If the bounds fall outside ``source`` or are inverted.

    Example:
        >>> path = "/workspaces/acme_prod/profiles"
        >>> view = TextView(path, 12, 21)
        >>> str(view)
        'acme_prod'
    """

    source: str
    start: int = 0
    stop: int = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        length = len(self.source)
        stop = length if self.stop is None else self.stop
        if not (0 <= self.start <= stop <= length):
            msg = (
                f"Invalid text view bounds [{self.start}:{self.stop}] "
                f"for source of length {length}"
            )
            raise ValueError(msg)
        object.__setattr__(self, "stop", stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __str__(self) -> str:
        return self.source[self.start : self.stop]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return len(self) == len(other) and str(self) == str(other)
        if isinstance(other, str):
            return len(self) == len(other) and self.source.startswith(other, self.start)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def to_owned(self) -> str:
        """Copy the viewed characters into an independent string."""
        return str(self)


Text: TypeAlias = str | TextView
"""Identifier content: owned ``str`` or borrowed :class:`TextView`."""


def ownership_of(text: Text) -> Ownership:
    """Return the storage mode of ``text``."""
    if isinstance(text, TextView):
        return Ownership.BORROWED
    return Ownership.OWNED


def to_owned(text: Text) -> str:
    """Return ``text`` as an independent ``str``.

    Plain strings are immutable and already owned, so they are returned
    as-is.
    """
    if isinstance(text, TextView):
        return text.to_owned()
    return text
