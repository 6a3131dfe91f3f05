"""Identifier grammar.

Every identifier type built on :class:`~sigil.foundation.ids.Identifier`
shares a single, fixed grammar: a non-empty run of ASCII letters, ASCII
digits and underscores.

Example:
    >>> from sigil.foundation.ids.grammar import is_valid_id
    >>> is_valid_id("my_id")
    True
    >>> is_valid_id("invalid id")
    False
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sigil.foundation.ids.text import Text

__all__ = ["ID_GRAMMAR_DESCRIPTION", "ID_PATTERN", "is_valid_id"]

# Spelled out rather than ``\w`` so Unicode letters and digits never match.
ID_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9_]+")

ID_GRAMMAR_DESCRIPTION = "must contain only letters, numbers, or underscores"


def is_valid_id(candidate: Text) -> bool:
    """Return whether ``candidate`` is a legal identifier.

    A candidate is legal when it is non-empty and every character is an
    ASCII letter, an ASCII digit, or ``_``. There is no rule about the first
    character: ``"_"`` and ``"123"`` are both legal.

    Borrowed views are checked in place over their bounds, so no slice of
    the source string is created.

    Args:
        candidate: Plain string or :class:`~sigil.foundation.ids.text.TextView`.

    Returns:
        True if the candidate matches the grammar, False otherwise.
    """
    if isinstance(candidate, str):
        return ID_PATTERN.fullmatch(candidate) is not None
    return ID_PATTERN.fullmatch(candidate.source, candidate.start, candidate.stop) is not None
