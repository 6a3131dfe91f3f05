"""Sigil Foundation IDs -- validated identifier types.

This package provides the engine shared by every identifier type: the
identifier grammar, borrowed/owned text storage, the :class:`Identifier`
base class with its conversion surface, per-type error classes, functional
type generation and checked literals.
"""

from sigil.foundation.ids.exceptions import (
    IdentifierError,
    InvalidIdError,
    InvalidIdLiteralError,
)
from sigil.foundation.ids.factory import define_id_type
from sigil.foundation.ids.grammar import ID_GRAMMAR_DESCRIPTION, ID_PATTERN, is_valid_id
from sigil.foundation.ids.identifier import Identifier
from sigil.foundation.ids.literals import id_literal, literal_constructor
from sigil.foundation.ids.ports import ValidatedId
from sigil.foundation.ids.text import Ownership, Text, TextView, ownership_of, to_owned

__all__ = [
    "ID_GRAMMAR_DESCRIPTION",
    "ID_PATTERN",
    "Identifier",
    "IdentifierError",
    "InvalidIdError",
    "InvalidIdLiteralError",
    "Ownership",
    "Text",
    "TextView",
    "ValidatedId",
    "define_id_type",
    "id_literal",
    "is_valid_id",
    "literal_constructor",
    "ownership_of",
    "to_owned",
]
