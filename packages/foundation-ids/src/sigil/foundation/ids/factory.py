"""Functional generation of identifier types.

Most identifier types are declared with a class statement::

    class WorkspaceId(Identifier):
        '''Workspace identifier.'''

:func:`define_id_type` does the same from data, for call sites that build
many near-identical types in a loop or from configuration.

Example:
    >>> from sigil.foundation.ids.factory import define_id_type
    >>> ProfileId = define_id_type("ProfileId", literal_name="profile_id")
    >>> ProfileId("default")
    ProfileId('default')
    >>> ProfileId.InvalidFmt.__name__
    'ProfileIdInvalidFmt'
"""

from __future__ import annotations

import sys
import types
from typing import Any

from sigil.foundation.ids.identifier import Identifier, require_python_name

__all__ = ["define_id_type"]


def _default_doc(name: str, literal_name: str | None) -> str:
    doc = f"Validated `{name}` identifier."
    if literal_name is not None:
        doc += (
            f"\n\nBuild constants with the `{literal_name}` literal helper, which"
            " checks the text once and caches the value."
        )
    return doc


def define_id_type(
    name: str,
    error_name: str | None = None,
    *,
    literal_name: str | None = None,
    module: str | None = None,
    doc: str | None = None,
) -> type[Identifier]:
    """Create a new identifier type.

    The returned class behaves exactly like a hand-written
    ``class Name(Identifier)`` declaration: it has its own ``InvalidFmt``
    and ``InvalidLiteral`` error classes and the full conversion surface.

    Args:
        name: Class name of the identifier type.
        error_name: Class name of the generated error type. Defaults to
            ``<name>InvalidFmt``.
        literal_name: Name of the checked literal helper for the type.
        module: Value for ``__module__``. Defaults to the caller's module so
            the type pickles by reference, as ``collections.namedtuple``
            does.
        doc: Class docstring. A short default is generated when omitted.

    Returns:
        The new identifier class.

    Raises:
        ValueError: If any of the names is not a valid Python identifier.
    """
    require_python_name("identifier type", name)
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")

    kwds: dict[str, Any] = {"error_name": error_name, "literal_name": literal_name}

    def exec_body(namespace: dict[str, Any]) -> None:
        namespace["__module__"] = module
        namespace["__qualname__"] = name
        namespace["__slots__"] = ()
        namespace["__doc__"] = doc if doc is not None else _default_doc(name, literal_name)

    return types.new_class(name, (Identifier,), kwds, exec_body)
