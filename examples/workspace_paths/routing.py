"""Route parsing and profile registry for the Workspace Paths example.

Demonstrates the borrowed/owned split: parsed routes borrow their
identifiers from the request path, the registry keeps owned copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from sigil.foundation.ids import TextView
from sigil.infra.observability import get_logger

from .ids import DEFAULT_PROFILE, ProfileId, WorkspaceId

_WORKSPACES_PREFIX = "/workspaces/"
_PROFILES_SEGMENT = "/profiles/"


@dataclass(frozen=True, slots=True)
class ProfileRoute:
    """Identifiers extracted from a profile path.

    Attributes:
        workspace_id: Workspace segment, borrowed from the path.
        profile_id: Profile segment, borrowed from the path.
    """

    workspace_id: WorkspaceId
    profile_id: ProfileId


class ProfileRecord(BaseModel):
    """Stored profile."""

    workspace_id: WorkspaceId
    profile_id: ProfileId
    display_name: str


def parse_profile_route(path: str) -> ProfileRoute:
    """Parse ``/workspaces/<workspace>/profiles/<profile>``.

    Segments are validated in place; nothing is sliced out of ``path``.

    Raises:
        ValueError: If the path does not have the expected shape.
        InvalidIdError: If a segment is not a valid identifier.
    """
    if not path.startswith(_WORKSPACES_PREFIX):
        msg = f"Not a workspace path: {path!r}"
        raise ValueError(msg)
    ws_start = len(_WORKSPACES_PREFIX)
    ws_stop = path.find("/", ws_start)
    if ws_stop == -1 or not path.startswith(_PROFILES_SEGMENT, ws_stop):
        msg = f"Not a profile path: {path!r}"
        raise ValueError(msg)
    profile_start = ws_stop + len(_PROFILES_SEGMENT)
    if path.find("/", profile_start) != -1:
        msg = f"Unexpected trailing segments: {path!r}"
        raise ValueError(msg)
    return ProfileRoute(
        workspace_id=WorkspaceId(TextView(path, ws_start, ws_stop)),
        profile_id=ProfileId(TextView(path, profile_start)),
    )


class ProfileRegistry:
    """In-memory profile store keyed by (workspace, profile)."""

    def __init__(self) -> None:
        self._records: dict[tuple[WorkspaceId, ProfileId], ProfileRecord] = {}

    def register(self, route: ProfileRoute, display_name: str) -> ProfileRecord:
        """Store a profile, copying the route identifiers out of the path."""
        record = ProfileRecord(
            workspace_id=route.workspace_id.into_static(),
            profile_id=route.profile_id.into_static(),
            display_name=display_name,
        )
        self._records[(record.workspace_id, record.profile_id)] = record
        get_logger(__name__).info(
            "profile_registered",
            workspace_id=record.workspace_id,
            profile_id=record.profile_id,
        )
        return record

    def get(
        self, workspace_id: WorkspaceId | str, profile_id: ProfileId | str = DEFAULT_PROFILE
    ) -> ProfileRecord | None:
        """Look up a profile; plain strings work as keys."""
        return self._records.get((workspace_id, profile_id))

    def __len__(self) -> int:
        return len(self._records)
