"""Workspace Paths -- minimal example demonstrating sigil identifier types.

Parses request paths such as ``/workspaces/acme/profiles/default`` into
identifiers that borrow from the path string, and keeps owned copies in a
registry that outlives the request.

Modules:
    ids:     WorkspaceId, ProfileId and their literal constants
    routing: ProfileRoute parsing and the ProfileRegistry
"""

from .ids import DEFAULT_PROFILE, ProfileId, WorkspaceId
from .routing import ProfileRecord, ProfileRegistry, ProfileRoute, parse_profile_route

__all__ = [
    "DEFAULT_PROFILE",
    "ProfileId",
    "ProfileRecord",
    "ProfileRegistry",
    "ProfileRoute",
    "WorkspaceId",
    "parse_profile_route",
]
