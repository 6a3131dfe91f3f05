"""Identifier types for the Workspace Paths example."""

from __future__ import annotations

from sigil.foundation.ids import Identifier, define_id_type, literal_constructor


class WorkspaceId(Identifier, literal_name="workspace_id"):
    """Workspace identifier, e.g. ``acme_prod``."""


ProfileId = define_id_type("ProfileId", literal_name="profile_id")

workspace_id = literal_constructor(WorkspaceId)
profile_id = literal_constructor(ProfileId)

DEFAULT_PROFILE = profile_id("default")
