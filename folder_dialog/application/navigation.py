"""
Name: Navigation Planner

Responsibilities:
  - Compute the listing path for a folder type, scoped to the active team
  - Compute the destination path of a newly created folder

Constraints:
  - Pure functions: no router, no settings lookups at call time
"""

from __future__ import annotations

from typing import Optional

from ..domain.entities import FolderRecord, FolderType, TenantContext


def _team_scoped(base: str, team_url: Optional[str]) -> str:
    if team_url:
        return f"/t/{team_url}/{base}"
    return f"/{base}"


def format_templates_path(team_url: Optional[str] = None) -> str:
    """R: /templates, or /t/{team_url}/templates inside a team."""
    return _team_scoped("templates", team_url)


def format_documents_path(team_url: Optional[str] = None) -> str:
    """R: /documents, or /t/{team_url}/documents inside a team."""
    return _team_scoped("documents", team_url)


_LISTING_PATHS = {
    FolderType.TEMPLATE: format_templates_path,
    FolderType.DOCUMENT: format_documents_path,
}


class NavigationPlanner:
    """Builds `<listing path>/<segment>/<folder id>` for a given folder type."""

    def __init__(self, folder_type: FolderType, *, segment: str = "f") -> None:
        self._folder_type = folder_type
        self._segment = segment

    @property
    def folder_type(self) -> FolderType:
        return self._folder_type

    def listing_path(self, tenant: Optional[TenantContext]) -> str:
        team_url = tenant.url if tenant is not None else None
        return _LISTING_PATHS[self._folder_type](team_url)

    def path_for(self, record: FolderRecord, tenant: Optional[TenantContext]) -> str:
        return f"{self.listing_path(tenant)}/{self._segment}/{record.id}"
