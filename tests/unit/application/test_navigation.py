"""Unit tests for destination path planning."""

import pytest

from folder_dialog.application.navigation import (
    NavigationPlanner,
    format_documents_path,
    format_templates_path,
)
from folder_dialog.domain.entities import FolderRecord, FolderType, TenantContext

pytestmark = pytest.mark.unit

_RECORD = FolderRecord(id="abc", name="Contracts", type=FolderType.TEMPLATE)


def test_listing_paths_without_team():
    assert format_templates_path() == "/templates"
    assert format_documents_path(None) == "/documents"


def test_listing_paths_with_team():
    assert format_templates_path("acme") == "/t/acme/templates"
    assert format_documents_path("acme") == "/t/acme/documents"


def test_template_folder_path_without_tenant():
    planner = NavigationPlanner(FolderType.TEMPLATE)
    assert planner.path_for(_RECORD, None) == "/templates/f/abc"


def test_template_folder_path_with_tenant():
    planner = NavigationPlanner(FolderType.TEMPLATE)
    tenant = TenantContext(id="7", url="acme")
    assert planner.path_for(_RECORD, tenant) == "/t/acme/templates/f/abc"


def test_document_folder_path():
    planner = NavigationPlanner(FolderType.DOCUMENT)
    assert planner.path_for(_RECORD, None) == "/documents/f/abc"


def test_custom_segment():
    planner = NavigationPlanner(FolderType.TEMPLATE, segment="folders")
    assert planner.path_for(_RECORD, None) == "/templates/folders/abc"


def test_planner_is_pure():
    planner = NavigationPlanner(FolderType.TEMPLATE)
    tenant = TenantContext(id="7", url="acme")
    assert planner.path_for(_RECORD, tenant) == planner.path_for(_RECORD, tenant)
    assert planner.path_for(_RECORD, None) == "/templates/f/abc"
