"""
Name: Composition Root Tests

Responsibilities:
  - Gateway selection by environment
  - Controller wiring (folder type, planner segment, tenant)
"""

import pytest

from folder_dialog import container
from folder_dialog.crosscutting import config as app_config
from folder_dialog.domain.entities import FolderType, TenantContext
from folder_dialog.infrastructure.gateways import (
    HttpFolderGateway,
    InMemoryFolderGateway,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _fresh_caches():
    app_config.get_settings.cache_clear()
    container.get_folder_gateway.cache_clear()
    yield
    app_config.get_settings.cache_clear()
    container.get_folder_gateway.cache_clear()


def test_test_env_uses_in_memory_gateway(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    assert isinstance(container.get_folder_gateway(), InMemoryFolderGateway)


def test_runtime_uses_http_gateway(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    assert isinstance(container.get_folder_gateway(), HttpFolderGateway)


def test_gateway_is_singleton(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    assert container.get_folder_gateway() is container.get_folder_gateway()


@pytest.mark.asyncio
async def test_built_controller_end_to_end(monkeypatch, notifier, navigator):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("FOLDER_PATH_SEGMENT", "folder")
    monkeypatch.setenv("DEFAULT_FOLDER_TYPE", "DOCUMENT")

    controller = container.build_dialog_controller(
        notifier, navigator, tenant=TenantContext(id="7", url="acme")
    )
    assert controller.folder_type == FolderType.DOCUMENT

    controller.open()
    controller.set_name("Contracts")
    await controller.submit()

    assert len(navigator.paths) == 1
    assert navigator.paths[0].startswith("/t/acme/documents/folder/")

    # Same name again, same scope: conflict from the in-memory service.
    controller.open()
    controller.set_name("Contracts")
    await controller.submit()

    assert controller.is_open
    assert notifier.last.description == "This folder name is already taken."
