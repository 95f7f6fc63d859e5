"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures (fakes for gateway and sinks)
  - Configure test environment (APP_ENV=test, no .env file)

Collaborators:
  - pytest / pytest-asyncio
  - folder_dialog.domain: entities and ports

Notes:
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from folder_dialog.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from folder_dialog.application.dialog_controller import DialogController  # noqa: E402
from folder_dialog.domain.entities import (  # noqa: E402
    CreateFolderRequest,
    FolderRecord,
    FolderType,
    TenantContext,
)
from folder_dialog.infrastructure.sinks import (  # noqa: E402
    RecordingNavigator,
    RecordingNotificationSink,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Fakes
# ============================================================================


class ScriptedGateway:
    """
    R: CreationGateway fake.

    - Records every request.
    - Returns `record` or raises `error`.
    - When `hold` is set, create() blocks until release() is called.
    """

    def __init__(
        self,
        record: Optional[FolderRecord] = None,
        error: Optional[BaseException] = None,
        *,
        hold: bool = False,
    ) -> None:
        self.record = record or FolderRecord(
            id="abc", name="Contracts", type=FolderType.TEMPLATE
        )
        self.error = error
        self.requests: List[CreateFolderRequest] = []
        self._release = asyncio.Event()
        if not hold:
            self._release.set()

    def release(self) -> None:
        self._release.set()

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def create(self, request: CreateFolderRequest) -> FolderRecord:
        self.requests.append(request)
        await self._release.wait()
        if self.error is not None:
            raise self.error
        return self.record


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def notifier() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def gateway() -> ScriptedGateway:
    return ScriptedGateway()


@pytest.fixture
def tenant() -> TenantContext:
    return TenantContext(id="7", url="acme", name="Acme")


@pytest.fixture
def controller(gateway, notifier, navigator) -> DialogController:
    return DialogController(gateway, notifier, navigator)


@pytest.fixture
def make_gateway():
    """R: Factory for ScriptedGateway with custom record/error/hold."""
    return ScriptedGateway
