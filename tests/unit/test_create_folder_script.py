"""
Name: create_folder Script Smoke Tests

Responsibilities:
  - Verify the script drives the dialog and reports success via exit code
"""

import pytest

from folder_dialog.domain.errors import AppError, AppErrorCode
from folder_dialog.infrastructure.gateways import InMemoryFolderGateway

pytestmark = pytest.mark.unit


@pytest.fixture
def script():
    from scripts import create_folder

    return create_folder


@pytest.mark.asyncio
async def test_success_exit_code(script):
    args = script._parse_args(["--name", "Contracts", "--type", "TEMPLATE"])
    assert await script.run(args, gateway=InMemoryFolderGateway()) == 0


@pytest.mark.asyncio
async def test_empty_name_fails(script):
    args = script._parse_args(["--name", ""])
    assert await script.run(args, gateway=InMemoryFolderGateway()) == 1


@pytest.mark.asyncio
async def test_gateway_failure_fails(script, make_gateway):
    gateway = make_gateway(error=AppError(AppErrorCode.ALREADY_EXISTS))
    args = script._parse_args(["--", "--name", "Contracts"])
    assert await script.run(args, gateway=gateway) == 1


def test_team_flags_go_together(script):
    args = script._parse_args(["--name", "x", "--team-id", "7"])
    with pytest.raises(SystemExit):
        script._tenant_from_args(args)


def test_tenant_from_flags(script):
    args = script._parse_args(["--name", "x", "--team-id", "7", "--team-url", "acme"])
    tenant = script._tenant_from_args(args)
    assert tenant.id == "7"
    assert tenant.url == "acme"
