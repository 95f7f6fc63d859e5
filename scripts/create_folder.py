"""
Name: Create Folder Script

Responsibilities:
  - Drive the create-folder dialog headlessly (open -> name -> submit)
  - Use the configured gateway (folder service over HTTP, in-memory in test env)
  - Exit 0 when the folder was created and navigation was issued, 1 otherwise
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import Optional, Sequence

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from folder_dialog.container import build_dialog_controller  # noqa: E402
from folder_dialog.crosscutting.logger import logger  # noqa: E402
from folder_dialog.domain.entities import FolderType, TenantContext  # noqa: E402
from folder_dialog.domain.services import CreationGateway  # noqa: E402
from folder_dialog.infrastructure.sinks import (  # noqa: E402
    LoggingNavigator,
    LoggingNotificationSink,
    RecordingNavigator,
    RecordingNotificationSink,
)


class _TeeNotifier(RecordingNotificationSink):
    def __init__(self) -> None:
        super().__init__()
        self._log = LoggingNotificationSink()

    def notify(self, notification) -> None:
        super().notify(notification)
        self._log.notify(notification)


class _TeeNavigator(RecordingNavigator):
    def __init__(self) -> None:
        super().__init__()
        self._log = LoggingNavigator()

    def navigate_to(self, path: str) -> None:
        super().navigate_to(path)
        self._log.navigate_to(path)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] == "--":
        argv = argv[1:]
    parser = argparse.ArgumentParser(description="Create a folder.")
    parser.add_argument("--name", required=True, help="Folder name")
    parser.add_argument("--parent-id", help="Parent folder id (optional)")
    parser.add_argument(
        "--type",
        default=None,
        choices=[t.value for t in FolderType],
        help="Folder type (default: from settings)",
    )
    parser.add_argument("--team-id", help="Team id used to scope the request")
    parser.add_argument("--team-url", help="Team URL slug used for the path")
    return parser.parse_args(argv)


def _tenant_from_args(args: argparse.Namespace) -> Optional[TenantContext]:
    if not args.team_id and not args.team_url:
        return None
    if not (args.team_id and args.team_url):
        raise SystemExit("--team-id and --team-url must be given together.")
    return TenantContext(id=args.team_id, url=args.team_url)


async def run(
    args: argparse.Namespace, *, gateway: Optional[CreationGateway] = None
) -> int:
    notifier = _TeeNotifier()
    navigator = _TeeNavigator()
    controller = build_dialog_controller(
        notifier,
        navigator,
        folder_type=FolderType(args.type) if args.type else None,
        parent_id=args.parent_id,
        tenant=_tenant_from_args(args),
        gateway=gateway,
    )

    controller.open()
    controller.set_name(args.name)
    await controller.submit()

    error = controller.state.form.field_errors.get("name")
    if error:
        logger.warning("create_folder: invalid input", extra={"detail": error})
    controller.unmount()
    return 0 if navigator.paths else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    return asyncio.run(run(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
