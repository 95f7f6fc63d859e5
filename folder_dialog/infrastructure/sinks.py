"""
============================================================
TARJETA CRC — infrastructure/sinks.py
============================================================
Responsibilities:
  - Implementaciones headless de NotificationSink / Navigator.
  - Logging: para CLI y hosts sin UI.
  - Recording: guardan historial (tests, CLI para decidir exit code).

Collaborators:
  - domain.services.NotificationSink, Navigator (contratos)
  - crosscutting.logger
============================================================
"""

from __future__ import annotations

from typing import List

from ..crosscutting.logger import logger
from ..domain.entities import Notification, NotificationVariant


class LoggingNotificationSink:
    """Loguea cada toast (destructive => warning)."""

    def notify(self, notification: Notification) -> None:
        log = (
            logger.warning
            if notification.variant == NotificationVariant.DESTRUCTIVE
            else logger.info
        )
        log(
            "notification",
            extra={
                "title": notification.title,
                "description": notification.description,
                "variant": notification.variant.value,
            },
        )


class LoggingNavigator:
    def navigate_to(self, path: str) -> None:
        logger.info("navigation", extra={"path": path})


class RecordingNotificationSink:
    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


class RecordingNavigator:
    def __init__(self) -> None:
        self.paths: List[str] = []

    def navigate_to(self, path: str) -> None:
        self.paths.append(path)
