"""
===============================================================================
TARJETA CRC — application/error_classifier.py
===============================================================================

Name:
    Error Classifier

Business Goal:
    Reducir cualquier falla del gateway a una taxonomía binaria para la UI:
      - CONFLICT: el nombre ya existe bajo el mismo parent/team (accionable)
      - UNKNOWN: todo lo demás (transporte, permisos, códigos nuevos, ...)

Collaborators:
    - domain.errors.parse_gateway_error (borde: raw -> variante cerrada)
    - application.messages (títulos/mensajes)

Reglas:
    - classify() es total: nunca lanza.
    - El error crudo NUNCA llega al sink de notificaciones.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..domain.entities import Notification, NotificationVariant
from ..domain.errors import (
    AppErrorCode,
    GatewayFailure,
    OpaqueError,
    StructuredAppError,
    parse_gateway_error,
)
from .messages import CONFLICT_MESSAGE, CREATE_ERROR_TITLE, UNKNOWN_ERROR_MESSAGE


class ClassifiedErrorKind(str, Enum):
    CONFLICT = "CONFLICT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ClassifiedError:
    """Error listo para mostrar (derivado, nunca persistido)."""

    kind: ClassifiedErrorKind
    title: str
    message: str

    def to_notification(self) -> Notification:
        return Notification(
            title=self.title,
            description=self.message,
            variant=NotificationVariant.DESTRUCTIVE,
        )


CONFLICT = ClassifiedError(
    kind=ClassifiedErrorKind.CONFLICT,
    title=CREATE_ERROR_TITLE,
    message=CONFLICT_MESSAGE,
)

UNKNOWN = ClassifiedError(
    kind=ClassifiedErrorKind.UNKNOWN,
    title=CREATE_ERROR_TITLE,
    message=UNKNOWN_ERROR_MESSAGE,
)


def classify(error: object) -> ClassifiedError:
    """Mapea una falla cruda (o ya parseada) a CONFLICT / UNKNOWN."""
    if isinstance(error, (StructuredAppError, OpaqueError)):
        parsed: GatewayFailure = error
    else:
        parsed = parse_gateway_error(error)

    if (
        isinstance(parsed, StructuredAppError)
        and parsed.code == AppErrorCode.ALREADY_EXISTS
    ):
        return CONFLICT
    return UNKNOWN
