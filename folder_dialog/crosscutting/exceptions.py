# folder_dialog/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas (errores internos del cliente)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  FolderDialogError + subclases

Responsabilidades:
  - Estandarizar fallas de transporte / payload del gateway
  - Generar error_id para rastreo

Colaboradores:
  - infrastructure/gateways/http_folder_gateway.py (las lanza)
  - domain/errors.py (las trata como OpaqueError al parsear)
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ErrorResponse:
    """Estructura mínima para reportar errores de forma consistente."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class FolderDialogError(Exception):
    """Base para errores internos del cliente (error_code + error_id + message)."""

    error_code: str = "FOLDER_DIALOG_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code, message=self.message, error_id=self.error_id
        )


class GatewayTransportError(FolderDialogError):
    """Falla de red/timeout hablando con el servicio de carpetas."""

    error_code: str = "GATEWAY_TRANSPORT_ERROR"


class GatewayResponseError(FolderDialogError):
    """Respuesta exitosa pero con payload inesperado."""

    error_code: str = "GATEWAY_RESPONSE_ERROR"
