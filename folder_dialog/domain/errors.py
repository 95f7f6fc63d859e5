"""
===============================================================================
TARJETA CRC — domain/errors.py
===============================================================================

Módulo:
    Errores de aplicación del servicio remoto + parseo en el borde del gateway

Responsabilidades:
    - Definir AppErrorCode: códigos machine-readable que expone el servicio.
    - Definir AppError: excepción estructurada que lanzan los gateways.
    - Convertir cualquier falla "cruda" en una variante cerrada:
        * StructuredAppError(code, message)
        * OpaqueError(cause)
      para que application no opere sobre datos dinámicos.

Colaboradores:
    - infrastructure.gateways.*: lanzan AppError.
    - application.error_classifier: consume la variante parseada.

Reglas:
    - parse_gateway_error es total: nunca lanza.
    - Códigos desconocidos => UNKNOWN_ERROR (pero siguen siendo estructurados).
===============================================================================
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class AppErrorCode(str, Enum):
    """Códigos estables del servicio de carpetas."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_BODY = "INVALID_BODY"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @classmethod
    def from_raw(cls, raw: Any) -> "AppErrorCode":
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().upper())
        except ValueError:
            return cls.UNKNOWN_ERROR


class AppError(Exception):
    """Error estructurado del servicio remoto (code + message + status)."""

    def __init__(
        self,
        code: AppErrorCode,
        message: str = "",
        *,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.message = message or code.value
        self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return {"code": self.code.value, "message": self.message}


@dataclass(frozen=True)
class StructuredAppError:
    code: AppErrorCode
    message: str


@dataclass(frozen=True)
class OpaqueError:
    cause: object


GatewayFailure = Union[StructuredAppError, OpaqueError]


def _from_mapping(payload: Mapping) -> Optional[StructuredAppError]:
    # Algunos transportes anidan el error: {"error": {...}} o {"appError": "..."}
    nested = payload.get("appError", payload.get("error"))
    if nested is not None and "code" not in payload:
        return _from_any(nested)

    if "code" not in payload:
        return None

    return StructuredAppError(
        code=AppErrorCode.from_raw(payload.get("code")),
        message=str(payload.get("message") or ""),
    )


def _from_any(raw: object) -> Optional[StructuredAppError]:
    if isinstance(raw, AppError):
        return StructuredAppError(code=raw.code, message=raw.message)

    if isinstance(raw, Mapping):
        return _from_mapping(raw)

    if isinstance(raw, (str, bytes)):
        try:
            decoded = json.loads(raw)
        except ValueError:
            return None
        if isinstance(decoded, Mapping):
            return _from_mapping(decoded)
        return None

    # Excepciones de transporte que cargan el payload de la app (p.ej. clientes RPC).
    app_error = getattr(raw, "app_error", None)
    if app_error is not None:
        return _from_any(app_error)

    return None


def parse_gateway_error(raw: object) -> GatewayFailure:
    """
    Interpreta una falla del gateway como error de aplicación estructurado.

    Devuelve OpaqueError si no hay forma de leer un código.
    """
    try:
        parsed = _from_any(raw)
    except Exception:  # noqa: BLE001 - input arbitrario, la función es total
        parsed = None
    return parsed if parsed is not None else OpaqueError(cause=raw)
