"""
============================================================
TARJETA CRC — infrastructure/gateways/http_folder_gateway.py
============================================================
Class: HttpFolderGateway

Responsibilities:
  - Implementar CreationGateway contra el servicio HTTP de carpetas.
  - Scoping por team vía header X-Team-Id.
  - Parsear la respuesta exitosa a FolderRecord (pydantic).
  - Traducir respuestas de error a AppError con código estable
    (body {"code": ...} si es reconocido; si no, status HTTP).
  - Envolver fallas de red/timeout en GatewayTransportError.

Collaborators:
  - domain.services.CreationGateway (contrato)
  - domain.errors (AppError, AppErrorCode)
  - crosscutting.exceptions (GatewayTransportError, GatewayResponseError)
  - httpx (HTTP client async)

Notas:
  - Sin retries: una llamada por envío (no hay idempotencia).
============================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...crosscutting.exceptions import GatewayResponseError, GatewayTransportError
from ...crosscutting.logger import logger
from ...domain.entities import CreateFolderRequest, FolderRecord, FolderType
from ...domain.errors import (
    AppError,
    AppErrorCode,
    StructuredAppError,
    parse_gateway_error,
)

_FOLDERS_PATH = "/folders"
_TEAM_HEADER = "X-Team-Id"

# Fallback cuando el body no trae código de aplicación.
_STATUS_CODES: Dict[int, AppErrorCode] = {
    400: AppErrorCode.INVALID_REQUEST,
    401: AppErrorCode.UNAUTHORIZED,
    403: AppErrorCode.UNAUTHORIZED,
    404: AppErrorCode.NOT_FOUND,
    409: AppErrorCode.ALREADY_EXISTS,
    422: AppErrorCode.INVALID_REQUEST,
    429: AppErrorCode.TOO_MANY_REQUESTS,
}


class _FolderPayload(BaseModel):
    """Forma del JSON que devuelve el servicio al crear."""

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )

    id: str
    name: str
    type: FolderType
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    team_id: Optional[str] = Field(default=None, alias="teamId")
    user_id: Optional[str] = Field(default=None, alias="userId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    def to_entity(self) -> FolderRecord:
        return FolderRecord(
            id=self.id,
            name=self.name,
            type=self.type,
            parent_id=self.parent_id,
            team_id=self.team_id,
            user_id=self.user_id,
            created_at=self.created_at,
        )


def _error_from_response(resp: httpx.Response) -> AppError:
    body: Any
    try:
        body = resp.json()
    except ValueError:
        body = None

    parsed = parse_gateway_error(body) if body is not None else None
    message = f"HTTP {resp.status_code}: {resp.text[:200]}"
    if isinstance(parsed, StructuredAppError):
        if parsed.code != AppErrorCode.UNKNOWN_ERROR:
            return AppError(parsed.code, parsed.message, status_code=resp.status_code)
        # Código no reconocido (ej. {"code": 409}): manda el status.
        message = parsed.message or message

    code = _STATUS_CODES.get(resp.status_code, AppErrorCode.UNKNOWN_ERROR)
    return AppError(
        code,
        message,
        status_code=resp.status_code,
    )


class HttpFolderGateway:
    """CreationGateway sobre HTTP (JSON)."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str = "",
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required for HttpFolderGateway")
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._timeout = timeout_s
        self._transport = transport

    def _headers_for(self, request: CreateFolderRequest) -> Dict[str, str]:
        headers = dict(self._headers)
        if request.team_id:
            headers[_TEAM_HEADER] = str(request.team_id)
        return headers

    @staticmethod
    def _body_for(request: CreateFolderRequest) -> Dict[str, Any]:
        return {
            "name": request.name,
            "parentId": request.parent_id,
            "type": request.type.value,
        }

    async def create(self, request: CreateFolderRequest) -> FolderRecord:
        url = f"{self._base_url}{_FOLDERS_PATH}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    url,
                    json=self._body_for(request),
                    headers=self._headers_for(request),
                )
        except httpx.HTTPError as exc:
            reason = "timeout" if isinstance(exc, httpx.TimeoutException) else "network"
            logger.warning(
                "folder_gateway: transport failure",
                extra={"reason": reason, "error_type": type(exc).__name__},
            )
            raise GatewayTransportError(
                f"Folder service unreachable ({reason})", original_error=exc
            ) from exc

        if resp.status_code >= 400:
            error = _error_from_response(resp)
            logger.warning(
                "folder_gateway: creation rejected",
                extra={"status": resp.status_code, "code": error.code.value},
            )
            raise error

        try:
            payload = _FolderPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise GatewayResponseError(
                "Folder service returned an unexpected payload", original_error=exc
            ) from exc

        logger.info(
            "folder_gateway: folder created",
            extra={"status": resp.status_code, "folder_id": payload.id},
        )
        return payload.to_entity()
