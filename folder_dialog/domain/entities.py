"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (FolderType, TenantContext, CreateFolderRequest,
    FolderRecord, Notification)

Responsabilidades:
    - Definir las estructuras que cruzan el flujo de creación de carpetas.
    - Mantener invariantes simples en construcción (nombre no vacío).

Colaboradores:
    - domain.services: puertos que consumen/producen estas entidades.
    - application: construye requests y lee el id del FolderRecord.
    - infrastructure.gateways: persisten/parsean estas entidades.

Principios:
    - Sin dependencias a httpx / logging / settings.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class FolderType(str, Enum):
    """Tipo de recurso que agrupa la carpeta."""

    TEMPLATE = "TEMPLATE"
    DOCUMENT = "DOCUMENT"


@dataclass(frozen=True)
class TenantContext:
    """
    Team/workspace activo (solo lectura).

    - id: identificador usado para scoping del request.
    - url: slug usado para construir rutas (/t/{url}/...).
    """

    id: str
    url: str
    name: Optional[str] = None


@dataclass(frozen=True)
class CreateFolderRequest:
    """
    Pedido de creación (uno por intento de envío).

    Nota:
      - name se valida por longitud cruda (sin strip); reglas de contenido
        quedan del lado del servicio remoto.
    """

    name: str
    type: FolderType
    parent_id: Optional[str] = None
    team_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CreateFolderRequest.name must not be empty")

    @classmethod
    def build(
        cls,
        name: str,
        *,
        folder_type: FolderType,
        parent_id: Optional[str] = None,
        tenant: Optional[TenantContext] = None,
    ) -> "CreateFolderRequest":
        """Arma el request a partir del form + contexto ambiente."""
        return cls(
            name=name,
            type=folder_type,
            parent_id=parent_id,
            team_id=tenant.id if tenant is not None else None,
        )


@dataclass(frozen=True)
class FolderRecord:
    """Carpeta creada por el servicio remoto (el cliente solo lee el id)."""

    id: str
    name: str
    type: FolderType
    parent_id: Optional[str] = None
    team_id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """Toast fire-and-forget."""

    description: str
    title: Optional[str] = None
    variant: NotificationVariant = NotificationVariant.DEFAULT
