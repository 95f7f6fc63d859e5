"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    CreateFolderRequest,
    FolderRecord,
    FolderType,
    Notification,
    NotificationVariant,
    TenantContext,
)
from .errors import (
    AppError,
    AppErrorCode,
    GatewayFailure,
    OpaqueError,
    StructuredAppError,
    parse_gateway_error,
)
from .services import CreationGateway, NotificationSink, Navigator

__all__ = [
    # Entities
    "CreateFolderRequest",
    "FolderRecord",
    "FolderType",
    "Notification",
    "NotificationVariant",
    "TenantContext",
    # Errors
    "AppError",
    "AppErrorCode",
    "GatewayFailure",
    "OpaqueError",
    "StructuredAppError",
    "parse_gateway_error",
    # Ports
    "CreationGateway",
    "NotificationSink",
    "Navigator",
]
