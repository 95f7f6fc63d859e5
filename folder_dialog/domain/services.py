"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Colaboradores Externos (Protocols)

Responsabilidades:
    - Definir el contrato del gateway de creación (persistencia remota).
    - Definir los sinks fire-and-forget de notificación y navegación.
    - Mantener application independiente del transporte y del framework UI.

Colaboradores:
    - infrastructure/gateways/*, infrastructure/sinks.py: implementaciones.
    - application/dialog_controller.py: consume estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol

from .entities import CreateFolderRequest, FolderRecord, Notification


class CreationGateway(Protocol):
    """Contrato para crear carpetas en el servicio remoto."""

    async def create(self, request: CreateFolderRequest) -> FolderRecord:
        """
        Crea la carpeta y devuelve el registro creado.

        Falla lanzando una excepción opaca (idealmente AppError); el gateway
        NO formatea mensajes para el usuario. Sin idempotencia.
        """
        ...


class NotificationSink(Protocol):
    """Toasts."""

    def notify(self, notification: Notification) -> None: ...


class Navigator(Protocol):
    """Navegación del host (router)."""

    def navigate_to(self, path: str) -> None: ...
