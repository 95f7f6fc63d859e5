"""
===============================================================================
TARJETA CRC — folder_dialog/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer gateway, planner y controller siguiendo DIP.
  - Mantener el gateway como singleton (lru_cache).
  - Centralizar decisiones runtime basadas en Settings (config).

Colaboradores:
  - crosscutting.config.get_settings
  - domain.services.* (puertos)
  - infrastructure.gateways.* (implementaciones)
  - application.DialogController

Notas:
  - Este archivo NO contiene lógica de negocio.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from .application import DialogController, NavigationPlanner
from .crosscutting.config import get_settings
from .domain.entities import FolderType, TenantContext
from .domain.services import CreationGateway, Navigator, NotificationSink
from .infrastructure.gateways import HttpFolderGateway, InMemoryFolderGateway


@lru_cache(maxsize=1)
def get_folder_gateway() -> CreationGateway:
    """Gateway de carpetas (in-memory en test; HTTP en runtime)."""
    settings = get_settings()
    if settings.is_test_env():
        return InMemoryFolderGateway()
    return HttpFolderGateway(
        settings.api_base_url,
        token=settings.api_token,
        timeout_s=settings.request_timeout_s,
    )


def get_navigation_planner(folder_type: FolderType) -> NavigationPlanner:
    return NavigationPlanner(
        folder_type, segment=get_settings().folder_path_segment
    )


def build_dialog_controller(
    notifier: NotificationSink,
    navigator: Navigator,
    *,
    folder_type: Optional[FolderType] = None,
    parent_id: Optional[str] = None,
    tenant: Optional[TenantContext] = None,
    gateway: Optional[CreationGateway] = None,
) -> DialogController:
    """Arma un DialogController por montaje del diálogo."""
    resolved_type = folder_type or get_settings().default_folder_type
    return DialogController(
        gateway or get_folder_gateway(),
        notifier,
        navigator,
        folder_type=resolved_type,
        parent_id=parent_id,
        tenant=tenant,
        planner=get_navigation_planner(resolved_type),
    )
