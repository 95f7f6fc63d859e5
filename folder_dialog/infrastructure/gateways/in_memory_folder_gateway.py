"""
============================================================
TARJETA CRC — infrastructure/gateways/in_memory_folder_gateway.py
============================================================
Class: InMemoryFolderGateway

Responsibilities:
  - Almacenar carpetas en memoria (tests / local dev).
  - Replicar la regla de unicidad del servicio remoto:
      (team_id, parent_id, type, name) no se repite -> AppError(ALREADY_EXISTS)
  - Validar que el parent exista (NOT_FOUND si no).

Collaborators:
  - domain.entities.FolderRecord, CreateFolderRequest
  - domain.errors.AppError

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Comparación de nombres exacta (sin normalizar), igual que el servicio.
============================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from ...domain.entities import CreateFolderRequest, FolderRecord, FolderType
from ...domain.errors import AppError, AppErrorCode

_Key = Tuple[Optional[str], Optional[str], FolderType, str]


class InMemoryFolderGateway:
    """
    Gateway in-memory, thread-safe.

    Modelo mental:
    - _folders es la "tabla" (id -> FolderRecord).
    - _names indexa la clave de unicidad para detectar conflictos.
    """

    def __init__(self, *, user_id: Optional[str] = None) -> None:
        self._lock = Lock()
        self._folders: Dict[str, FolderRecord] = {}
        self._names: Dict[_Key, str] = {}
        self._user_id = user_id
        self.requests: List[CreateFolderRequest] = []

    @staticmethod
    def _key(request: CreateFolderRequest) -> _Key:
        return (request.team_id, request.parent_id, request.type, request.name)

    async def create(self, request: CreateFolderRequest) -> FolderRecord:
        with self._lock:
            self.requests.append(request)

            parent_id = request.parent_id
            if parent_id is not None and parent_id not in self._folders:
                raise AppError(
                    AppErrorCode.NOT_FOUND, f"Parent folder {parent_id} not found"
                )

            key = self._key(request)
            if key in self._names:
                raise AppError(
                    AppErrorCode.ALREADY_EXISTS,
                    "A folder with this name already exists",
                )

            record = FolderRecord(
                id=uuid4().hex,
                name=request.name,
                type=request.type,
                parent_id=request.parent_id,
                team_id=request.team_id,
                user_id=self._user_id,
                created_at=datetime.now(timezone.utc),
            )
            self._folders[record.id] = record
            self._names[key] = record.id
            return record

    def get(self, folder_id: str) -> Optional[FolderRecord]:
        with self._lock:
            return self._folders.get(folder_id)

    def list_children(
        self, parent_id: Optional[str], *, team_id: Optional[str] = None
    ) -> List[FolderRecord]:
        """R: ordering determinístico por nombre."""
        with self._lock:
            values = list(self._folders.values())
        return sorted(
            (f for f in values if f.parent_id == parent_id and f.team_id == team_id),
            key=lambda f: f.name,
        )
