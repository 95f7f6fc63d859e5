"""
===============================================================================
USE CASE: Create Folder Dialog
===============================================================================

Name:
    DialogController (state machine del modal "crear carpeta")

Business Goal:
    Orquestar UNA acción asíncrona con efectos (crear carpeta) garantizando:
      - gate de validación antes de llamar al servicio
      - un solo envío en vuelo
      - cierre + reset del form en cada transición a CLOSED
      - feedback claro: éxito (toast + navegación) o error clasificado

-------------------------------------------------------------------------------
ESTADOS / TRANSICIONES
-------------------------------------------------------------------------------
    CLOSED     --open()-------------------> IDLE
    IDLE       --request_close()----------> CLOSED   (reset del form)
    IDLE       --submit(input válido)-----> SUBMITTING
    SUBMITTING --éxito(record)------------> CLOSED   (cerrar, toast, path, navegar)
    SUBMITTING --falla(error)-------------> IDLE     (nombre preservado, toast)
    *          --unmount()----------------> terminal (sin más efectos)

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    DialogController

Responsibilities:
    - Dueño exclusivo de DialogState (open/closed + form).
    - Construir un CreateFolderRequest fresco por envío.
    - Descartar resultados de envíos de una "generación" anterior
      (diálogo cerrado/reabierto o desmontado mientras el request volaba).
    - Notificar a suscriptores (renderer) después de cada cambio.

Collaborators:
    - FormController, CreateFolderSchema
    - CreationGateway (puerto)
    - NotificationSink, Navigator (puertos)
    - error_classifier.classify, NavigationPlanner
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
from uuid import uuid4

from ..context import reset_context, set_submission_context
from ..crosscutting.logger import logger
from ..domain.entities import (
    CreateFolderRequest,
    FolderRecord,
    FolderType,
    Notification,
    TenantContext,
)
from ..domain.errors import OpaqueError, parse_gateway_error
from ..domain.services import CreationGateway, Navigator, NotificationSink
from .error_classifier import classify
from .form_controller import FormController, FormState
from .messages import CREATED_SUCCESSFULLY
from .navigation import NavigationPlanner
from .validation import CreateFolderForm


class DialogPhase(str, Enum):
    CLOSED = "CLOSED"
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"


@dataclass(frozen=True)
class DialogState:
    """Snapshot inmutable para el renderer."""

    is_open: bool
    phase: DialogPhase
    form: FormState


StateListener = Callable[[DialogState], None]


class DialogController:
    """
    State machine del diálogo.

    Nota:
      - Una instancia por montaje del componente; no se persiste.
      - parent_id / tenant llegan explícitos (ruta y team activos).
    """

    def __init__(
        self,
        gateway: CreationGateway,
        notifier: NotificationSink,
        navigator: Navigator,
        *,
        folder_type: FolderType = FolderType.TEMPLATE,
        parent_id: Optional[str] = None,
        tenant: Optional[TenantContext] = None,
        planner: Optional[NavigationPlanner] = None,
        form: Optional[FormController] = None,
    ) -> None:
        self._gateway = gateway
        self._notifier = notifier
        self._navigator = navigator
        self._folder_type = folder_type
        self._parent_id = parent_id
        self._tenant = tenant
        self._planner = planner or NavigationPlanner(folder_type)
        self._form = form or FormController()

        self._dialog_id = str(uuid4())
        self._is_open = False
        self._unmounted = False
        # Se incrementa en cada cierre/unmount: invalida envíos en vuelo.
        self._generation = 0
        self._listeners: List[StateListener] = []

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_unmounted(self) -> bool:
        return self._unmounted

    @property
    def folder_type(self) -> FolderType:
        return self._folder_type

    @property
    def phase(self) -> DialogPhase:
        if not self._is_open:
            return DialogPhase.CLOSED
        if self._form.is_submitting:
            return DialogPhase.SUBMITTING
        return DialogPhase.IDLE

    @property
    def state(self) -> DialogState:
        return DialogState(
            is_open=self._is_open,
            phase=self.phase,
            form=self._form.snapshot(),
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registra un listener; devuelve la función para desuscribirlo."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================================================================
    # Transiciones
    # =========================================================================

    def open(self) -> None:
        if self._unmounted or self._is_open:
            return
        self._is_open = True
        self._emit()

    def request_close(self) -> None:
        if self._unmounted:
            return
        if self._close():
            self._emit()

    def set_open(self, is_open: bool) -> None:
        """Binding para el onOpenChange del host."""
        if is_open:
            self.open()
        else:
            self.request_close()

    def set_name(self, value: str) -> None:
        if self._unmounted or not self._is_open:
            return
        self._form.set_field("name", value)
        self._emit()

    async def submit(self) -> bool:
        """
        Envía el form.

        Returns:
            True si se llamó al gateway (independiente del resultado).
        """
        if self._unmounted or not self._is_open:
            return False

        generation = self._generation

        async def handle(data: CreateFolderForm) -> None:
            # Solo envíos aceptados por el form reciben submission_id.
            tokens = set_submission_context(
                dialog_id=self._dialog_id,
                submission_id=str(uuid4()),
                team_id=self._tenant.id if self._tenant is not None else "",
            )
            try:
                await self._create(data, generation)
            finally:
                reset_context(tokens)

        ran = await self._form.submit(handle)

        if not self._unmounted:
            self._emit()
        return ran

    def unmount(self) -> None:
        self._unmounted = True
        self._generation += 1
        self._listeners.clear()

    # =========================================================================
    # Helpers privados
    # =========================================================================

    async def _create(self, data: CreateFolderForm, generation: int) -> None:
        self._emit()

        request = CreateFolderRequest.build(
            data.name,
            folder_type=self._folder_type,
            parent_id=self._parent_id,
            tenant=self._tenant,
        )
        logger.info(
            "dialog: creating folder",
            extra={
                "folder_type": request.type.value,
                "parent_id": request.parent_id,
                "generation": generation,
            },
        )

        try:
            record = await self._gateway.create(request)
        except Exception as exc:
            self._on_failure(exc, generation)
            return

        self._on_success(record, generation)

    def _on_success(self, record: FolderRecord, generation: int) -> None:
        if self._is_stale(generation):
            logger.info(
                "dialog: discarding stale success",
                extra={"folder_id": record.id, "generation": generation},
            )
            return

        # Orden: cerrar (y renderizar CLOSED) antes de notificar y navegar.
        self._close()
        self._emit()
        self._notifier.notify(Notification(description=CREATED_SUCCESSFULLY))
        path = self._planner.path_for(record, self._tenant)
        logger.info(
            "dialog: folder created, navigating",
            extra={"folder_id": record.id, "path": path},
        )
        self._navigator.navigate_to(path)

    def _on_failure(self, error: Exception, generation: int) -> None:
        if self._is_stale(generation):
            logger.info(
                "dialog: discarding stale failure",
                extra={"error_type": type(error).__name__, "generation": generation},
            )
            return

        parsed = parse_gateway_error(error)
        classified = classify(parsed)
        extra = {
            "error_type": type(error).__name__,
            "classified_as": classified.kind.value,
        }
        if isinstance(parsed, OpaqueError):
            # Se invoca dentro del except de _create: hay exc_info activo.
            logger.exception(
                "dialog: folder creation failed unexpectedly", extra=extra
            )
        else:
            logger.warning("dialog: folder creation failed", extra=extra)
        self._notifier.notify(classified.to_notification())

    def _close(self) -> bool:
        """Transición a CLOSED (+ reset). Devuelve False si ya estaba cerrado."""
        if not self._is_open:
            return False
        self._is_open = False
        self._generation += 1
        self._form.reset()
        return True

    def _is_stale(self, generation: int) -> bool:
        return self._unmounted or generation != self._generation

    def _emit(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)
