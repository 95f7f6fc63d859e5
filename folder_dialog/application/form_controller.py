"""
===============================================================================
TARJETA CRC — application/form_controller.py
===============================================================================

Class:
    FormController

Responsibilities:
    - Mantener el estado del formulario (name, is_submitting, field_errors).
    - Ejecutar el esquema de validación en cada submit (no por tecla).
    - Garantizar a lo sumo UN envío en vuelo por instancia (doble click).
    - Exponer reset() para el cierre del diálogo.

Collaborators:
    - application.validation.CreateFolderSchema
    - handler async provisto por el caller (DialogController)

Invariantes:
    - is_submitting es True solo mientras el handler está en vuelo.
    - field_errors se limpian en cada intento nuevo y en reset().
    - reset() NO toca is_submitting.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Optional

from ..crosscutting.logger import logger
from .validation import CreateFolderForm, CreateFolderSchema

SubmitHandler = Callable[[CreateFolderForm], Awaitable[None]]


@dataclass(frozen=True)
class FormState:
    name: str = ""
    is_submitting: bool = False
    field_errors: Dict[str, str] = field(default_factory=dict)


class FormController:
    """Estado + ciclo de envío del form "crear carpeta"."""

    FIELDS = ("name",)

    def __init__(self, schema: Optional[CreateFolderSchema] = None) -> None:
        self._schema = schema or CreateFolderSchema()
        self._values: Dict[str, str] = {name: "" for name in self.FIELDS}
        self._field_errors: Dict[str, str] = {}
        self._is_submitting = False

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def field_errors(self) -> Dict[str, str]:
        return dict(self._field_errors)

    def value(self, name: str) -> str:
        return self._values[name]

    def set_field(self, name: str, value: str) -> None:
        """Actualiza el valor; la validación corre recién en submit()."""
        if name not in self._values:
            raise KeyError(f"Unknown form field: {name}")
        self._values[name] = value

    async def submit(self, handler: SubmitHandler) -> bool:
        """
        Valida y, si corresponde, ejecuta el handler.

        Returns:
            True si el handler corrió; False si el envío fue ignorado
            (ya había uno en vuelo) o rechazado por validación.
        """
        if self._is_submitting:
            logger.info("form: submit ignored, submission already in flight")
            return False

        self._field_errors = {}
        result = self._schema.validate(self._values)
        if not result.ok:
            self._field_errors = dict(result.field_errors)
            logger.info(
                "form: submit rejected by validation",
                extra={"fields": sorted(self._field_errors)},
            )
            return False

        self._is_submitting = True
        try:
            await handler(result.data)
        finally:
            self._is_submitting = False
        return True

    def reset(self) -> None:
        self._values = {name: "" for name in self.FIELDS}
        self._field_errors = {}

    def snapshot(self) -> FormState:
        return FormState(
            name=self._values["name"],
            is_submitting=self._is_submitting,
            field_errors=dict(self._field_errors),
        )
