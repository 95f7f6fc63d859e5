"""
===============================================================================
TARJETA CRC — application/validation.py
===============================================================================

Módulo:
    Esquema de validación del formulario "crear carpeta"

Responsabilidades:
    - Declarar la regla del campo name (string, longitud cruda >= 1).
    - Traducir errores de pydantic a errores por campo (field -> mensaje).
    - Devolver un resultado tipado (ValidationResult), nunca lanzar.

Colaboradores:
    - pydantic.BaseModel: regla declarativa.
    - application.form_controller: evalúa el esquema en cada submit.
    - application.messages: mensajes por campo.

Notas:
    - NO se hace strip(): "  " es un nombre válido para este esquema; el
      servicio remoto decide qué caracteres acepta.
===============================================================================
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .messages import FOLDER_NAME_REQUIRED


class CreateFolderForm(BaseModel):
    """Input validado del formulario."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    name: str = Field(min_length=1)


# Un mensaje por campo: el form solo muestra uno debajo del input.
FIELD_MESSAGES: Dict[str, str] = {
    "name": FOLDER_NAME_REQUIRED,
}


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado de validar el form.

    Contrato:
      - Si field_errors está vacío => data presente (válido)
      - Si field_errors tiene entradas => data es None
    """

    data: Optional[CreateFolderForm] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.field_errors


class CreateFolderSchema:
    """Wrapper puro sobre CreateFolderForm."""

    def validate(self, values: Mapping[str, Any]) -> ValidationResult:
        try:
            form = CreateFolderForm.model_validate(dict(values))
        except ValidationError as exc:
            return ValidationResult(field_errors=self._field_errors(exc))
        return ValidationResult(data=form)

    @staticmethod
    def _field_errors(exc: ValidationError) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            loc = err.get("loc") or ("__root__",)
            field_name = str(loc[0])
            # Primer error por campo gana.
            errors.setdefault(
                field_name, FIELD_MESSAGES.get(field_name, err.get("msg", "Invalid"))
            )
        return errors
