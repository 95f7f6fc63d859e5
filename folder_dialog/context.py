"""
===============================================================================
TARJETA CRC — folder_dialog/context.py (Contexto por diálogo / envío)
===============================================================================

Responsabilidades:
  - Mantener contexto "submission-scoped" usando ContextVars (async-safe).
  - Permitir correlación de logs sin pasar parámetros por todo el stack.
  - Proveer helpers mínimos: set_*(), reset_context(), get_context_dict(),
    clear_context().

Colaboradores:
  - application.dialog_controller: setea dialog_id/submission_id/team_id por envío.
  - crosscutting.logger: enriquece logs leyendo get_context_dict().

Restricciones:
  - Solo tipos primitivos (str) para serialización segura.
  - Defaults vacíos ("") para evitar None y simplificar JSON.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Final, Tuple

# Identificador estable de la instancia del diálogo (una por montaje).
dialog_id_var: ContextVar[str] = ContextVar("dialog_id", default="")

# Identificador de cada intento de envío.
submission_id_var: ContextVar[str] = ContextVar("submission_id", default="")

# Team/tenant activo (si hay).
team_id_var: ContextVar[str] = ContextVar("team_id", default="")

_CTX_DIALOG_ID: Final[str] = "dialog_id"
_CTX_SUBMISSION_ID: Final[str] = "submission_id"
_CTX_TEAM_ID: Final[str] = "team_id"


ContextTokens = Tuple[Token, Token, Token]


def set_submission_context(
    *, dialog_id: str = "", submission_id: str = "", team_id: str = ""
) -> ContextTokens:
    """
    Setea el contexto de un envío.

    Regla:
      - Strings vacíos significan "no disponible".
      - Devuelve los tokens para restaurar el contexto previo con
        reset_context() (no pisa lo que haya bindeado el host).
    """
    return (
        dialog_id_var.set(dialog_id or ""),
        submission_id_var.set(submission_id or ""),
        team_id_var.set(team_id or ""),
    )


def reset_context(tokens: ContextTokens) -> None:
    """Restaura los valores previos a set_submission_context()."""
    dialog_token, submission_token, team_token = tokens
    dialog_id_var.reset(dialog_token)
    submission_id_var.reset(submission_token)
    team_id_var.reset(team_token)


def get_context_dict() -> dict[str, str]:
    """Devuelve el contexto actual como dict, omitiendo claves vacías."""
    ctx: dict[str, str] = {}

    if val := dialog_id_var.get():
        ctx[_CTX_DIALOG_ID] = val
    if val := submission_id_var.get():
        ctx[_CTX_SUBMISSION_ID] = val
    if val := team_id_var.get():
        ctx[_CTX_TEAM_ID] = val

    return ctx


def clear_context() -> None:
    """Limpia todo el contexto (tests, fin de proceso)."""
    dialog_id_var.set("")
    submission_id_var.set("")
    team_id_var.set("")
