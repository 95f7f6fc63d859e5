"""
Presentation Contracts

Responsibility:
  Turn a DialogState snapshot into everything a thin renderer needs
  (copy, inline error, disabled flags). No rendering here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.entities import FolderType
from . import messages
from .dialog_controller import DialogPhase, DialogState


@dataclass(frozen=True)
class DialogViewModel:
    """ViewModel for the create-folder modal and its trigger."""

    trigger_label: str
    is_open: bool
    title: str
    description: str
    field_label: str
    field_placeholder: str
    field_value: str
    field_error: Optional[str]
    cancel_label: str
    submit_label: str
    is_submit_disabled: bool


def build_dialog_view(
    state: DialogState,
    folder_type: FolderType,
    *,
    trigger_label: Optional[str] = None,
) -> DialogViewModel:
    """R: `trigger_label` overrides the default trigger copy."""
    return DialogViewModel(
        trigger_label=trigger_label or messages.TRIGGER_LABEL,
        is_open=state.is_open,
        title=messages.DIALOG_TITLE,
        description=messages.dialog_description(folder_type),
        field_label=messages.NAME_FIELD_LABEL,
        field_placeholder=messages.NAME_FIELD_PLACEHOLDER,
        field_value=state.form.name,
        field_error=state.form.field_errors.get("name"),
        cancel_label=messages.CANCEL_LABEL,
        submit_label=messages.SUBMIT_LABEL,
        is_submit_disabled=state.phase == DialogPhase.SUBMITTING,
    )
