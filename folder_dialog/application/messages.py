"""
Name: User-facing copy for the create-folder dialog

Responsibilities:
  - Keep every string shown by the dialog in one place
  - Provide per-folder-type wording (templates vs documents)

Notes:
  - Translation lives in the host; these are the source strings.
"""

from __future__ import annotations

from typing import Final

from ..domain.entities import FolderType

FOLDER_NAME_REQUIRED: Final[str] = "Folder name is required"

CREATE_ERROR_TITLE: Final[str] = "Folder creation error"
CONFLICT_MESSAGE: Final[str] = "This folder name is already taken."
UNKNOWN_ERROR_MESSAGE: Final[str] = (
    "An unknown error occurred while creating the folder."
)

CREATED_SUCCESSFULLY: Final[str] = "Folder created successfully"

TRIGGER_LABEL: Final[str] = "Create folder"
DIALOG_TITLE: Final[str] = "Create a new folder"
NAME_FIELD_LABEL: Final[str] = "Folder name"
NAME_FIELD_PLACEHOLDER: Final[str] = "My folder"
CANCEL_LABEL: Final[str] = "Cancel"
SUBMIT_LABEL: Final[str] = "Create"

_RESOURCE_NOUN: Final[dict[FolderType, str]] = {
    FolderType.TEMPLATE: "templates",
    FolderType.DOCUMENT: "documents",
}


def dialog_description(folder_type: FolderType) -> str:
    noun = _RESOURCE_NOUN[folder_type]
    return (
        "Enter a name for your new folder. "
        f"Folders help you organise your {noun}."
    )
