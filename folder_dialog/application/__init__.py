"""
Application Layer (create-folder dialog)

Structure
---------
application/
├── validation.py         # form schema (pydantic)
├── form_controller.py    # field state + single-flight submit
├── error_classifier.py   # raw failure -> CONFLICT / UNKNOWN
├── navigation.py         # destination paths
├── dialog_controller.py  # modal state machine
├── dialog_view.py        # view model for renderers
└── messages.py           # user-facing copy
"""

from .dialog_controller import DialogController, DialogPhase, DialogState
from .dialog_view import DialogViewModel, build_dialog_view
from .error_classifier import ClassifiedError, ClassifiedErrorKind, classify
from .form_controller import FormController, FormState
from .navigation import (
    NavigationPlanner,
    format_documents_path,
    format_templates_path,
)
from .validation import CreateFolderForm, CreateFolderSchema, ValidationResult

__all__ = [
    # State machine
    "DialogController",
    "DialogPhase",
    "DialogState",
    "DialogViewModel",
    "build_dialog_view",
    # Form
    "FormController",
    "FormState",
    "CreateFolderForm",
    "CreateFolderSchema",
    "ValidationResult",
    # Errors
    "ClassifiedError",
    "ClassifiedErrorKind",
    "classify",
    # Navigation
    "NavigationPlanner",
    "format_documents_path",
    "format_templates_path",
]
