"""Qt UI components for the problem editor."""

from .dialog_helpers import (
    check_unsaved_changes,
    show_error,
    show_info,
    show_warning,
)
from .editor_main_window import EditorMainWindow

__all__ = [
    "EditorMainWindow",
    "check_unsaved_changes",
    "show_error",
    "show_info",
    "show_warning",
]
