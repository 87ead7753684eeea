"""User-adjustable editor preferences."""

from __future__ import annotations

from dataclasses import dataclass

from problem_app.constants.problem_constants import DEFAULT_INDENT_SIZE
from problem_app.styling import Theme


@dataclass(slots=True)
class EditorSettings:
    """Preferences edited through the settings dialog."""

    indent_size: int = DEFAULT_INDENT_SIZE
    ui_font_size: int = 10
    editor_font_size: int = 12
    preview_font_size: int = 14
    show_explanations: bool = False
    dark_theme: bool = False
    preview_server_enabled: bool = True

    @property
    def theme(self) -> Theme:
        return Theme.DARK if self.dark_theme else Theme.LIGHT
