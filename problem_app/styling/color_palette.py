"""Color palette for ProblemQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """A color expressed once per theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the editor and the preview page."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F5F5F5", dark="#2D2D2D")

    # Markup editor
    EDITOR_BG = ThemeColors(light="#FBFBFB", dark="#282C34")
    EDITOR_TEXT = ThemeColors(light="#24292E", dark="#ABB2BF")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")
    SPLITTER_HANDLE = ThemeColors(light="#E0E0E0", dark="#3A3A3A")

    BUTTON_PRIMARY_BG = ThemeColors(light="#0078D4", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E8E8E8", dark="#505050")

    # Findings and answers in the preview
    SUCCESS = ThemeColors(light="#107C10", dark="#6FCF6F")
    WARNING = ThemeColors(light="#9A6700", dark="#FFC83D")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")

    PREVIEW_BG = ThemeColors(light="#FFFFFF", dark="#252525")
    PREVIEW_CARD_BG = ThemeColors(light="#F7F9FC", dark="#2F2F2F")
    PREVIEW_EXPLANATION_BG = ThemeColors(light="#EEF6EE", dark="#24352A")
