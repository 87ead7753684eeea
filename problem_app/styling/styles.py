"""Centralized Qt stylesheets and preview CSS."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QSpinBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QSplitter::handle {{
                background-color: {ColorPalette.SPLITTER_HANDLE.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_editor_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPlainTextEdit {{
                background-color: {ColorPalette.EDITOR_BG.get(theme)};
                color: {ColorPalette.EDITOR_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                font-family: 'JetBrains Mono', 'Consolas', 'DejaVu Sans Mono', monospace;
                font-size: {font_size}pt;
            }}
        """

    @staticmethod
    def get_panel_header_style() -> str:
        return "font-weight: bold; padding: 4px 2px;"

    @staticmethod
    def get_preview_css(font_size: int = 14, theme: Theme = Theme.LIGHT) -> str:
        """CSS embedded in rendered preview pages (Qt web view and browser)."""
        return f"""
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem;
             background: {ColorPalette.PREVIEW_BG.get(theme)}; color: {ColorPalette.TEXT_PRIMARY.get(theme)};
             font-size: {font_size}px; line-height: 1.5; }}
      .problem-title {{ margin: 0 0 0.25rem 0; }}
      .max-attempts {{ color: {ColorPalette.TEXT_SECONDARY.get(theme)}; margin-bottom: 1rem; }}
      .question-block {{ background: {ColorPalette.PREVIEW_CARD_BG.get(theme)}; border-radius: 0.5rem;
                        padding: 1rem; margin: 1rem 0; }}
      .question-label {{ font-weight: 600; margin-bottom: 0.5rem; }}
      .choice {{ display: block; padding: 0.25rem 0; }}
      .choice.correct {{ color: {ColorPalette.SUCCESS.get(theme)}; font-weight: 600; }}
      .solution {{ background: {ColorPalette.PREVIEW_EXPLANATION_BG.get(theme)}; border-radius: 0.35rem;
                  padding: 0.75rem; margin-top: 0.75rem; }}
      .solution-header {{ font-weight: 600; }}
      .validation-item.error {{ color: {ColorPalette.ERROR.get(theme)}; }}
      .validation-item.warning {{ color: {ColorPalette.WARNING.get(theme)}; }}
      .parse-error {{ color: {ColorPalette.ERROR.get(theme)}; }}
      .parse-error pre {{ white-space: pre-wrap; }}
      details.markdown-source {{ margin-bottom: 1rem; color: {ColorPalette.TEXT_SECONDARY.get(theme)}; }}
"""
