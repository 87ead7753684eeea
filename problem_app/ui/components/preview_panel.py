"""Component showing the rendered problem next to the editor."""

from __future__ import annotations

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from problem_app.constants.ui_constants import PREVIEW_PANEL_TITLE
from problem_app.core.editor_session import PreviewSnapshot
from problem_app.core.problem_renderer import render_error_html, render_problem_html
from problem_app.styling import Styles, Theme


class PreviewPanel(QWidget):
    """Web view rendering the latest :class:`PreviewSnapshot`."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._show_explanations: bool = False
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._snapshot: PreviewSnapshot | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.header_label = QLabel(PREVIEW_PANEL_TITLE, self)
        self.header_label.setStyleSheet(Styles.get_panel_header_style())
        layout.addWidget(self.header_label)

        self.preview_view = QWebEngineView(self)
        layout.addWidget(self.preview_view)

    def show_snapshot(self, snapshot: PreviewSnapshot) -> None:
        self._snapshot = snapshot
        self._refresh()

    def set_show_explanations(self, enabled: bool) -> None:
        self._show_explanations = enabled
        self._refresh()

    def apply_style(self, font_size: int, theme: Theme) -> None:
        self._font_size = font_size
        self._theme = theme
        self._refresh()

    def _refresh(self) -> None:
        snapshot = self._snapshot
        if snapshot is None:
            return
        if snapshot.problem is None:
            html = render_error_html(snapshot.error or "", font_size=self._font_size, theme=self._theme)
        else:
            html = render_problem_html(
                snapshot.problem,
                snapshot.findings,
                show_explanations=self._show_explanations,
                font_size=self._font_size,
                theme=self._theme,
            )
        self.preview_view.setHtml(html)
