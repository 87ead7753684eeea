"""Component holding the raw markup editor."""

from __future__ import annotations

from PySide6.QtCore import QSignalBlocker, QTimer, Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from problem_app.constants.ui_constants import EDITOR_PANEL_TITLE, PREVIEW_DEBOUNCE_MS
from problem_app.styling import Styles, Theme


class EditorPanel(QWidget):
    """Plain-text markup editor that reports edits after a short pause."""

    text_settled = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()
        self._configure_debounce_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.header_label = QLabel(EDITOR_PANEL_TITLE, self)
        self.header_label.setStyleSheet(Styles.get_panel_header_style())
        layout.addWidget(self.header_label)

        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setLineWrapMode(QPlainTextEdit.WidgetWidth)
        self.text_edit.setTabStopDistance(4 * self.text_edit.fontMetrics().horizontalAdvance(" "))
        self.text_edit.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.text_edit)

    def _configure_debounce_timer(self) -> None:
        self.debounce_timer = QTimer(self)
        self.debounce_timer.setSingleShot(True)
        self.debounce_timer.setInterval(PREVIEW_DEBOUNCE_MS)
        self.debounce_timer.timeout.connect(self._emit_settled_text)

    def _on_text_changed(self) -> None:
        self.debounce_timer.start()

    def _emit_settled_text(self) -> None:
        self.text_settled.emit(self.text_edit.toPlainText())

    def get_text(self) -> str:
        return self.text_edit.toPlainText()

    def set_text(self, text: str) -> None:
        """Replace the editor contents without triggering a debounced update."""
        if text == self.text_edit.toPlainText():
            return
        with QSignalBlocker(self.text_edit):
            cursor = QTextCursor(self.text_edit.document())
            cursor.select(QTextCursor.Document)
            cursor.insertText(text)
        self.debounce_timer.stop()

    def flush_pending_edit(self) -> None:
        """Emit immediately if an edit is still waiting for the debounce timer."""
        if self.debounce_timer.isActive():
            self.debounce_timer.stop()
            self._emit_settled_text()

    def apply_style(self, font_size: int, theme: Theme) -> None:
        self.text_edit.setStyleSheet(Styles.get_editor_style(font_size, theme))
