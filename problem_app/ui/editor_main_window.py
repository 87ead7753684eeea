"""Qt main window with the markup editor beside the live preview."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QDialog,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from problem_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_MARKDOWN,
)
from problem_app.constants.ui_constants import (
    COUNTERS_TEMPLATE,
    FORMAT_SKIPPED_MESSAGE,
    OPEN_DIALOG_TITLE,
    PARSE_ERROR_STATUS,
    PROBLEM_FILE_FILTER,
    SAVE_DIALOG_TITLE,
    SPLITTER_MIN_PANEL_WIDTH,
    TOOLBAR_ABOUT_BUTTON,
    TOOLBAR_FORMAT_BUTTON,
    TOOLBAR_HELP_BUTTON,
    TOOLBAR_OPEN_BUTTON,
    TOOLBAR_SAVE_BUTTON,
    TOOLBAR_SETTINGS_BUTTON,
    TOOLBAR_SHOW_EXPLANATIONS,
    WINDOW_TITLE,
)
from problem_app.core.editor_session import EditorSession, PreviewSnapshot
from problem_app.core.editor_settings import EditorSettings
from problem_app.core.markdown_math_renderer import renderer
from problem_app.styling import Styles
from problem_app.ui.components.editor_panel import EditorPanel
from problem_app.ui.components.preview_panel import PreviewPanel
from problem_app.ui.dialog_helpers import check_unsaved_changes, show_error, show_info, show_warning
from problem_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class EditorMainWindow(QMainWindow):
    """Main window: toolbar, counters and the editor/preview splitter."""

    def __init__(
        self,
        session: EditorSession,
        settings: EditorSettings | None = None,
        preview_url: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.session = session
        self.settings = settings or EditorSettings()
        self.preview_url = preview_url

        self._build_ui()
        self._apply_styles()
        self.editor_panel.set_text(self.session.get_text())
        self._show_snapshot(self.session.get_snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.splitter = QSplitter(Qt.Horizontal, self)
        self.editor_panel = EditorPanel(self)
        self.editor_panel.text_settled.connect(self._handle_text_settled)
        self.preview_panel = PreviewPanel(self)
        for panel in (self.editor_panel, self.preview_panel):
            panel.setMinimumWidth(SPLITTER_MIN_PANEL_WIDTH)
            self.splitter.addWidget(panel)
        self.splitter.setChildrenCollapsible(False)
        self.splitter.setSizes([1, 1])
        root_layout.addWidget(self.splitter)

        self.status_label = QLabel("", self)
        if self.preview_url:
            self.status_label.setText(f"Browser preview: {self.preview_url}")
        root_layout.addWidget(self.status_label)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.open_button = QPushButton(TOOLBAR_OPEN_BUTTON, self)
        self.open_button.clicked.connect(self._handle_open_file)
        button_row.addWidget(self.open_button)

        self.save_button = QPushButton(TOOLBAR_SAVE_BUTTON, self)
        self.save_button.clicked.connect(self._handle_save_file)
        button_row.addWidget(self.save_button)

        self.format_button = QPushButton(TOOLBAR_FORMAT_BUTTON, self)
        self.format_button.clicked.connect(self._handle_format)
        button_row.addWidget(self.format_button)

        self.explanations_button = QPushButton(TOOLBAR_SHOW_EXPLANATIONS, self)
        self.explanations_button.setCheckable(True)
        self.explanations_button.setChecked(self.settings.show_explanations)
        self.explanations_button.toggled.connect(self._handle_show_explanations)
        button_row.addWidget(self.explanations_button)

        button_row.addStretch()
        self.counters_label = QLabel("", self)
        button_row.addWidget(self.counters_label)
        button_row.addStretch()

        self.settings_button = QPushButton(TOOLBAR_SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(TOOLBAR_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(TOOLBAR_HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def _handle_text_settled(self, text: str) -> None:
        self._show_snapshot(self.session.set_text(text))

    def _show_snapshot(self, snapshot: PreviewSnapshot) -> None:
        self.preview_panel.show_snapshot(snapshot)
        if snapshot.problem is None:
            self.counters_label.setText(PARSE_ERROR_STATUS)
        else:
            self.counters_label.setText(
                COUNTERS_TEMPLATE.format(
                    questions=snapshot.question_count,
                    errors=snapshot.error_count,
                    warnings=snapshot.warning_count,
                )
            )
        self._update_window_title()

    def _update_window_title(self) -> None:
        file_path = self.session.get_file_path()
        name = file_path.name if file_path is not None else self.session.suggested_file_name()
        marker = "*" if self.session.has_unsaved_changes() else ""
        self.setWindowTitle(f"{marker}{name} - {WINDOW_TITLE}")

    def _handle_format(self) -> None:
        self.editor_panel.flush_pending_edit()
        before = self.session.get_text()
        formatted = self.session.format_text(self.settings.indent_size)
        if formatted == before:
            self.status_label.setText(FORMAT_SKIPPED_MESSAGE)
            return
        self.editor_panel.set_text(formatted)
        self._show_snapshot(self.session.get_snapshot())

    def _handle_show_explanations(self, checked: bool) -> None:
        self.settings.show_explanations = checked
        self.preview_panel.set_show_explanations(checked)

    def _confirm_discard_or_save(self) -> bool:
        """Resolve unsaved changes. Returns True if it is ok to proceed."""
        self.editor_panel.flush_pending_edit()
        if not self.session.has_unsaved_changes():
            return True

        result = check_unsaved_changes(self, font_point_size=self.settings.ui_font_size)
        if result is True:  # Save
            return self._handle_save_file()
        elif result is False:  # Discard
            return True
        else:  # Cancel (None)
            return False

    def _handle_open_file(self) -> None:
        if not self._confirm_discard_or_save():
            return

        start_dir = self.session.get_file_path() or Path.home()
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            OPEN_DIALOG_TITLE,
            str(start_dir),
            PROBLEM_FILE_FILTER,
        )
        if not file_path:
            return
        self.open_path(Path(file_path))

    def open_path(self, file_path: Path) -> bool:
        try:
            snapshot = self.session.load_file(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not open %s: %s", file_path, exc)
            show_error(self, "Open failed", str(exc), font_point_size=self.settings.ui_font_size)
            return False

        self.editor_panel.set_text(self.session.get_text())
        self._show_snapshot(snapshot)
        self.status_label.setText(f"Opened {file_path}.")
        if snapshot.error is not None:
            show_warning(
                self,
                "Problem not parsed",
                f"{file_path.name} opened, but it could not be parsed:\n\n{snapshot.error}",
                font_point_size=self.settings.ui_font_size,
            )
        return True

    def _handle_save_file(self) -> bool:
        self.editor_panel.flush_pending_edit()
        default_path = self.session.get_file_path() or (Path.cwd() / self.session.suggested_file_name())
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            SAVE_DIALOG_TITLE,
            str(default_path),
            PROBLEM_FILE_FILTER,
        )
        if not file_path:
            return False

        try:
            self.session.save_file(Path(file_path))
        except (OSError, ValueError) as exc:
            show_error(self, "Save failed", str(exc), font_point_size=self.settings.ui_font_size)
            return False

        self._update_window_title()
        self.status_label.setText(f"Saved {file_path}.")
        return True

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.settings)
        if dialog.exec():
            self.settings = dialog.get_settings()
            self.settings.show_explanations = self.explanations_button.isChecked()
            self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        if self.preview_url:
            details += f"\n\nBrowser preview: {self.preview_url}"
        show_info(self, f"About {APP_NAME}", details, font_point_size=self.settings.ui_font_size)

    def _handle_help(self) -> None:
        dialog = QDialog(self)
        dialog.setWindowTitle(f"{APP_NAME} Help")
        dialog.resize(640, 520)
        layout = QVBoxLayout()
        dialog.setLayout(layout)
        view = QWebEngineView(dialog)
        view.setHtml(
            renderer.render_full_document(
                HELP_MARKDOWN,
                title=f"{APP_NAME} Help",
                font_size=self.settings.preview_font_size,
                theme=self.settings.theme,
            )
        )
        layout.addWidget(view)
        dialog.exec()

    def _apply_styles(self) -> None:
        theme = self.settings.theme
        self.setStyleSheet(Styles.get_main_window_style(theme))

        ui_style = f"font-size: {self.settings.ui_font_size}pt;"
        buttons = [
            self.open_button,
            self.save_button,
            self.format_button,
            self.explanations_button,
            self.settings_button,
            self.about_button,
            self.help_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)
        self.counters_label.setStyleSheet(ui_style)

        self.editor_panel.apply_style(self.settings.editor_font_size, theme)
        self.preview_panel.set_show_explanations(self.settings.show_explanations)
        self.preview_panel.apply_style(self.settings.preview_font_size, theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        if self._confirm_discard_or_save():
            event.accept()
        else:
            event.ignore()
