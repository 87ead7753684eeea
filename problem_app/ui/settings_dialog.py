"""Settings dialog for configuring ProblemQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from problem_app.core.editor_settings import EditorSettings


class SettingsDialog(QDialog):
    """Dialog for editing a copy of the current :class:`EditorSettings`."""

    def __init__(self, parent: QWidget | None = None, settings: EditorSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or EditorSettings()
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Font settings group
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        self.ui_font_spinbox = self._add_spin_row(
            font_layout, "UI font size (buttons, labels):", 8, 24, self._settings.ui_font_size, " pt"
        )
        self.editor_font_spinbox = self._add_spin_row(
            font_layout, "Editor font size:", 8, 32, self._settings.editor_font_size, " pt"
        )
        self.preview_font_spinbox = self._add_spin_row(
            font_layout, "Preview font size:", 10, 32, self._settings.preview_font_size, " px"
        )
        layout.addWidget(font_group)

        # Formatting group
        format_group = QGroupBox("Formatting")
        format_layout = QVBoxLayout()
        format_group.setLayout(format_layout)
        self.indent_spinbox = self._add_spin_row(
            format_layout, "Spaces per indent level:", 0, 8, self._settings.indent_size, ""
        )
        self.indent_spinbox.setToolTip("Used by Format Markup.")
        layout.addWidget(format_group)

        # Display settings group
        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._settings.dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        self.preview_server_checkbox = QCheckBox("Serve the preview to browsers (applies on next start)")
        self.preview_server_checkbox.setToolTip(
            "When enabled, the live preview is also available from a local web page."
        )
        self.preview_server_checkbox.setChecked(self._settings.preview_server_enabled)
        display_layout.addWidget(self.preview_server_checkbox)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    @staticmethod
    def _add_spin_row(
        layout: QVBoxLayout,
        label_text: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str,
    ) -> QSpinBox:
        row = QHBoxLayout()
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(max(minimum, min(maximum, value)))
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(QLabel(label_text))
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_settings(self) -> EditorSettings:
        """Return the settings as edited in the dialog."""
        return EditorSettings(
            indent_size=self.indent_spinbox.value(),
            ui_font_size=self.ui_font_spinbox.value(),
            editor_font_size=self.editor_font_spinbox.value(),
            preview_font_size=self.preview_font_spinbox.value(),
            show_explanations=self._settings.show_explanations,
            dark_theme=self.dark_theme_checkbox.isChecked(),
            preview_server_enabled=self.preview_server_checkbox.isChecked(),
        )
