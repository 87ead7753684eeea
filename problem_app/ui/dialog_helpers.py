"""Helper functions for common dialog patterns in the editor UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget


def _build_message_box(
    parent: QWidget,
    icon: QMessageBox.Icon,
    title: str,
    message: str,
    font_point_size: int | None,
) -> QMessageBox:
    msg_box = QMessageBox(parent)
    msg_box.setIcon(icon)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    if font_point_size is not None and font_point_size > 0:
        font: QFont = msg_box.font()
        font.setPointSize(font_point_size)
        msg_box.setFont(font)
        msg_box.setStyleSheet(
            f"QLabel {{ font-size: {font_point_size}pt; }}\n"
            f"QPushButton {{ font-size: {font_point_size}pt; }}"
        )
    return msg_box


def check_unsaved_changes(parent: QWidget, *, font_point_size: int | None = None) -> bool | None:
    """Ask whether to save the current problem before it is replaced.

    Args:
        parent: Parent widget for the dialog
        font_point_size: Optional point size for the dialog text

    Returns:
        True if user wants to save, False if discard, None if cancelled
    """
    msg_box = _build_message_box(
        parent,
        QMessageBox.Question,
        "Unsaved Changes",
        "The problem has unsaved changes. Do you want to save them?",
        font_point_size,
    )
    msg_box.setStandardButtons(QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel)
    msg_box.setDefaultButton(QMessageBox.Save)

    msg_box.exec()
    reply = msg_box.standardButton(msg_box.clickedButton())
    if reply == QMessageBox.Save:
        return True
    elif reply == QMessageBox.Discard:
        return False
    else:  # Cancel
        return None


def show_error(parent: QWidget, title: str, message: str, *, font_point_size: int | None = None) -> None:
    _build_message_box(parent, QMessageBox.Critical, title, message, font_point_size).exec()


def show_info(parent: QWidget, title: str, message: str, *, font_point_size: int | None = None) -> None:
    """Show information dialog, e.g. the About box."""
    _build_message_box(parent, QMessageBox.Information, title, message, font_point_size).exec()


def show_warning(parent: QWidget, title: str, message: str, *, font_point_size: int | None = None) -> None:
    """Show warning dialog, e.g. for a file that opened but does not parse."""
    _build_message_box(parent, QMessageBox.Warning, title, message, font_point_size).exec()
