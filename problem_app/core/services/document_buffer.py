"""Service holding the raw markup currently being edited."""

from __future__ import annotations

from pathlib import Path


class DocumentBuffer:
    """Tracks the editor text, its change generation and its saved state."""

    def __init__(self, text: str = "") -> None:
        self._text: str = text
        self._generation: int = 0
        self._saved_text: str = text
        self._file_path: Path | None = None

    def replace_text(self, text: str) -> bool:
        """Replace the buffer contents. Returns True if the text changed."""
        if text == self._text:
            return False
        self._text = text
        self._generation += 1
        return True

    def get_text(self) -> str:
        return self._text

    def get_generation(self) -> int:
        return self._generation

    def get_file_path(self) -> Path | None:
        return self._file_path

    def mark_saved(self, file_path: Path | None = None) -> None:
        """Record the current text as the saved baseline."""
        self._saved_text = self._text
        if file_path is not None:
            self._file_path = file_path

    def has_unsaved_changes(self) -> bool:
        return self._text != self._saved_text
