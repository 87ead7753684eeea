"""Editor state shared between the Qt UI and the preview server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from problem_app.constants.problem_constants import DEFAULT_INDENT_SIZE
from problem_app.core.errors import ProblemParseError
from problem_app.core.markup_formatter import format_markup
from problem_app.core.models import FindingKind, ParsedProblem, ValidationFinding
from problem_app.core.problem_files import load_problem_text, save_problem_text, suggest_file_name
from problem_app.core.problem_parser import parse_problem
from problem_app.core.problem_queries import count_content_blocks, count_findings, count_questions
from problem_app.core.problem_validator import validate_problem
from problem_app.core.services.document_buffer import DocumentBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PreviewSnapshot:
    """Outcome of interpreting one version of the buffer.

    Exactly one of ``problem`` and ``error`` is set.
    """

    generation: int
    problem: ParsedProblem | None = None
    error: str | None = None
    findings: tuple[ValidationFinding, ...] = ()

    @property
    def question_count(self) -> int:
        return count_questions(self.problem) if self.problem is not None else 0

    @property
    def content_block_count(self) -> int:
        return count_content_blocks(self.problem) if self.problem is not None else 0

    @property
    def error_count(self) -> int:
        return count_findings(self.findings, FindingKind.ERROR)

    @property
    def warning_count(self) -> int:
        return count_findings(self.findings, FindingKind.WARNING)


def interpret_text(text: str, generation: int = 0) -> PreviewSnapshot:
    """Parse and validate ``text``, capturing parse failures in the snapshot."""
    try:
        problem = parse_problem(text)
    except ProblemParseError as exc:
        logger.debug("Generation %d could not be parsed: %s", generation, exc)
        return PreviewSnapshot(generation=generation, error=str(exc))
    return PreviewSnapshot(
        generation=generation,
        problem=problem,
        findings=tuple(validate_problem(problem)),
    )


class EditorSession:
    """Facade over the document buffer and its latest interpretation."""

    def __init__(self, text: str = "") -> None:
        self._lock = Lock()
        self._buffer = DocumentBuffer(text)
        self._snapshot = interpret_text(text, self._buffer.get_generation())

    def set_text(self, text: str) -> PreviewSnapshot:
        """Replace the markup and fully re-parse it."""
        with self._lock:
            if self._buffer.replace_text(text):
                self._snapshot = interpret_text(text, self._buffer.get_generation())
            return self._snapshot

    def get_text(self) -> str:
        with self._lock:
            return self._buffer.get_text()

    def get_snapshot(self) -> PreviewSnapshot:
        with self._lock:
            return self._snapshot

    def format_text(self, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
        """Pretty-print the buffer in place and return the new text."""
        with self._lock:
            formatted = format_markup(self._buffer.get_text(), indent_size)
            if self._buffer.replace_text(formatted):
                self._snapshot = interpret_text(formatted, self._buffer.get_generation())
            return formatted

    def load_file(self, file_path: Path) -> PreviewSnapshot:
        text = load_problem_text(file_path)
        with self._lock:
            self._buffer.replace_text(text)
            self._buffer.mark_saved(file_path)
            self._snapshot = interpret_text(text, self._buffer.get_generation())
            return self._snapshot

    def save_file(self, file_path: Path) -> None:
        with self._lock:
            save_problem_text(file_path, self._buffer.get_text())
            self._buffer.mark_saved(file_path)

    def has_unsaved_changes(self) -> bool:
        with self._lock:
            return self._buffer.has_unsaved_changes()

    def mark_saved(self) -> None:
        """Treat the current text as the clean baseline (e.g. a freshly loaded sample)."""
        with self._lock:
            self._buffer.mark_saved()

    def get_file_path(self) -> Path | None:
        with self._lock:
            return self._buffer.get_file_path()

    def suggested_file_name(self) -> str:
        snapshot = self.get_snapshot()
        display_name = snapshot.problem.metadata.display_name if snapshot.problem is not None else None
        return suggest_file_name(display_name)
