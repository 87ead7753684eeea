"""Reading and writing problem markup files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from problem_app.constants.problem_constants import DEFAULT_FILE_NAME

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def load_problem_text(file_path: Path) -> str:
    """Read a problem file as UTF-8 text."""

    text = file_path.read_text(encoding="utf-8")
    logger.info("Loaded %s (%d characters)", file_path, len(text))
    return text


def save_problem_text(file_path: Path, text: str) -> None:
    """Persist markup to disk, creating parent folders as needed."""

    if not text.strip():
        raise ValueError("Cannot save an empty problem.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")
    logger.info("Saved problem to %s", file_path)


def suggest_file_name(display_name: str | None) -> str:
    """Derive a download name such as ``My_Problem.xml`` from a display name."""

    stripped = (display_name or "").strip()
    if not stripped:
        return DEFAULT_FILE_NAME
    return f"{_WHITESPACE_RUN.sub('_', stripped)}.xml"
