"""Application entry point for the ProblemQt editor."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from problem_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from problem_app.constants.problem_constants import SAMPLE_PROBLEM
from problem_app.constants.ui_constants import DEFAULT_PROBLEM_PATH
from problem_app.core.editor_session import EditorSession
from problem_app.core.editor_settings import EditorSettings
from problem_app.server.preview_server import start_preview_server
from problem_app.ui.editor_main_window import EditorMainWindow
from problem_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the preview server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting ProblemQt editor")

    settings = EditorSettings()
    session = EditorSession(SAMPLE_PROBLEM)
    session.mark_saved()

    preview_url = None
    if settings.preview_server_enabled:
        start_preview_server(session=session, host=DEFAULT_HOST, port=DEFAULT_PORT)
        preview_url = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}/"

    app = QApplication(sys.argv)
    window = EditorMainWindow(session=session, settings=settings, preview_url=preview_url)

    startup_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(DEFAULT_PROBLEM_PATH)
    if startup_path.exists():
        window.open_path(startup_path)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
