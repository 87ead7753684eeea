"""FastAPI server exposing the live preview and the markup pipeline over HTTP."""

from __future__ import annotations

import logging
from threading import Thread
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import uvicorn

from problem_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, PREVIEW_POLL_INTERVAL_MS
from problem_app.constants.problem_constants import DEFAULT_INDENT_SIZE
from problem_app.core.editor_session import EditorSession, PreviewSnapshot, interpret_text
from problem_app.core.markup_formatter import format_markup
from problem_app.core.models import (
    ContentBlock,
    MultipleChoiceQuestion,
    NumericalQuestion,
    ParsedProblem,
    ProblemBlock,
    QuestionBlock,
    StringQuestion,
    ValidationFinding,
)
from problem_app.core.problem_renderer import render_error_html, render_problem_html

logger = logging.getLogger(__name__)

_BROWSER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>ProblemQt Preview</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body { margin: 0; font-family: 'Segoe UI', system-ui, sans-serif; display: flex; flex-direction: column; height: 100vh; }
      header { display: flex; gap: 1rem; align-items: center; padding: 0.5rem 1rem; border-bottom: 1px solid #d1d1d1; }
      #counters { color: #666; }
      iframe { flex: 1; border: none; width: 100%; }
    </style>
  </head>
  <body>
    <header>
      <strong>ProblemQt Preview</strong>
      <span id="counters"></span>
      <label><input type="checkbox" id="show-explanations" /> Show Explanations</label>
    </header>
    <iframe id="preview"></iframe>
    <script>
      const frame = document.getElementById('preview');
      const counters = document.getElementById('counters');
      const toggle = document.getElementById('show-explanations');
      let shownGeneration = null;

      function reloadFrame(generation) {
        const params = new URLSearchParams({ show_explanations: toggle.checked, generation: generation });
        frame.src = '/render?' + params.toString();
        shownGeneration = generation;
      }

      async function poll() {
        try {
          const response = await fetch('/state');
          const state = await response.json();
          counters.textContent = state.parse_error
            ? 'Parse error'
            : `${state.question_count} questions | ${state.error_count} errors | ${state.warning_count} warnings`;
          if (state.generation !== shownGeneration) {
            reloadFrame(state.generation);
          }
        } catch (error) {
          counters.textContent = 'Editor not reachable.';
        }
      }

      toggle.addEventListener('change', () => reloadFrame(shownGeneration));
      poll();
      setInterval(poll, __POLL_INTERVAL__);
    </script>
  </body>
</html>
""".replace("__POLL_INTERVAL__", str(PREVIEW_POLL_INTERVAL_MS))


class FormatPayload(BaseModel):
    """Payload schema for stateless formatting requests."""

    text: str
    indent_size: int = Field(default=DEFAULT_INDENT_SIZE, ge=0, le=8)


class ValidatePayload(BaseModel):
    """Payload schema for stateless validation requests."""

    text: str


def finding_to_dict(finding: ValidationFinding) -> dict[str, object]:
    return {
        "kind": finding.kind.value,
        "message": finding.message,
        "question_index": finding.question_index,
    }


def problem_to_dict(problem: ParsedProblem) -> dict[str, Any]:
    """JSON-friendly view of a parsed problem."""
    metadata = problem.metadata
    return {
        "metadata": {
            "display_name": metadata.display_name,
            "max_attempts": metadata.max_attempts,
            "markdown": metadata.markdown,
        },
        "intro_markup": problem.intro_markup,
        "blocks": [_block_to_dict(block) for block in problem.blocks],
    }


def _block_to_dict(block: ProblemBlock) -> dict[str, Any]:
    if isinstance(block, ContentBlock):
        return {"kind": block.kind.value, "content": block.content}

    question = block.question
    question_data: dict[str, Any] = {"kind": question.kind.value, "label": question.label}
    if isinstance(question, MultipleChoiceQuestion):
        question_data["shuffle"] = question.shuffle
        question_data["choices"] = [{"text": choice.text, "correct": choice.correct} for choice in question.choices]
    elif isinstance(question, NumericalQuestion):
        question_data["answer"] = question.answer
        question_data["tolerance"] = question.tolerance
    elif isinstance(question, StringQuestion):
        question_data["answer"] = question.answer

    explanation = None
    if block.explanation is not None:
        explanation = {
            "explanation": block.explanation.explanation,
            "html_content": block.explanation.html_content,
        }
    return {"kind": block.kind.value, "question": question_data, "explanation": explanation}


def _require_problem(snapshot: PreviewSnapshot) -> ParsedProblem:
    if snapshot.problem is None:
        raise HTTPException(status_code=422, detail=snapshot.error)
    return snapshot.problem


def _get_session_dependency(session: EditorSession):
    def dependency() -> EditorSession:
        return session

    return dependency


def create_preview_app(session: EditorSession) -> FastAPI:
    """Create a FastAPI application wired to the provided editor session."""
    app = FastAPI(title="ProblemQt Preview", version="0.1.0")
    session_dep = _get_session_dependency(session)

    @app.get("/", response_class=HTMLResponse)
    def serve_browser_page() -> str:
        return _BROWSER_PAGE_HTML

    @app.get("/state")
    def get_state(editor: EditorSession = Depends(session_dep)) -> dict[str, object]:
        snapshot = editor.get_snapshot()
        return {
            "generation": snapshot.generation,
            "question_count": snapshot.question_count,
            "content_block_count": snapshot.content_block_count,
            "error_count": snapshot.error_count,
            "warning_count": snapshot.warning_count,
            "parse_error": snapshot.error,
        }

    @app.get("/render", response_class=HTMLResponse)
    def render_preview(
        show_explanations: bool = False,
        editor: EditorSession = Depends(session_dep),
    ) -> str:
        snapshot = editor.get_snapshot()
        if snapshot.problem is None:
            return render_error_html(snapshot.error or "")
        return render_problem_html(
            snapshot.problem,
            snapshot.findings,
            show_explanations=show_explanations,
        )

    @app.get("/problem")
    def get_problem(editor: EditorSession = Depends(session_dep)) -> dict[str, Any]:
        return problem_to_dict(_require_problem(editor.get_snapshot()))

    @app.get("/findings")
    def get_findings(editor: EditorSession = Depends(session_dep)) -> list[dict[str, object]]:
        snapshot = editor.get_snapshot()
        _require_problem(snapshot)
        return [finding_to_dict(finding) for finding in snapshot.findings]

    @app.post("/format")
    def format_text(payload: FormatPayload) -> dict[str, str]:
        return {"text": format_markup(payload.text, payload.indent_size)}

    @app.post("/validate")
    def validate_text(payload: ValidatePayload) -> dict[str, object]:
        snapshot = interpret_text(payload.text)
        _require_problem(snapshot)
        return {
            "question_count": snapshot.question_count,
            "findings": [finding_to_dict(finding) for finding in snapshot.findings],
        }

    return app


def start_preview_server(
    session: EditorSession,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_preview_app(session)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PreviewServer", daemon=True)
    thread.start()
    logger.info("Preview server listening on http://%s:%d/", host, port)
    return thread
