"""
Unit Tests for the FastAPI preview server.
"""

import pytest
from fastapi.testclient import TestClient

from problem_app.constants.problem_constants import SAMPLE_PROBLEM
from problem_app.core.editor_session import EditorSession
from problem_app.server.preview_server import create_preview_app


@pytest.fixture
def session(mixed_problem_text) -> EditorSession:
    return EditorSession(mixed_problem_text)


@pytest.fixture
def client(session) -> TestClient:
    return TestClient(create_preview_app(session))


class TestSessionEndpoints:
    """Endpoints that read the shared editor session."""

    def test_browser_page_polls_state(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "fetch('/state')" in response.text
        assert "__POLL_INTERVAL__" not in response.text

    def test_state_reports_counters(self, client):
        state = client.get("/state").json()

        assert state == {
            "generation": 0,
            "question_count": 3,
            "content_block_count": 1,
            "error_count": 0,
            "warning_count": 1,
            "parse_error": None,
        }

    def test_state_follows_session_edits(self, client, session):
        session.set_text("<problem><html></problem>")

        state = client.get("/state").json()

        assert state["generation"] == 1
        assert state["question_count"] == 0
        assert "mismatched tag" in state["parse_error"]

    def test_render_page(self, client):
        response = client.get("/render")

        assert response.status_code == 200
        assert '<h1 class="problem-title">Mixed</h1>' in response.text
        assert "Answer: 3.14" not in response.text

    def test_render_page_with_explanations(self, client):
        response = client.get("/render", params={"show_explanations": "true"})

        assert "Answer: 3.14" in response.text

    def test_render_parse_error_page(self, client, session):
        session.set_text("<course/>")

        response = client.get("/render")

        assert response.status_code == 200
        assert "XML Parse Error" in response.text
        assert "No &lt;problem&gt; element found" in response.text

    def test_problem_json(self, client):
        data = client.get("/problem").json()

        assert data["metadata"] == {"display_name": "Mixed", "max_attempts": None, "markdown": "Some **markdown**"}
        assert data["intro_markup"] == "<p>Intro</p>"
        assert [block["kind"] for block in data["blocks"]] == ["question", "content", "question", "question"]

        multiple_choice = data["blocks"][0]["question"]
        assert multiple_choice["kind"] == "multiplechoice"
        assert multiple_choice["shuffle"] is True
        assert multiple_choice["choices"] == [
            {"text": "Yes", "correct": True},
            {"text": "No", "correct": False},
        ]

        numerical = data["blocks"][2]
        assert numerical["question"] == {"kind": "numerical", "label": "Pi?", "answer": "3.14", "tolerance": ""}
        assert numerical["explanation"] is None

    def test_problem_json_unavailable_on_parse_error(self, client, session):
        session.set_text("<problem>")

        response = client.get("/problem")

        assert response.status_code == 422
        assert response.json()["detail"]

    def test_findings(self, client):
        assert client.get("/findings").json() == [
            {"kind": "warning", "message": "Question 2 is missing an explanation", "question_index": 2},
        ]


class TestStatelessEndpoints:
    """Endpoints that work on the posted text only."""

    def test_format(self, client, single_question_text):
        response = client.post("/format", json={"text": single_question_text, "indent_size": 4})

        assert response.status_code == 200
        assert response.json()["text"].startswith('<problem display_name="T" max_attempts="2">\n    <')

    def test_format_does_not_touch_session(self, client, session, single_question_text):
        client.post("/format", json={"text": single_question_text})

        assert session.get_snapshot().generation == 0

    def test_format_malformed_returns_input(self, client):
        response = client.post("/format", json={"text": "<problem>"})

        assert response.json() == {"text": "<problem>"}

    def test_format_rejects_out_of_range_indent(self, client):
        response = client.post("/format", json={"text": SAMPLE_PROBLEM, "indent_size": 20})

        assert response.status_code == 422

    def test_validate(self, client, single_question_text):
        response = client.post("/validate", json={"text": single_question_text})

        assert response.status_code == 200
        assert response.json() == {
            "question_count": 1,
            "findings": [
                {"kind": "warning", "message": "Question 1 is missing an explanation", "question_index": 1},
            ],
        }

    def test_validate_malformed(self, client):
        response = client.post("/validate", json={"text": "<problem><html></problem>"})

        assert response.status_code == 422
        assert "mismatched tag" in response.json()["detail"]
