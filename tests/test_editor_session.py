"""
Unit Tests for the editor session and its document buffer.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from problem_app.constants.problem_constants import SAMPLE_PROBLEM
from problem_app.core import editor_session
from problem_app.core.editor_session import EditorSession, interpret_text
from problem_app.core.markup_formatter import format_markup
from problem_app.core.services.document_buffer import DocumentBuffer


class TestDocumentBuffer:
    """Tests for DocumentBuffer."""

    def test_replace_text_bumps_generation_only_on_change(self):
        buffer = DocumentBuffer("a")

        assert buffer.replace_text("a") is False
        assert buffer.get_generation() == 0
        assert buffer.replace_text("b") is True
        assert buffer.get_generation() == 1

    def test_unsaved_changes_compare_against_saved_text(self, tmp_path):
        buffer = DocumentBuffer("a")
        assert buffer.has_unsaved_changes() is False

        buffer.replace_text("b")
        assert buffer.has_unsaved_changes() is True

        buffer.replace_text("a")
        assert buffer.has_unsaved_changes() is False

        buffer.replace_text("c")
        buffer.mark_saved(tmp_path / "c.xml")
        assert buffer.has_unsaved_changes() is False
        assert buffer.get_file_path() == tmp_path / "c.xml"

    def test_mark_saved_without_path_keeps_previous_path(self, tmp_path):
        buffer = DocumentBuffer()
        buffer.mark_saved(tmp_path / "first.xml")

        buffer.mark_saved()

        assert buffer.get_file_path() == tmp_path / "first.xml"


class TestInterpretText:
    """Tests for interpret_text."""

    def test_valid_text_produces_problem_and_findings(self, single_question_text):
        snapshot = interpret_text(single_question_text, generation=4)

        assert snapshot.generation == 4
        assert snapshot.error is None
        assert snapshot.question_count == 1
        assert snapshot.error_count == 0
        assert snapshot.warning_count == 1

    def test_malformed_text_produces_error_only(self):
        snapshot = interpret_text("<problem><html></problem>")

        assert snapshot.problem is None
        assert "mismatched tag" in snapshot.error
        assert snapshot.findings == ()
        assert snapshot.question_count == 0

    def test_missing_root_produces_error(self):
        snapshot = interpret_text("<course/>")

        assert snapshot.problem is None
        assert snapshot.error == "No <problem> element found"


class TestEditorSession:
    """Tests for EditorSession."""

    def test_new_session_interprets_initial_text(self):
        session = EditorSession(SAMPLE_PROBLEM)

        snapshot = session.get_snapshot()
        assert snapshot.generation == 0
        assert snapshot.question_count == 2
        assert snapshot.findings == ()
        assert session.suggested_file_name() == "Sample_Problem.xml"

    def test_set_text_reparses_on_every_change(self, single_question_text):
        session = EditorSession(SAMPLE_PROBLEM)

        snapshot = session.set_text(single_question_text)

        assert snapshot.generation == 1
        assert snapshot.question_count == 1
        assert session.get_text() == single_question_text

    def test_set_same_text_returns_existing_snapshot(self):
        session = EditorSession(SAMPLE_PROBLEM)
        first = session.get_snapshot()

        assert session.set_text(SAMPLE_PROBLEM) is first

    def test_parse_error_keeps_text_and_reports_error(self):
        session = EditorSession(SAMPLE_PROBLEM)

        snapshot = session.set_text("<problem>")

        assert snapshot.problem is None
        assert snapshot.error
        assert session.get_text() == "<problem>"
        assert session.suggested_file_name() == "problem.xml"

    def test_format_text_updates_buffer(self, single_question_text):
        session = EditorSession(single_question_text)

        formatted = session.format_text(indent_size=4)

        assert session.get_text() == formatted
        assert formatted.startswith('<problem display_name="T" max_attempts="2">\n    <multiplechoiceresponse>')
        assert session.get_snapshot().question_count == 1

    def test_format_malformed_text_leaves_it_alone(self):
        session = EditorSession("<problem>")

        assert session.format_text() == "<problem>"
        assert session.get_snapshot().generation == 0

    def test_edit_during_format_is_applied_after_it(self, monkeypatch, single_question_text):
        session = EditorSession(single_question_text)
        concurrent_text = "<problem/>"
        results = {}

        def slow_format(text, indent_size):
            editor = threading.Thread(target=session.set_text, args=(concurrent_text,))
            editor.start()
            editor.join(timeout=0.2)
            results["edit_waited"] = editor.is_alive()
            results["editor"] = editor
            return format_markup(text, indent_size)

        monkeypatch.setattr(editor_session, "format_markup", slow_format)

        formatted = session.format_text()
        results["editor"].join(timeout=5)

        assert results["edit_waited"] is True
        assert formatted != concurrent_text
        assert session.get_text() == concurrent_text
        assert session.get_snapshot().question_count == 0

    def test_save_and_load_track_unsaved_changes(self, tmp_path, mixed_problem_text):
        session = EditorSession(SAMPLE_PROBLEM)
        session.mark_saved()
        assert session.has_unsaved_changes() is False

        session.set_text(mixed_problem_text)
        assert session.has_unsaved_changes() is True

        target = tmp_path / "mixed.xml"
        session.save_file(target)
        assert session.has_unsaved_changes() is False
        assert session.get_file_path() == target
        assert target.read_text(encoding="utf-8") == mixed_problem_text

        other = EditorSession()
        snapshot = other.load_file(target)
        assert snapshot.question_count == 3
        assert other.get_text() == mixed_problem_text
        assert other.has_unsaved_changes() is False
        assert other.get_file_path() == target

    def test_concurrent_updates_leave_a_consistent_snapshot(self, single_question_text, mixed_problem_text):
        session = EditorSession()
        texts = [single_question_text, mixed_problem_text] * 20

        with ThreadPoolExecutor(max_workers=4) as executor:
            list(executor.map(session.set_text, texts))

        snapshot = session.get_snapshot()
        expected = 1 if session.get_text() == single_question_text else 3
        assert snapshot.question_count == expected
