"""
Unit Tests for derived problem queries.
"""

from problem_app.core.models import FindingKind, ValidationFinding
from problem_app.core.problem_parser import parse_problem
from problem_app.core.problem_queries import (
    count_content_blocks,
    count_findings,
    count_questions,
    iter_question_blocks,
)


class TestProblemQueries:
    """Tests for counting helpers."""

    def test_count_questions_single_question(self, single_question_text):
        assert count_questions(parse_problem(single_question_text)) == 1

    def test_count_questions_ignores_content_blocks(self, mixed_problem_text):
        problem = parse_problem(mixed_problem_text)

        assert count_questions(problem) == 3
        assert count_content_blocks(problem) == 1

    def test_count_questions_empty_problem(self):
        assert count_questions(parse_problem("<problem/>")) == 0

    def test_count_questions_ignores_unknown_top_level_elements(self):
        problem = parse_problem(
            "<problem><optionresponse/><stringresponse/><div><numericalresponse/></div></problem>"
        )

        assert count_questions(problem) == 1

    def test_iter_question_blocks_numbers_from_one(self, mixed_problem_text):
        numbered = list(iter_question_blocks(parse_problem(mixed_problem_text)))

        assert [number for number, _ in numbered] == [1, 2, 3]
        assert numbered[1][1].question.label == "Pi?"

    def test_count_findings_by_kind(self):
        findings = [
            ValidationFinding(FindingKind.ERROR, "a", 1),
            ValidationFinding(FindingKind.WARNING, "b", 1),
            ValidationFinding(FindingKind.WARNING, "c", 2),
        ]

        assert count_findings(findings, FindingKind.ERROR) == 1
        assert count_findings(findings, FindingKind.WARNING) == 2
        assert count_findings([], FindingKind.ERROR) == 0
