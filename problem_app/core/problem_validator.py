"""Authoring checks over a parsed problem."""

from __future__ import annotations

from typing import assert_never

from problem_app.constants.problem_constants import EXPLANATION_PLACEHOLDER_TEXT
from problem_app.core.models import (
    FindingKind,
    MultipleChoiceQuestion,
    NumericalQuestion,
    ParsedProblem,
    QuestionBlock,
    StringQuestion,
    ValidationFinding,
)
from problem_app.core.problem_queries import iter_question_blocks


def validate_problem(problem: ParsedProblem) -> list[ValidationFinding]:
    """Return findings in question order; never raises for a parsed problem."""
    findings: list[ValidationFinding] = []
    for number, block in iter_question_blocks(problem):
        findings.extend(_check_question(number, block))
    return findings


def _check_question(number: int, block: QuestionBlock) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []
    question = block.question
    match question:
        case MultipleChoiceQuestion():
            if not any(choice.correct for choice in question.choices):
                findings.append(
                    ValidationFinding(FindingKind.ERROR, f"Question {number} has no correct answer", number)
                )
            if any(not choice.text.strip() for choice in question.choices):
                findings.append(
                    ValidationFinding(FindingKind.WARNING, f"Question {number} has empty choice(s)", number)
                )
        case NumericalQuestion() | StringQuestion():
            pass
        case unreachable:
            assert_never(unreachable)

    if _is_missing_explanation(block):
        findings.append(
            ValidationFinding(FindingKind.WARNING, f"Question {number} is missing an explanation", number)
        )
    return findings


def _is_missing_explanation(block: QuestionBlock) -> bool:
    explanation = block.explanation
    if explanation is None:
        return True
    return not explanation.explanation.strip() or explanation.explanation == EXPLANATION_PLACEHOLDER_TEXT
