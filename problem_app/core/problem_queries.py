"""Small derived queries over parsed problems, used to drive the UI."""

from __future__ import annotations

from typing import Iterable, Iterator

from problem_app.core.models import (
    ContentBlock,
    FindingKind,
    ParsedProblem,
    QuestionBlock,
    ValidationFinding,
)


def iter_question_blocks(problem: ParsedProblem) -> Iterator[tuple[int, QuestionBlock]]:
    """Yield question blocks with their 1-based position among questions."""
    number = 0
    for block in problem.blocks:
        if isinstance(block, QuestionBlock):
            number += 1
            yield number, block


def count_questions(problem: ParsedProblem) -> int:
    return sum(1 for block in problem.blocks if isinstance(block, QuestionBlock))


def count_content_blocks(problem: ParsedProblem) -> int:
    return sum(1 for block in problem.blocks if isinstance(block, ContentBlock))


def count_findings(findings: Iterable[ValidationFinding], kind: FindingKind) -> int:
    return sum(1 for finding in findings if finding.kind is kind)
