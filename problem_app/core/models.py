"""Domain models for parsed problem documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


class QuestionKind(Enum):
    """Discriminator for the closed set of question variants."""

    MULTIPLE_CHOICE = "multiplechoice"
    NUMERICAL = "numerical"
    STRING = "string"


class BlockKind(Enum):
    """Discriminator for top-level problem blocks."""

    QUESTION = "question"
    CONTENT = "content"


class FindingKind(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class ProblemMetadata:
    """Attributes read from the root ``<problem>`` element."""

    display_name: str
    max_attempts: int | None = None  # None means unlimited
    markdown: str | None = None


@dataclass(frozen=True, slots=True)
class Choice:
    text: str
    correct: bool = False


@dataclass(frozen=True, slots=True)
class MultipleChoiceQuestion:
    """Choices are kept in source order; ``shuffle`` only affects display."""

    label: str
    choices: tuple[Choice, ...] = ()
    shuffle: bool = False
    kind: Literal[QuestionKind.MULTIPLE_CHOICE] = field(default=QuestionKind.MULTIPLE_CHOICE, init=False)


@dataclass(frozen=True, slots=True)
class NumericalQuestion:
    label: str
    answer: str = ""
    tolerance: str = ""  # reserved, never populated by the parser
    kind: Literal[QuestionKind.NUMERICAL] = field(default=QuestionKind.NUMERICAL, init=False)


@dataclass(frozen=True, slots=True)
class StringQuestion:
    label: str
    answer: str = ""
    kind: Literal[QuestionKind.STRING] = field(default=QuestionKind.STRING, init=False)


Question = MultipleChoiceQuestion | NumericalQuestion | StringQuestion


@dataclass(frozen=True, slots=True)
class Explanation:
    """Author rationale attached to a question (``<solution>`` in markup)."""

    explanation: str
    html_content: str


@dataclass(frozen=True, slots=True)
class QuestionBlock:
    question: Question
    explanation: Explanation | None = None
    kind: Literal[BlockKind.QUESTION] = field(default=BlockKind.QUESTION, init=False)


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """Opaque markup shown between questions."""

    content: str
    kind: Literal[BlockKind.CONTENT] = field(default=BlockKind.CONTENT, init=False)


ProblemBlock = QuestionBlock | ContentBlock


@dataclass(frozen=True, slots=True)
class ParsedProblem:
    """Result of a single parse; replaced wholesale on every re-parse."""

    metadata: ProblemMetadata
    intro_markup: str = ""
    blocks: tuple[ProblemBlock, ...] = ()


@dataclass(frozen=True, slots=True)
class ValidationFinding:
    """An authoring problem reported by the validator."""

    kind: FindingKind
    message: str
    question_index: int | None = None  # 1-based among question blocks
