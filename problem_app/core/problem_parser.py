"""Parser turning problem markup into a :class:`ParsedProblem`.

Document layout:

    <problem display_name="..." max_attempts="2" markdown="...">
      <html>intro or in-between content</html>
      <multiplechoiceresponse>
        <label>Question text</label>
        <choicegroup shuffle="false">
          <choice correct="true">Answer</choice>
        </choicegroup>
      </multiplechoiceresponse>
      <solution>
        <div class="detailed-solution"><p>Explanation</p><p>...</p></div>
      </solution>
      <numericalresponse answer="42"><label>...</label></numericalresponse>
      <stringresponse answer="Paris"><label>...</label></stringresponse>
    </problem>

Children of ``<problem>`` are walked in order. ``<html>`` elements before the
first question become the intro; later ones become content blocks. A
``<solution>`` directly after a question belongs to that question; any other
``<solution>`` and every unknown tag is skipped.
"""

from __future__ import annotations

import logging
import re
from enum import Enum, auto
from typing import assert_never

from problem_app.constants.problem_constants import (
    ANSWER_ATTRIBUTE,
    CHOICE_GROUP_TAG,
    CHOICE_TAG,
    CONTENT_TAG,
    CORRECT_ATTRIBUTE,
    DEFAULT_DISPLAY_NAME,
    DETAILED_EXPLANATION_CLASS,
    DISPLAY_NAME_ATTRIBUTE,
    EXPLANATION_HEADER_TEXT,
    EXPLANATION_TAG,
    LABEL_TAG,
    MARKDOWN_ATTRIBUTE,
    MAX_ATTEMPTS_ATTRIBUTE,
    MULTIPLE_CHOICE_TAG,
    NUMERICAL_TAG,
    PARAGRAPH_TAG,
    ROOT_TAG,
    SHUFFLE_ATTRIBUTE,
    STRING_TAG,
)
from problem_app.core.errors import StructuralError
from problem_app.core.markup_tree import ElementNode, parse_markup
from problem_app.core.models import (
    Choice,
    ContentBlock,
    Explanation,
    MultipleChoiceQuestion,
    NumericalQuestion,
    ParsedProblem,
    ProblemBlock,
    ProblemMetadata,
    Question,
    QuestionBlock,
    StringQuestion,
)

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class ElementRole(Enum):
    """Role of a direct child of ``<problem>``."""

    CONTENT = auto()
    MULTIPLE_CHOICE = auto()
    NUMERICAL = auto()
    STRING = auto()
    EXPLANATION = auto()
    UNKNOWN = auto()


_ROLE_BY_TAG = {
    CONTENT_TAG: ElementRole.CONTENT,
    MULTIPLE_CHOICE_TAG: ElementRole.MULTIPLE_CHOICE,
    NUMERICAL_TAG: ElementRole.NUMERICAL,
    STRING_TAG: ElementRole.STRING,
    EXPLANATION_TAG: ElementRole.EXPLANATION,
}


def classify_element(element: ElementNode) -> ElementRole:
    return _ROLE_BY_TAG.get(element.tag.lower(), ElementRole.UNKNOWN)


def parse_problem(raw_text: str) -> ParsedProblem:
    """Parse problem markup into a fresh :class:`ParsedProblem`.

    Raises:
        MarkupSyntaxError: if the text is not well-formed markup.
        StructuralError: if no ``<problem>`` element exists.
    """
    root = _locate_problem_element(parse_markup(raw_text))
    metadata = parse_metadata(root)

    children = root.element_children()
    blocks: list[ProblemBlock] = []
    intro_parts: list[str] = []
    found_first_question = False

    index = 0
    while index < len(children):
        child = children[index]
        next_index = index + 1
        match classify_element(child):
            case ElementRole.CONTENT:
                if found_first_question:
                    blocks.append(ContentBlock(content=child.inner_markup()))
                else:
                    intro_parts.append(child.inner_markup())
            case ElementRole.MULTIPLE_CHOICE | ElementRole.NUMERICAL | ElementRole.STRING as role:
                found_first_question = True
                question = _parse_question(child, role)
                explanation, next_index = pair_explanation(children, index)
                blocks.append(QuestionBlock(question=question, explanation=explanation))
            case ElementRole.EXPLANATION | ElementRole.UNKNOWN:
                pass
            case unreachable:
                assert_never(unreachable)
        index = next_index

    logger.debug("Parsed problem %r with %d block(s)", metadata.display_name, len(blocks))
    return ParsedProblem(metadata=metadata, intro_markup="".join(intro_parts), blocks=tuple(blocks))


def pair_explanation(children: list[ElementNode], question_index: int) -> tuple[Explanation | None, int]:
    """Pair the question at ``question_index`` with an immediately following explanation.

    Returns the explanation (or None) and the index of the next sibling that
    still needs to be visited, so a consumed explanation is never revisited.
    """
    candidate_index = question_index + 1
    if candidate_index < len(children) and classify_element(children[candidate_index]) is ElementRole.EXPLANATION:
        return parse_explanation(children[candidate_index]), candidate_index + 1
    return None, candidate_index


def parse_metadata(root: ElementNode) -> ProblemMetadata:
    return ProblemMetadata(
        display_name=root.get(DISPLAY_NAME_ATTRIBUTE) or DEFAULT_DISPLAY_NAME,
        max_attempts=_parse_max_attempts(root.get(MAX_ATTEMPTS_ATTRIBUTE)),
        markdown=root.get(MARKDOWN_ATTRIBUTE),
    )


def parse_explanation(element: ElementNode) -> Explanation:
    detailed = element.find_by_class(DETAILED_EXPLANATION_CLASS)
    if detailed is None:
        return Explanation(
            explanation=element.text_content.strip(),
            html_content=element.inner_markup(),
        )

    paragraphs = [
        child.text_content.strip() for child in detailed.element_children() if child.tag == PARAGRAPH_TAG
    ]
    if paragraphs and paragraphs[0] == EXPLANATION_HEADER_TEXT:
        paragraphs = paragraphs[1:]
    return Explanation(explanation="\n".join(paragraphs), html_content=detailed.inner_markup())


def _locate_problem_element(root: ElementNode) -> ElementNode:
    if root.tag == ROOT_TAG:
        return root
    nested = root.find(ROOT_TAG)
    if nested is None:
        raise StructuralError(f"No <{ROOT_TAG}> element found")
    return nested


def _parse_max_attempts(raw_value: str | None) -> int | None:
    if not raw_value:
        return None
    match = _LEADING_INTEGER.match(raw_value)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def _parse_question(element: ElementNode, role: ElementRole) -> Question:
    label = _label_text(element)
    match role:
        case ElementRole.MULTIPLE_CHOICE:
            group = element.find(CHOICE_GROUP_TAG)
            choices = tuple(
                Choice(
                    text=choice.text_content.strip(),
                    correct=choice.get(CORRECT_ATTRIBUTE) == "true",
                )
                for choice in element.find_all(CHOICE_TAG)
            )
            shuffle = group is not None and group.get(SHUFFLE_ATTRIBUTE) == "true"
            return MultipleChoiceQuestion(label=label, choices=choices, shuffle=shuffle)
        case ElementRole.NUMERICAL:
            return NumericalQuestion(label=label, answer=element.get(ANSWER_ATTRIBUTE) or "")
        case ElementRole.STRING:
            return StringQuestion(label=label, answer=element.get(ANSWER_ATTRIBUTE) or "")
        case _:
            raise ValueError(f"{role} does not produce a question")


def _label_text(element: ElementNode) -> str:
    label = element.find(LABEL_TAG)
    return label.text_content.strip() if label is not None else ""
