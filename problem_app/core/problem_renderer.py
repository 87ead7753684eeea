"""HTML preview of a parsed problem for the Qt web view and the browser page."""

from __future__ import annotations

from html import escape
from typing import Iterable, assert_never

from problem_app.core.markdown_math_renderer import renderer
from problem_app.core.models import (
    ContentBlock,
    Explanation,
    FindingKind,
    MultipleChoiceQuestion,
    NumericalQuestion,
    ParsedProblem,
    QuestionBlock,
    StringQuestion,
    ValidationFinding,
)
from problem_app.styling import Theme

_NULL_MARKDOWN = "null"


def render_problem_html(
    problem: ParsedProblem,
    findings: Iterable[ValidationFinding] = (),
    *,
    show_explanations: bool = False,
    font_size: int = 14,
    theme: Theme = Theme.LIGHT,
) -> str:
    """Render a parsed problem as a full HTML page.

    Args:
        problem: The parsed document to display.
        findings: Validation findings listed above the problem.
        show_explanations: Reveal correct answers and explanations.
        font_size: Base font size in pixels.
        theme: Color theme for the page.

    Returns:
        HTML string ready for display in QWebEngineView or a browser.
    """
    parts = [_render_findings(findings), _render_header(problem)]
    if problem.intro_markup:
        parts.append(f'<div class="problem-intro">{problem.intro_markup}</div>')

    question_number = 0
    block_parts: list[str] = []
    for block in problem.blocks:
        match block:
            case ContentBlock():
                block_parts.append(f'<div class="html-block">{block.content}</div>')
            case QuestionBlock():
                question_number += 1
                block_parts.append(_render_question_block(block, question_number, show_explanations))
            case unreachable:
                assert_never(unreachable)
    parts.append(f'<div class="problem-blocks">{"".join(block_parts)}</div>')

    return renderer.wrap_with_mathjax(
        "".join(parts),
        title=problem.metadata.display_name,
        font_size=font_size,
        theme=theme,
    )


def render_error_html(message: str, *, font_size: int = 14, theme: Theme = Theme.LIGHT) -> str:
    """Render the page shown while the markup cannot be parsed."""
    body = f'<div class="parse-error"><h3>XML Parse Error</h3><pre>{escape(message)}</pre></div>'
    return renderer.wrap_with_mathjax(body, title="Parse error", font_size=font_size, theme=theme)


def _render_findings(findings: Iterable[ValidationFinding]) -> str:
    items = [
        f'<div class="validation-item {finding.kind.value}">'
        f'{"!" if finding.kind is FindingKind.ERROR else "?"} {escape(finding.message)}</div>'
        for finding in findings
    ]
    if not items:
        return ""
    return f'<div class="validation-errors">{"".join(items)}</div>'


def _render_header(problem: ParsedProblem) -> str:
    metadata = problem.metadata
    parts = [f'<h1 class="problem-title">{escape(metadata.display_name)}</h1>']
    if metadata.max_attempts:
        parts.append(f'<div class="max-attempts">Max attempts: {metadata.max_attempts}</div>')
    if metadata.markdown and metadata.markdown != _NULL_MARKDOWN:
        parts.append(
            '<details class="markdown-source"><summary>Authoring markdown</summary>'
            f"{renderer.render_fragment(metadata.markdown)}</details>"
        )
    return f'<div class="problem-header">{"".join(parts)}</div>'


def _render_question_block(block: QuestionBlock, number: int, show_explanations: bool) -> str:
    question = block.question
    label = f'<div class="question-label">{escape(question.label)}</div>'
    match question:
        case MultipleChoiceQuestion():
            choices = []
            for index, choice in enumerate(question.choices):
                is_marked = show_explanations and choice.correct
                css_class = "choice correct" if is_marked else "choice"
                indicator = '<span class="correct-indicator"> &#10003;</span>' if is_marked else ""
                choices.append(
                    f'<label class="{css_class}"><input type="radio" name="question-{number}" value="{index}" />'
                    f' <span class="choice-text">{escape(choice.text)}</span>{indicator}</label>'
                )
            body = f'<div class="choices">{"".join(choices)}</div>'
            solution = _render_explanation(block.explanation) if show_explanations else ""
            return f'<div class="question-block multiple-choice">{label}{body}{solution}</div>'
        case NumericalQuestion() | StringQuestion():
            css_class = "numerical" if isinstance(question, NumericalQuestion) else "string"
            body = f'<input type="text" class="{css_class}-input" placeholder="Enter your answer" />'
            solution = ""
            if show_explanations:
                solution = (
                    f'<div class="solution"><div class="solution-header">Answer: {escape(question.answer)}</div>'
                    f"{_explanation_content(block.explanation)}</div>"
                )
            return f'<div class="question-block {css_class}">{label}{body}{solution}</div>'
        case unreachable:
            assert_never(unreachable)


def _render_explanation(explanation: Explanation | None) -> str:
    if explanation is None:
        return ""
    return (
        '<div class="solution"><div class="solution-header">Explanation</div>'
        f"{_explanation_content(explanation)}</div>"
    )


def _explanation_content(explanation: Explanation | None) -> str:
    if explanation is None:
        return ""
    return f'<div class="solution-content">{explanation.html_content}</div>'
