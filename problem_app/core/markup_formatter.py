"""Pretty-printer that re-indents problem markup without touching its content.

Block elements get one child per line; elements whose only child is text
(and the known inline tags such as ``<choice>`` or ``<p>``) stay on a single
line. The output re-parses to the same tree modulo whitespace and formatting
it again returns it unchanged.
"""

from __future__ import annotations

import logging

from problem_app.constants.problem_constants import DEFAULT_INDENT_SIZE, INLINE_TAGS
from problem_app.core.errors import MarkupSyntaxError
from problem_app.core.markup_tree import (
    CommentNode,
    ElementNode,
    MarkupNode,
    TextNode,
    escape_text,
    format_attributes,
    parse_markup,
)

logger = logging.getLogger(__name__)


def format_markup(raw_text: str, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
    """Return ``raw_text`` re-indented, or unchanged if it is not well-formed."""
    try:
        root = parse_markup(raw_text)
    except MarkupSyntaxError as exc:
        logger.debug("Leaving malformed markup unformatted: %s", exc)
        return raw_text
    return _format_node(root, 0, " " * max(indent_size, 0))


def is_inline(element: ElementNode) -> bool:
    return element.tag.lower() in INLINE_TAGS or _single_text_child(element) is not None


def _single_text_child(element: ElementNode) -> TextNode | None:
    if len(element.children) == 1 and isinstance(element.children[0], TextNode):
        return element.children[0]
    return None


def _format_node(node: MarkupNode, depth: int, padding: str) -> str:
    if isinstance(node, TextNode):
        return escape_text(node.text.strip())
    if isinstance(node, CommentNode):
        return f"{padding * depth}<!--{node.text}-->"
    return _format_element(node, depth, padding)


def _format_element(element: ElementNode, depth: int, padding: str) -> str:
    indent = padding * depth
    tag = element.tag
    attributes = format_attributes(element)

    text_child = _single_text_child(element)
    if not element.children or (text_child is not None and not text_child.text.strip()):
        return f"{indent}<{tag}{attributes}/>"

    if text_child is not None and is_inline(element):
        return f"{indent}<{tag}{attributes}>{escape_text(text_child.text.strip())}</{tag}>"

    has_structured_children = any(isinstance(child, (ElementNode, CommentNode)) for child in element.children)
    if not has_structured_children:
        return f"{indent}<{tag}{attributes}>{escape_text(element.text_content.strip())}</{tag}>"

    lines = [f"{indent}<{tag}{attributes}>"]
    for child in element.children:
        formatted = _format_node(child, depth + 1, padding)
        if formatted:
            lines.append(formatted)
    lines.append(f"{indent}</{tag}>")
    return "\n".join(lines)
