"""Generic markup tree shared by the problem parser and the formatter.

Architecture note:
    Both the parser and the pretty-printer need the same view of the source:
    ordered children, ordered attributes, comments kept in place and names
    left exactly as written. ``xml.etree`` rewrites namespaced names and
    drops comments by default, so the tree is built directly from expat
    events instead. The node classes are deliberately small; walking them is
    the job of the callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
from xml.parsers import expat
from xml.sax.saxutils import escape

from problem_app.core.errors import MarkupSyntaxError

_TEXT_ENTITIES = {"\r": "&#13;"}
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


@dataclass(slots=True)
class TextNode:
    """Character data between tags (entities already resolved)."""

    text: str


@dataclass(slots=True)
class CommentNode:
    """A ``<!-- ... -->`` comment inside the root element."""

    text: str


@dataclass(slots=True)
class ElementNode:
    """An element with ordered attributes and ordered child nodes."""

    tag: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[MarkupNode] = field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        for attribute_name, value in self.attributes:
            if attribute_name == name:
                return value
        return default

    def has_class(self, class_name: str) -> bool:
        return class_name in (self.get("class") or "").split()

    def element_children(self) -> list[ElementNode]:
        return [child for child in self.children if isinstance(child, ElementNode)]

    def iter_descendants(self) -> Iterator[ElementNode]:
        """Yield descendant elements in document order, excluding ``self``."""
        for child in self.element_children():
            yield child
            yield from child.iter_descendants()

    def find(self, tag: str) -> ElementNode | None:
        return next((node for node in self.iter_descendants() if node.tag == tag), None)

    def find_all(self, tag: str) -> list[ElementNode]:
        return [node for node in self.iter_descendants() if node.tag == tag]

    def find_by_class(self, class_name: str) -> ElementNode | None:
        return next((node for node in self.iter_descendants() if node.has_class(class_name)), None)

    @property
    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            elif isinstance(child, ElementNode):
                parts.append(child.text_content)
        return "".join(parts)

    def inner_markup(self) -> str:
        """Serialize the children of this element back to markup."""
        return "".join(serialize_node(child) for child in self.children)


MarkupNode = ElementNode | TextNode | CommentNode


def escape_text(text: str) -> str:
    return escape(text, _TEXT_ENTITIES)


def escape_attribute(value: str) -> str:
    return escape(value, _ATTRIBUTE_ENTITIES)


def format_attributes(element: ElementNode) -> str:
    """Render attributes in source order as ` name="value"` pairs."""
    return "".join(f' {name}="{escape_attribute(value)}"' for name, value in element.attributes)


def serialize_node(node: MarkupNode) -> str:
    if isinstance(node, TextNode):
        return escape_text(node.text)
    if isinstance(node, CommentNode):
        return f"<!--{node.text}-->"
    attributes = format_attributes(node)
    if not node.children:
        return f"<{node.tag}{attributes}/>"
    return f"<{node.tag}{attributes}>{node.inner_markup()}</{node.tag}>"


class _TreeBuilder:
    """Collects expat callbacks into an ``ElementNode`` tree."""

    def __init__(self) -> None:
        self.root: ElementNode | None = None
        self._stack: list[ElementNode] = []

    def start_element(self, name: str, attributes: list[str]) -> None:
        pairs = list(zip(attributes[0::2], attributes[1::2]))
        element = ElementNode(tag=name, attributes=pairs)
        if self._stack:
            self._stack[-1].children.append(element)
        elif self.root is None:
            self.root = element
        self._stack.append(element)

    def end_element(self, name: str) -> None:
        self._stack.pop()

    def character_data(self, data: str) -> None:
        if not self._stack:
            return
        children = self._stack[-1].children
        if children and isinstance(children[-1], TextNode):
            children[-1].text += data
        else:
            children.append(TextNode(data))

    def comment(self, data: str) -> None:
        if self._stack:
            self._stack[-1].children.append(CommentNode(data))


def parse_markup(text: str) -> ElementNode:
    """Parse markup text into a tree and return its root element.

    Raises:
        MarkupSyntaxError: if the text is not well-formed.
    """
    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.character_data
    parser.CommentHandler = builder.comment
    try:
        parser.Parse(text, True)
    except expat.ExpatError as exc:
        raise MarkupSyntaxError(str(exc), line=exc.lineno, column=exc.offset) from exc
    if builder.root is None:  # pragma: no cover - expat rejects documents without an element
        raise MarkupSyntaxError("no element found")
    return builder.root
