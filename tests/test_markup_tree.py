"""
Unit Tests for the generic markup tree.
"""

import pytest

from problem_app.core.errors import MarkupSyntaxError
from problem_app.core.markup_tree import CommentNode, ElementNode, TextNode, parse_markup


class TestParseMarkup:
    """Tests for parse_markup."""

    def test_parse_when_attributes_then_source_order_kept(self):
        root = parse_markup('<a z="1" b="2" m="3"/>')

        assert root.tag == "a"
        assert root.attributes == [("z", "1"), ("b", "2"), ("m", "3")]

    def test_parse_when_comment_inside_root_then_kept(self):
        root = parse_markup("<a><!-- note --><b/></a>")

        assert root.children[0] == CommentNode(" note ")
        assert isinstance(root.children[1], ElementNode)

    def test_parse_when_comment_outside_root_then_dropped(self):
        root = parse_markup("<!-- before --><a>x</a><!-- after -->")

        assert root.children == [TextNode("x")]

    def test_parse_when_entities_and_cdata_then_single_text_node(self):
        root = parse_markup("<a>x &amp; y<![CDATA[ <z> ]]></a>")

        assert root.children == [TextNode("x & y <z> ")]

    def test_parse_when_namespaced_then_names_untouched(self):
        root = parse_markup('<m:math xmlns:m="http://example.com/m"><m:mi>x</m:mi></m:math>')

        assert root.tag == "m:math"
        assert root.get("xmlns:m") == "http://example.com/m"
        assert root.element_children()[0].tag == "m:mi"

    def test_parse_when_mismatched_tag_then_raises_syntax_error(self):
        with pytest.raises(MarkupSyntaxError, match="mismatched tag") as exc_info:
            parse_markup("<a><b></a>")

        assert exc_info.value.line == 1
        assert exc_info.value.diagnostic == str(exc_info.value)

    def test_parse_when_empty_then_raises_syntax_error(self):
        with pytest.raises(MarkupSyntaxError):
            parse_markup("")

    def test_parse_when_trailing_garbage_then_raises_syntax_error(self):
        with pytest.raises(MarkupSyntaxError):
            parse_markup("<a/><b/>")


class TestElementQueries:
    """Tests for ElementNode lookups and serialization."""

    @pytest.fixture
    def tree(self) -> ElementNode:
        return parse_markup(
            "<root>"
            "<p>first<!-- hidden --><b>bold</b></p>"
            '<div class="box detailed-solution"><p>inner</p></div>'
            "<p>last</p>"
            "</root>"
        )

    def test_find_returns_first_descendant_in_document_order(self, tree):
        assert tree.find("p").text_content == "firstbold"
        assert tree.find("missing") is None

    def test_find_all_includes_nested_elements(self, tree):
        assert [node.text_content for node in tree.find_all("p")] == ["firstbold", "inner", "last"]

    def test_find_by_class_matches_one_of_several_classes(self, tree):
        found = tree.find_by_class("detailed-solution")

        assert found is not None
        assert found.tag == "div"
        assert found.has_class("box")
        assert tree.find_by_class("detailed") is None

    def test_text_content_excludes_comments(self, tree):
        assert tree.text_content == "firstboldinnerlast"

    def test_inner_markup_escapes_text_and_collapses_empty_elements(self):
        root = parse_markup('<div><p title="a &quot;b&quot;">1 &lt; 2 &amp; 3</p><br></br><!--c--></div>')

        assert root.inner_markup() == '<p title="a &quot;b&quot;">1 &lt; 2 &amp; 3</p><br/><!--c-->'

    def test_inner_markup_keeps_whitespace_verbatim(self):
        root = parse_markup("<div>\n  <p>x</p>\n</div>")

        assert root.inner_markup() == "\n  <p>x</p>\n"
