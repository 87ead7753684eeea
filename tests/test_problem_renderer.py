"""
Unit Tests for the HTML preview renderer.
"""

from problem_app.core.markdown_math_renderer import MarkdownMathRenderer
from problem_app.core.problem_parser import parse_problem
from problem_app.core.problem_renderer import render_error_html, render_problem_html
from problem_app.core.problem_validator import validate_problem
from problem_app.styling import Theme


class TestMarkdownMathRenderer:
    """Tests for the markdown and MathJax wrapper."""

    def test_render_fragment_empty_input(self):
        assert MarkdownMathRenderer().render_fragment("  \n") == "<p><em>No content provided.</em></p>"

    def test_render_fragment_supports_tables(self):
        html = MarkdownMathRenderer().render_fragment("| a | b |\n|---|---|\n| 1 | 2 |")

        assert "<table>" in html

    def test_raw_html_is_not_passed_through(self):
        html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")

        assert "<script>" not in html

    def test_wrap_with_mathjax_escapes_title(self):
        page = MarkdownMathRenderer().wrap_with_mathjax("<p>x</p>", title="<A & B>")

        assert "<title>&lt;A &amp; B&gt;</title>" in page
        assert '<div class="problem-preview"><p>x</p></div>' in page
        assert "mathjax" in page


class TestRenderProblemHtml:
    """Tests for render_problem_html."""

    def test_page_contains_title_attempts_and_intro(self, mixed_problem_text):
        page = render_problem_html(parse_problem(mixed_problem_text))

        assert '<h1 class="problem-title">Mixed</h1>' in page
        assert "Max attempts" not in page
        assert '<div class="problem-intro"><p>Intro</p></div>' in page
        assert '<div class="html-block"><p>Between</p></div>' in page

    def test_max_attempts_is_shown(self, single_question_text):
        page = render_problem_html(parse_problem(single_question_text))

        assert "Max attempts: 2" in page

    def test_markdown_source_is_rendered(self, mixed_problem_text):
        page = render_problem_html(parse_problem(mixed_problem_text))

        assert '<details class="markdown-source">' in page
        assert "<strong>markdown</strong>" in page

    def test_null_markdown_is_hidden(self):
        page = render_problem_html(parse_problem('<problem markdown="null"/>'))

        assert '<details class="markdown-source">' not in page

    def test_answers_hidden_by_default(self, mixed_problem_text):
        page = render_problem_html(parse_problem(mixed_problem_text))

        assert 'name="question-1"' in page
        assert "choice correct" not in page
        assert "Answer: 3.14" not in page
        assert "Because yes." not in page

    def test_answers_shown_with_explanations(self, mixed_problem_text):
        page = render_problem_html(parse_problem(mixed_problem_text), show_explanations=True)

        assert page.count('class="choice correct"') == 1
        assert "Answer: 3.14" in page
        assert "Answer: Paris" in page
        assert "<p>It is Paris.</p>" in page
        assert "Because yes." in page

    def test_findings_are_listed(self, single_question_text):
        problem = parse_problem(single_question_text.replace('correct="true"', 'correct="false"'))

        page = render_problem_html(problem, validate_problem(problem))

        assert '<div class="validation-item error">! Question 1 has no correct answer</div>' in page
        assert '<div class="validation-item warning">? Question 1 is missing an explanation</div>' in page

    def test_labels_and_choices_are_escaped(self):
        problem = parse_problem(
            "<problem><multiplechoiceresponse><label>1 &lt; 2?</label><choicegroup>"
            '<choice correct="true">a &amp; b</choice></choicegroup></multiplechoiceresponse></problem>'
        )

        page = render_problem_html(problem)

        assert "1 &lt; 2?" in page
        assert "a &amp; b" in page

    def test_dark_theme_changes_page_style(self, single_question_text):
        problem = parse_problem(single_question_text)

        assert render_problem_html(problem, theme=Theme.DARK) != render_problem_html(problem)


class TestRenderErrorHtml:
    """Tests for render_error_html."""

    def test_error_message_is_escaped(self):
        page = render_error_html("mismatched tag: <html>")

        assert "<h3>XML Parse Error</h3>" in page
        assert "<pre>mismatched tag: &lt;html&gt;</pre>" in page
