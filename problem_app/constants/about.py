"""Static metadata describing ProblemQt."""

APP_NAME = "ProblemQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ProblemQt is a desktop editor for edX-style problem XML built with Qt. "
    "Edit the markup on the left and watch the rendered problem update on the right, "
    "or open the same preview in a browser."
)

HELP_MARKDOWN = """# Writing problems

A problem is a `<problem>` element whose children are shown in order:

| Element | Meaning |
| --- | --- |
| `<html>` | Content. Before the first question it becomes the introduction. |
| `<multiplechoiceresponse>` | A `<label>` and a `<choicegroup>` of `<choice correct="true|false">`. |
| `<numericalresponse answer="...">` | A question answered with a number. |
| `<stringresponse answer="...">` | A question answered with text. |
| `<solution>` | The explanation for the question directly above it. |

Put the explanation paragraphs inside `<div class="detailed-solution">`.
A first paragraph reading exactly *Explanation* is treated as a heading.

Math is written as `$...$` (inline) or `$$...$$` (display).

**Format Markup** re-indents the document without changing its content.
Problems that are not well-formed XML are left untouched.
"""
