import sys
from pathlib import Path

import pytest

# Make the project root importable without installing the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())


SINGLE_QUESTION_PROBLEM = (
    '<problem display_name="T" max_attempts="2">'
    "<multiplechoiceresponse><label>Q</label><choicegroup>"
    '<choice correct="false">A</choice><choice correct="true">B</choice>'
    "</choicegroup></multiplechoiceresponse></problem>"
)

MIXED_PROBLEM = """<problem display_name="Mixed" markdown="Some **markdown**">
  <html><p>Intro</p></html>
  <multiplechoiceresponse>
    <label>Pick one</label>
    <choicegroup shuffle="true">
      <choice correct="true">Yes</choice>
      <choice correct="false">No</choice>
    </choicegroup>
  </multiplechoiceresponse>
  <solution>
    <div class="detailed-solution">
      <p>Explanation</p>
      <p>Because yes.</p>
    </div>
  </solution>
  <html><p>Between</p></html>
  <numericalresponse answer="3.14"><label>Pi?</label></numericalresponse>
  <stringresponse answer="Paris"><label>Capital of France?</label></stringresponse>
  <solution><p>It is Paris.</p></solution>
</problem>"""


@pytest.fixture
def single_question_text() -> str:
    """The one-question problem used throughout the examples."""
    return SINGLE_QUESTION_PROBLEM


@pytest.fixture
def mixed_problem_text() -> str:
    """A problem with intro, content block and all three question kinds."""
    return MIXED_PROBLEM
