"""Problem-format constants shared by the parser, validator, formatter and UI."""

ROOT_TAG: str = "problem"
CONTENT_TAG: str = "html"
MULTIPLE_CHOICE_TAG: str = "multiplechoiceresponse"
NUMERICAL_TAG: str = "numericalresponse"
STRING_TAG: str = "stringresponse"
EXPLANATION_TAG: str = "solution"

LABEL_TAG: str = "label"
CHOICE_GROUP_TAG: str = "choicegroup"
CHOICE_TAG: str = "choice"
PARAGRAPH_TAG: str = "p"
DETAILED_EXPLANATION_CLASS: str = "detailed-solution"

DISPLAY_NAME_ATTRIBUTE: str = "display_name"
MAX_ATTEMPTS_ATTRIBUTE: str = "max_attempts"
MARKDOWN_ATTRIBUTE: str = "markdown"
ANSWER_ATTRIBUTE: str = "answer"
CORRECT_ATTRIBUTE: str = "correct"
SHUFFLE_ATTRIBUTE: str = "shuffle"

DEFAULT_DISPLAY_NAME: str = "Untitled Problem"
EXPLANATION_HEADER_TEXT: str = "Explanation"
EXPLANATION_PLACEHOLDER_TEXT: str = "Add your explanation here"
DEFAULT_FILE_NAME: str = "problem.xml"

DEFAULT_INDENT_SIZE: int = 2
INLINE_TAGS: frozenset[str] = frozenset({"choice", "label", "p", "span", "a", "strong", "em", "code"})

SAMPLE_PROBLEM: str = """<problem display_name="Sample Problem" max_attempts="2" markdown="null">
  <html>
    <p>This is an example edX problem. Edit the XML on the left and see the preview on the right.</p>
  </html>
  <multiplechoiceresponse>
    <label>1) What is 2 + 2?</label>
    <choicegroup type="MultipleChoice" shuffle="false">
      <choice correct="false">3</choice>
      <choice correct="true">4</choice>
      <choice correct="false">5</choice>
      <choice correct="false">22</choice>
    </choicegroup>
  </multiplechoiceresponse>
  <solution>
    <div class="detailed-solution">
      <p>Explanation</p>
      <p>2 + 2 = 4. This is basic arithmetic.</p>
    </div>
  </solution>
  <multiplechoiceresponse>
    <label>2) Which planet is closest to the Sun?</label>
    <choicegroup type="MultipleChoice" shuffle="true">
      <choice correct="false">Venus</choice>
      <choice correct="true">Mercury</choice>
      <choice correct="false">Earth</choice>
      <choice correct="false">Mars</choice>
    </choicegroup>
  </multiplechoiceresponse>
  <solution>
    <div class="detailed-solution">
      <p>Explanation</p>
      <p>Mercury is the closest planet to the Sun in our solar system.</p>
    </div>
  </solution>
</problem>"""
