"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ProblemQt Editor"
EDITOR_PANEL_TITLE: str = "XML Editor"
PREVIEW_PANEL_TITLE: str = "Preview"
PREVIEW_DEBOUNCE_MS: int = 300
SPLITTER_MIN_PANEL_WIDTH: int = 240

TOOLBAR_OPEN_BUTTON: str = "Open File"
TOOLBAR_SAVE_BUTTON: str = "Save File"
TOOLBAR_FORMAT_BUTTON: str = "Format Markup"
TOOLBAR_SHOW_EXPLANATIONS: str = "Show Explanations"
TOOLBAR_SETTINGS_BUTTON: str = "Settings"
TOOLBAR_ABOUT_BUTTON: str = "About"
TOOLBAR_HELP_BUTTON: str = "Help"

OPEN_DIALOG_TITLE: str = "Open problem file"
SAVE_DIALOG_TITLE: str = "Save problem file"
PROBLEM_FILE_FILTER: str = "Problem files (*.xml);;All files (*.*)"
DEFAULT_PROBLEM_PATH: str = "problem.xml"

COUNTERS_TEMPLATE: str = "{questions} questions | {errors} errors | {warnings} warnings"
PARSE_ERROR_STATUS: str = "Markup has errors; preview shows the parser message."
FORMAT_SKIPPED_MESSAGE: str = "Nothing changed: the markup is already formatted or is not well-formed."
