APP_ORG = "QuickTools"
APP_NAME = "PyTextReader"

# Persisted keys. Reading positions are keyed by the document URI itself.
SETTINGS_THEME_MODE = "theme_mode"

FONT_SIZE_MIN = 12.0
FONT_SIZE_MAX = 35.0
FONT_SIZE_DEFAULT = 18.0

# Lines kept visible above the current line when scrolling to it
SCROLL_CONTEXT_LINES = 3
SCROLL_ANIMATION_MS = 250

TEXT_ENCODING = "utf-8"
OPEN_FILTER = "Text (*.txt);;All files (*)"

PLACEHOLDER_TEXT = "Open a text file to start reading."
LOAD_ERROR_PREFIX = "Error: "
