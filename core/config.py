"""Configuration constants for sutja application."""

# Number systems
NATIVE = 'native'
SINO = 'sino'
NUMBER_SYSTEMS = (NATIVE, SINO)

NATIVE_MAX = 99
SINO_MAX = 9999

# Quiz directions
KOREAN_TO_ENGLISH = 'korean_to_english'  # Korean text shown, digits expected
ENGLISH_TO_KOREAN = 'english_to_korean'  # Digits shown, Korean text expected
DIRECTIONS = (KOREAN_TO_ENGLISH, ENGLISH_TO_KOREAN)

# Default settings for a fresh session
DEFAULT_NUMBER_SYSTEM = NATIVE
DEFAULT_DIRECTION = KOREAN_TO_ENGLISH
DEFAULT_MIN_RANGE = 0
DEFAULT_MAX_RANGE = 10

# Question selection
RECENT_HISTORY_SIZE = 5    # Number of recent questions to avoid repeating
SMALL_RANGE_SPAN = 3       # Spans at or below this skip repeat avoidance
MAX_REPEAT_ATTEMPTS = 50   # Draws before a repeat is accepted anyway

# Auto-advance after a correct answer
AUTO_ADVANCE_DELAY_SECONDS = 1.0

# Shown instead of a number word when the value has no form in the system
OUT_OF_RANGE_TEXT = '범위 초과'
