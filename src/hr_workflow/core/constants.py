"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ATTENDANCE_PRESENT = "present"
ATTENDANCE_ABSENT = "absent"

MONTH_KEY_FORMAT = "%Y-%m"
DEADLINE_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"

DEFAULT_TOKEN_MAX_AGE = 7 * 24 * 3600
MIN_PASSWORD_LENGTH = 6
