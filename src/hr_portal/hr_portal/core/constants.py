"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DISCONNECTION_THRESHOLD = 2
DEFAULT_REGULARIZATION_WINDOW_DAYS = 30
DEFAULT_ATTENDANCE_TIMEZONE = "UTC"

ATTENDANCE_KEY_PREFIX = "attendance"
LEAVE_KEY_PREFIX = "leave"
REGULARIZATION_KEY_PREFIX = "regularization"

ISO_DATE_FORMAT = "%Y-%m-%d"
