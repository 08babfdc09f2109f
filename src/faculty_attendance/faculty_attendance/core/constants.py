"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WINDOW_DAYS = 14
SHORT_DAY_MINUTES = 450
OBSERVATIONS_PER_CL = 4

DEFAULT_ID_PREFIX = "TIG"
DEFAULT_EMAIL_DOMAIN = "tint.edu"
ADMIN_CODE = "ADMIN"
UNKNOWN_DEPARTMENT = "Unknown"
ALL_DEPARTMENTS = "All"

# Rough HOD duration estimate (derived from faculty averages).
HOD_DURATION_BONUS_MINUTES = 15
HOD_MIN_AVG_MINUTES = 450
HOD_MAX_AVG_MINUTES = 540
HOD_UNDER_RATIO = 0.2

# Words that mark a department/total line rather than a person.
AGGREGATE_MARKERS = frozenset({"All", "ALL", "Total", "TOTAL"})
