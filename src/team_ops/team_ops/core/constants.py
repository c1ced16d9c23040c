"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

UNKNOWN_LABEL = "Unknown"
UNKNOWN_MOM_LABEL = "Unknown MoM"

# 6 = Sunday (calendar module numbering), weeks run Sunday..Saturday
WEEK_START_DAY = 6

HOURS_PRECISION = 2

DEFAULT_DUE_THIS_WEEK_LIMIT = 5
DEFAULT_RECENT_ACTIVITY_LIMIT = 5
DEFAULT_TOP_PERFORMERS = 3

RECENT_TASKS_PER_FEED = 3
RECENT_MOMS_PER_FEED = 2
RECENT_QUESTS_PER_FEED = 2
