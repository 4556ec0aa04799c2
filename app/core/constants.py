"""Application constants."""

# Generation defaults
DEFAULT_DAYS_PER_WEEK = 3
DEFAULT_DURATION_WEEKS = 4

# Day allocation
MAX_EXERCISES_PER_DAY = 8
PADDING_THRESHOLD = 4  # pad a day holding fewer than this
PADDING_MAX_EXTRA = 4
PADDING_DAY_CEILING = 6
MAX_PER_GROUP_GAIN_MUSCLE = 3
MAX_PER_GROUP_DEFAULT = 2

# Catalog listing
MAX_EXERCISES_PAGE_SIZE = 200
