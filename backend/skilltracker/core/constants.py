"""Shared application constants.

Centralizes limits used by validation and the report engine so we can
document and adjust them in one place.
"""

# Inclusive bounds for a skill's weekly goal (enforced at the input boundary)
MIN_WEEKLY_GOAL = 1
MAX_WEEKLY_GOAL = 50

# Smallest count a single log may carry
MIN_LOG_COUNT = 1

# Days in a Monday-Sunday week
DAYS_PER_WEEK = 7

# Display cap for progress bars (percent)
PROGRESS_CAP = 100.0
