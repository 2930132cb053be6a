DEFAULT_MIN_STAY_DAYS = 3
DEFAULT_MAX_STAY_DAYS = 28

# First selectable day is tomorrow
MIN_SELECTABLE_DAYS_AHEAD = 1

# How far ahead the calendar may be navigated
MAX_NAVIGABLE_YEARS_AHEAD = 2
