# Minimal number of nights for the long-stay discounts to apply
WEEK_DISCOUNT_MIN_NIGHTS = 7
MONTH_DISCOUNT_MIN_NIGHTS = 28

# Rules used until the price rules feed is loaded. Keys follow the feed format:
# `days` is keyed by weekday (0 is Sunday), `dates` by 'MM-DD'
DEFAULT_PRICE_RULES = {
    'default': 380,
    'days': {
        '5': 420,
        '6': 420,
    },
    'dates': {
        '12-25': 1000,
    },
}
