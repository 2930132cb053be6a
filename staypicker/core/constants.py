from .types import StrEnum


class EnvLevel(StrEnum):
    PRODUCTION = 'production'
    STAGING = 'staging'
    DEVELOPMENT = 'development'
    TESTS = 'tests'


class EnvVars(StrEnum):

    LEVEL = 'LEVEL'
    SECRET_KEY = 'SECRET_KEY'
    STAY_MIN_NIGHTS = 'STAY_MIN_NIGHTS'
    STAY_MAX_NIGHTS = 'STAY_MAX_NIGHTS'
    LISTING_TIMEZONE = 'LISTING_TIMEZONE'
    BUSY_DATES_URL = 'BUSY_DATES_URL'
    PRICE_RULES_URL = 'PRICE_RULES_URL'
    RENTAL_FEED_TIMEOUT = 'RENTAL_FEED_TIMEOUT'


DEFAULT_LISTING_TIMEZONE = 'UTC'

# seconds to wait for busy dates / price rules endpoints
DEFAULT_RENTAL_FEED_TIMEOUT = 5
