from core.constants import EnvLevel  # noqa

from .development import *  # noqa

LEVEL = EnvLevel.TESTS

ALLOWED_HOSTS = ('*', )

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Feeds are never reached from tests; requests are mocked where needed
BUSY_DATES_URL = ''
PRICE_RULES_URL = ''

STAY_MIN_NIGHTS = 3
STAY_MAX_NIGHTS = 28
LISTING_TIMEZONE = 'UTC'

# no file or console handlers; records propagate to the root logger (and pytest's caplog)
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'root': {
        'handlers': ['null', ],
        'level': 'DEBUG',
    },
}
