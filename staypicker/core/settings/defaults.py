import os

from path import Path

from core.constants import (
    DEFAULT_LISTING_TIMEZONE,
    DEFAULT_RENTAL_FEED_TIMEOUT,
    EnvVars,
)
from core.settings.utils import get_file_handler_dict, get_int_from_env, get_logger_dict
from booking.constants import DEFAULT_MAX_STAY_DAYS, DEFAULT_MIN_STAY_DAYS
from pricing.constants import DEFAULT_PRICE_RULES as BUILTIN_PRICE_RULES

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
PATH = Path(__file__).parent
ROOT_PATH = PATH.parent.parent
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LOGS_PATH = ROOT_PATH

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(asctime)s %(message)s',
        },
        'verbose': {
            'format': ('%(levelname)s %(asctime)s %(name)s in .%(funcName)s '
                       '(line %(lineno)d): %(message)s'),
        }
    },
    'filters': {
        'require_debug_false': {
            '()': 'django.utils.log.RequireDebugFalse',
        },
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', ],
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
        'console_simple': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', ],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'console_errors': {
            'level': 'WARNING',
            'filters': ['require_debug_false', ],
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
        'null': {
            'class': 'logging.NullHandler',
        },
        'staypicker_log_file': get_file_handler_dict(LOGS_PATH, 'staypicker', 'verbose', ),
    },
    'loggers': {
        'django': get_logger_dict(
            ['console_simple', 'console_errors', ], 'INFO'),
        'api': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
        'availability': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
        'booking': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
        'core': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
        'integrations': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
        'pricing': get_logger_dict(
            ['console', 'console_errors', 'staypicker_log_file', ], 'DEBUG'),
    }
}

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(EnvVars.SECRET_KEY,
                            "q$7v!k2l@x9u_0d#staypicker-development-only-key")

ALLOWED_HOSTS = ['staypicker.local', ]

# Application definition

INSTALLED_APPS = [
    # django apps
    'django.contrib.contenttypes',
    'django.contrib.auth',

    # Third party apps
    'rest_framework',

    # Internal apps
    'api',
    'availability',
    'booking',
    'core',
    'integrations',
    'pricing',
]

DATABASES: dict = {}

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'UNAUTHENTICATED_USER': None,
}

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = False

USE_TZ = True

# Booking

# Stay limits, in nights
STAY_MIN_NIGHTS = get_int_from_env(EnvVars.STAY_MIN_NIGHTS, DEFAULT_MIN_STAY_DAYS)
STAY_MAX_NIGHTS = get_int_from_env(EnvVars.STAY_MAX_NIGHTS, DEFAULT_MAX_STAY_DAYS)

# Timezone used to determine "today" of the listing (pytz zone name)
LISTING_TIMEZONE = os.environ.get(EnvVars.LISTING_TIMEZONE, DEFAULT_LISTING_TIMEZONE)

# Busy dates and price rules endpoints; empty value disables loading
BUSY_DATES_URL = os.environ.get(EnvVars.BUSY_DATES_URL, '')
PRICE_RULES_URL = os.environ.get(EnvVars.PRICE_RULES_URL, '')
RENTAL_FEED_TIMEOUT = get_int_from_env(
    EnvVars.RENTAL_FEED_TIMEOUT, DEFAULT_RENTAL_FEED_TIMEOUT)

# Price rules in effect until the price rules feed is loaded
DEFAULT_PRICE_RULES = BUILTIN_PRICE_RULES
