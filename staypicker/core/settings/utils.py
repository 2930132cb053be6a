import logging
import os

from core.constants import EnvLevel

logger = logging.getLogger(__name__)


def get_file_handler_dict(local_path: str, filename: str, formatter: str) -> dict:
    level = os.environ.get('LEVEL', EnvLevel.DEVELOPMENT)
    # disable file logging on staging/production. It's useless in multi-instance
    # environment and produces all kinds of issues with log file permissions
    if level in [EnvLevel.STAGING, EnvLevel.PRODUCTION]:
        return {
            'class': 'logging.NullHandler'
        }

    log_file_name = '{0}/{1}.log'.format(
        local_path, filename
    )
    return {
        'filename': log_file_name,
        'filters': ['require_debug_true', ],
        'formatter': formatter,
        'level': 'DEBUG',
        'class': 'logging.FileHandler'
    }


def get_logger_dict(handlers, level='INFO'):
    return {
        'handlers': handlers,
        'level': level,
        'propagate': False,
    }


def get_int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning('Could not parse {0}={1!r} as integer; using {2}'.format(
            name, value, default
        ))
    return default
