from core.constants import EnvLevel

from .defaults import *  # noqa

LEVEL = EnvLevel.DEVELOPMENT
BASE_URL = 'http://staypicker.local:8080'

DEBUG = True

ALLOWED_HOSTS = ['staypicker.local', 'localhost', '127.0.0.1', ]
