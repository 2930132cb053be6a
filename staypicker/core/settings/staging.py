from core.constants import EnvLevel

from .defaults import *  # noqa

LEVEL = EnvLevel.STAGING

DEBUG = False
