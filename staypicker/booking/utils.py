import datetime
from typing import Optional

import pytz
from django.conf import settings

from pricing import PriceRuleSet

from .engine import SelectionEngine
from .types import CalendarBounds


def get_listing_today(listing_timezone: Optional[datetime.tzinfo] = None) -> datetime.date:
    """Return today's date in listing's timezone (LISTING_TIMEZONE setting by default)"""
    if listing_timezone is None:
        listing_timezone = pytz.timezone(settings.LISTING_TIMEZONE)
    return datetime.datetime.now(listing_timezone).date()


def build_engine_from_settings(today: Optional[datetime.date] = None) -> SelectionEngine:
    """
    Create a selection engine configured from settings: stay limits, built-in
    price rules and calendar bounds starting from `today` (listing's today
    if omitted). Busy dates are empty until loaded from the feed.
    """
    if today is None:
        today = get_listing_today()
    return SelectionEngine(
        price_rules=PriceRuleSet.from_dict(settings.DEFAULT_PRICE_RULES),
        min_stay_days=settings.STAY_MIN_NIGHTS,
        max_stay_days=settings.STAY_MAX_NIGHTS,
        bounds=CalendarBounds.build(today),
    )
