import logging
from typing import Any, List, NamedTuple, Optional

import requests
from django.conf import settings

from api.v1.booking.serializers import BusyIntervalSerializer
from availability.types import BusyInterval
from booking.engine import SelectionEngine
from core.exceptions import InvalidRuleSet, StaleDataWarning
from pricing import PriceRuleSet


logger = logging.getLogger(__name__)


class FeedRefreshResult(NamedTuple):
    busy_loaded: bool
    rules_loaded: bool


def _log_stale_data(message: str) -> None:
    logger.warning('{0}: {1}; keeping last known data'.format(
        StaleDataWarning.__name__, message
    ))


def parse_busy_intervals(data: Any) -> Optional[List[BusyInterval]]:
    """
    Convert busy dates feed payload to busy intervals. Invalid entries are
    dropped with a warning; a payload which is not a list gives None.
    """
    if not isinstance(data, list):
        return None
    intervals: List[BusyInterval] = []
    for entry in data:
        serializer = BusyIntervalSerializer(data=entry)
        if not serializer.is_valid():
            logger.warning('Dropping busy dates entry {0!r}: {1}'.format(
                entry, serializer.errors
            ))
            continue
        intervals.append(serializer.to_busy_interval())
    return intervals


def fetch_busy_intervals(
        url: str, timeout: Optional[float] = None
) -> Optional[List[BusyInterval]]:
    """Load busy intervals from busy dates feed; return None if they can't be loaded"""
    if not url:
        return None
    if timeout is None:
        timeout = settings.RENTAL_FEED_TIMEOUT
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        _log_stale_data('failed to fetch busy dates from {0}: {1}'.format(url, e))
        return None
    try:
        data = response.json()
    except ValueError:
        _log_stale_data('busy dates response from {0} is not valid JSON'.format(url))
        return None

    intervals = parse_busy_intervals(data)
    if intervals is None:
        _log_stale_data('busy dates response from {0} is not a list'.format(url))
    return intervals


def fetch_price_rules(url: str, timeout: Optional[float] = None) -> Optional[PriceRuleSet]:
    """Load price rules from price rules feed; return None if they can't be loaded"""
    if not url:
        return None
    if timeout is None:
        timeout = settings.RENTAL_FEED_TIMEOUT
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        _log_stale_data('failed to fetch price rules from {0}: {1}'.format(url, e))
        return None
    if not response.ok:
        _log_stale_data('price rules request to {0} returned {1}'.format(
            url, response.status_code
        ))
        return None
    try:
        data = response.json()
    except ValueError:
        _log_stale_data('price rules response from {0} is not valid JSON'.format(url))
        return None
    try:
        return PriceRuleSet.from_dict(data)
    except InvalidRuleSet as e:
        _log_stale_data('invalid price rules from {0}: {1}'.format(url, e))
    return None


def refresh_engine(
        engine: SelectionEngine,
        busy_dates_url: Optional[str] = None,
        price_rules_url: Optional[str] = None
) -> FeedRefreshResult:
    """
    Load busy dates and price rules (URLs from settings if omitted) and
    hand them to the engine. Whatever fails to load is left as it was.
    """
    if busy_dates_url is None:
        busy_dates_url = settings.BUSY_DATES_URL
    if price_rules_url is None:
        price_rules_url = settings.PRICE_RULES_URL

    intervals = fetch_busy_intervals(busy_dates_url)
    if intervals is not None:
        engine.set_busy_intervals(intervals)

    rules = fetch_price_rules(price_rules_url)
    if rules is not None:
        engine.set_price_rules(rules)

    return FeedRefreshResult(
        busy_loaded=intervals is not None,
        rules_loaded=rules is not None,
    )
