import datetime
import re
from enum import Enum
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from core.exceptions import InvalidRuleSet
from core.types import Weekday
from core.utils import days_between, iter_days, month_day_key, round_price

from .constants import (
    MONTH_DISCOUNT_MIN_NIGHTS,
    WEEK_DISCOUNT_MIN_NIGHTS,
)

MONTH_DAY_KEY_RE = re.compile(r'^(\d{2})-(\d{2})$')


class StayDiscount(Enum):
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'


class DiscountDescr(NamedTuple):
    type: StayDiscount
    discount: float


class NightPrice(NamedTuple):
    date: datetime.date
    price: float


class StayPrice(NamedTuple):
    nights: int
    full_price: float
    discounted_price: int
    discount_type: Optional[StayDiscount]
    nightly_prices: Tuple[NightPrice, ...]


def is_valid_price(price: Any) -> bool:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return price >= 0


def is_valid_discount(discount: Any) -> bool:
    if isinstance(discount, bool) or not isinstance(discount, (int, float)):
        return False
    return 0 <= discount < 1


def to_weekday(key: Any) -> Optional[Weekday]:
    """Weekday for 0..6 (Sunday is 0) given as a Weekday, int or numeric str"""
    if isinstance(key, (bool, float)):
        return None
    try:
        return Weekday(int(key))
    except (TypeError, ValueError):
        return None


def is_valid_month_day_key(key: str) -> bool:
    if not isinstance(key, str):
        return False
    match = MONTH_DAY_KEY_RE.match(key)
    if not match:
        return False
    month, day = (int(part) for part in match.groups())
    try:
        # 2000 is a leap year, so 02-29 rules are accepted
        datetime.date(2000, month, day)
    except ValueError:
        return False
    return True


class PriceRuleSet(object):
    """
    Nightly price rules of a listing.

    A night is priced by the first rule which matches it: a date-specific
    price (`by_date`, keyed by 'MM-DD' so it recurs every year), then a weekday
    price (`by_weekday`, keyed by 0..6 with Sunday as 0; Weekday members,
    ints and numeric strings are accepted), then the `default` price. Long
    stays may get one of the `discount_month` / `discount_week` discounts,
    expressed as a fraction of the full price (0.1 means 10% off).

    Raises:
        InvalidRuleSet exception on invalid input.
    """

    def __init__(
            self,
            default: float,
            by_weekday: Optional[Mapping[Any, float]] = None,
            by_date: Optional[Dict[str, float]] = None,
            discount_week: Optional[float] = None,
            discount_month: Optional[float] = None
    ) -> None:
        if default is None:
            raise InvalidRuleSet('Default price is missing')
        if not is_valid_price(default) or default == 0:
            raise InvalidRuleSet('Default price must be a positive number')

        weekday_prices: Dict[Weekday, float] = {}
        for key, price in (by_weekday or {}).items():
            weekday = to_weekday(key)
            if weekday is None:
                raise InvalidRuleSet('Invalid weekday {0}'.format(key))
            if not is_valid_price(price):
                raise InvalidRuleSet('Invalid price for weekday {0}'.format(key))
            weekday_prices[weekday] = price

        by_date = dict(by_date or {})
        for key, price in by_date.items():
            if not is_valid_month_day_key(key):
                raise InvalidRuleSet('Invalid date key {0}, expected MM-DD'.format(key))
            if not is_valid_price(price):
                raise InvalidRuleSet('Invalid price for date {0}'.format(key))

        for discount in (discount_week, discount_month):
            if discount is not None and not is_valid_discount(discount):
                raise InvalidRuleSet('Discount must be in [0..1) range')

        self.default = default
        self.by_weekday = weekday_prices
        self.by_date = by_date
        self.discount_week = discount_week
        self.discount_month = discount_month

    @staticmethod
    def from_dict(data: Mapping) -> 'PriceRuleSet':
        """
        Build rules from the price rules feed format:

            {"default": 380, "days": {"5": 420}, "dates": {"12-25": 1000},
             "discount_week": 0.1, "discount_month": 0.2}
        """
        if not isinstance(data, Mapping):
            raise InvalidRuleSet('Price rules must be a mapping')
        days = data.get('days') or {}
        dates = data.get('dates') or {}
        if not isinstance(days, Mapping) or not isinstance(dates, Mapping):
            raise InvalidRuleSet('`days` and `dates` must be mappings')

        return PriceRuleSet(
            default=data.get('default'),
            by_weekday=dict(days),
            by_date=dict(dates),
            discount_week=data.get('discount_week'),
            discount_month=data.get('discount_month'),
        )

    def price_for(self, date: datetime.date) -> float:
        date_price = self.by_date.get(month_day_key(date))
        if date_price is not None:
            return date_price
        weekday_price = self.by_weekday.get(Weekday.for_date(date))
        if weekday_price is not None:
            return weekday_price
        return self.default


def find_applicable_discount(rules: PriceRuleSet, nights: int) -> Optional[DiscountDescr]:
    """
    Return the long-stay discount for the given number of nights, or None.

    Only one discount is ever applied; the monthly one wins over the weekly one.
    A discount of 0 is the same as no discount.
    """
    if nights >= MONTH_DISCOUNT_MIN_NIGHTS and rules.discount_month:
        return DiscountDescr(StayDiscount.MONTHLY, rules.discount_month)
    if nights >= WEEK_DISCOUNT_MIN_NIGHTS and rules.discount_week:
        return DiscountDescr(StayDiscount.WEEKLY, rules.discount_week)
    return None


def calc_stay_price(
        rules: PriceRuleSet,
        start: datetime.date,
        end: datetime.date) -> StayPrice:
    """
    Calculate the price of a stay from start (check-in) to end (check-out).

    Every night in [start, end) is priced with `PriceRuleSet.price_for`; the
    check-out day itself is not charged. The discounted price is rounded to
    a whole currency unit, the full price is kept exact.

    Raises:
        ValueError exception if end is not after start.
    """
    nights = days_between(start, end)
    if nights <= 0:
        raise ValueError('Stay must end after it starts')

    nightly_prices = tuple(NightPrice(date, rules.price_for(date))
                           for date in iter_days(start, end))
    full_price = sum(night.price for night in nightly_prices)

    discount = find_applicable_discount(rules, nights)
    if discount is None:
        discounted_price = full_price
    else:
        discounted_price = full_price * (1 - discount.discount)

    return StayPrice(
        nights=nights,
        full_price=full_price,
        discounted_price=round_price(discounted_price),
        discount_type=discount.type if discount else None,
        nightly_prices=nightly_prices,
    )
