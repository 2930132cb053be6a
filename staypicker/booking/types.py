import datetime
from typing import NamedTuple, Optional, Tuple

from dateutil.relativedelta import relativedelta

from availability.types import DayStatus
from core.types import StrEnum
from pricing import NightPrice, StayDiscount

from .constants import MAX_NAVIGABLE_YEARS_AHEAD, MIN_SELECTABLE_DAYS_AHEAD


class SelectionState(StrEnum):
    EMPTY = 'empty'
    PARTIAL_START = 'partial_start'
    COMPLETE = 'complete'


class Selection(NamedTuple):
    start: Optional[datetime.date] = None
    end: Optional[datetime.date] = None

    @property
    def state(self) -> SelectionState:
        if self.start is None:
            return SelectionState.EMPTY
        if self.end is None:
            return SelectionState.PARTIAL_START
        return SelectionState.COMPLETE


class SelectionQuote(NamedTuple):
    start: Optional[datetime.date]
    end: Optional[datetime.date]
    nights: int
    full_price: float
    discounted_price: int
    is_complete: bool
    state: SelectionState
    discount_type: Optional[StayDiscount]
    nightly_prices: Tuple[NightPrice, ...]
    # False when busy dates or stay limits changed after the selection was made
    is_valid: bool


class DayInfo(NamedTuple):
    date: datetime.date
    status: DayStatus
    is_disabled: bool
    price: Optional[float]
    is_range_start: bool
    is_range_end: bool
    is_in_range: bool


def first_of_month(date: datetime.date) -> datetime.date:
    return date.replace(day=1)


class CalendarBounds(NamedTuple):
    today: datetime.date
    min_selectable: datetime.date
    max_navigable: datetime.date

    @staticmethod
    def build(today: datetime.date) -> 'CalendarBounds':
        return CalendarBounds(
            today=today,
            min_selectable=today + datetime.timedelta(days=MIN_SELECTABLE_DAYS_AHEAD),
            max_navigable=today + relativedelta(years=MAX_NAVIGABLE_YEARS_AHEAD),
        )

    def is_within(self, day: datetime.date) -> bool:
        return self.min_selectable <= day <= self.max_navigable

    def can_go_back(self, first_shown_month: datetime.date) -> bool:
        """Check if the month before first_shown_month may be shown"""
        previous_month = first_of_month(first_shown_month) - relativedelta(months=1)
        return previous_month >= first_of_month(self.today)

    def can_go_forward(self, first_shown_month: datetime.date, months_shown: int = 1) -> bool:
        """Check if the month after the last shown one may be shown"""
        next_month = first_of_month(first_shown_month) + relativedelta(months=months_shown)
        return next_month < self.max_navigable
