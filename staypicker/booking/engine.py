import datetime
import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from availability import AvailabilityIndex, is_calendar_day
from availability.types import DayStatus
from core.utils import days_between
from pricing import calc_stay_price, PriceRuleSet
from pricing.constants import DEFAULT_PRICE_RULES

from .constants import DEFAULT_MAX_STAY_DAYS, DEFAULT_MIN_STAY_DAYS
from .types import (
    CalendarBounds,
    DayInfo,
    Selection,
    SelectionQuote,
    SelectionState,
)

logger = logging.getLogger(__name__)

QuoteListener = Callable[[SelectionQuote], None]


class SelectionEngine(object):
    """
    Check-in / check-out selection of a single listing.

    The selection is changed only by `select_day`, which follows the way a
    user clicks through the calendar: the first click picks the check-in
    day, the second one picks the check-out day if the stay is valid
    (within stay limits and not overlapping existing bookings) or starts a
    new selection otherwise. A click on a complete selection always starts
    a new one.

    After every change (including replaced busy dates or price rules) all
    listeners are called with a freshly computed `SelectionQuote`.
    """

    def __init__(
            self,
            price_rules: Optional[PriceRuleSet] = None,
            busy_intervals: Optional[Iterable[Any]] = None,
            min_stay_days: int = DEFAULT_MIN_STAY_DAYS,
            max_stay_days: int = DEFAULT_MAX_STAY_DAYS,
            bounds: Optional[CalendarBounds] = None
    ) -> None:
        if min_stay_days < 1:
            raise ValueError('min_stay_days must be at least 1')
        if max_stay_days < min_stay_days:
            raise ValueError('max_stay_days must not be less than min_stay_days')

        self.min_stay_days = min_stay_days
        self.max_stay_days = max_stay_days
        self.bounds = bounds
        self.availability = AvailabilityIndex(busy_intervals)
        self.price_rules = (
            price_rules if price_rules is not None
            else PriceRuleSet.from_dict(DEFAULT_PRICE_RULES)
        )
        self._selection = Selection()
        self._listeners: List[QuoteListener] = []

    @property
    def selection(self) -> Selection:
        return self._selection

    def add_listener(self, listener: QuoteListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: QuoteListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, quote: SelectionQuote) -> None:
        for listener in list(self._listeners):
            listener(quote)

    def set_busy_intervals(self, intervals: Iterable[Any]) -> None:
        """
        Replace all busy intervals, given as {"start", "end"} mappings or
        (start, end) pairs. Malformed entries are dropped (and logged); a value
        which is not a list of entries is logged and current intervals are kept.
        Never raises. Current selection is kept as is even if it becomes
        unavailable.
        """
        dropped = self.availability.replace(intervals)
        if dropped:
            logger.warning('{0} busy interval(s) were dropped'.format(dropped))
        self._notify(self.get_quote())

    def set_price_rules(self, rules: Union[PriceRuleSet, Mapping]) -> None:
        """
        Replace price rules with a PriceRuleSet or a price rules feed dict.

        Raises:
            InvalidRuleSet if rules are invalid; current rules stay in effect.
        """
        if not isinstance(rules, PriceRuleSet):
            rules = PriceRuleSet.from_dict(rules)
        self.price_rules = rules
        self._notify(self.get_quote())

    def classify(self, day: datetime.date) -> DayStatus:
        return self.availability.classify(day)

    def is_selectable(self, day: datetime.date) -> bool:
        if self.bounds is not None and not self.bounds.is_within(day):
            return False
        return self.classify(day) != DayStatus.FULL

    def is_valid_stay(self, start: datetime.date, end: datetime.date) -> bool:
        nights = days_between(start, end)
        if nights < self.min_stay_days or nights > self.max_stay_days:
            return False
        return not self.availability.overlaps(start, end)

    def next_selection(self, day: datetime.date) -> Selection:
        """Return the selection a click on `day` leads to, without applying it"""
        selection = self._selection
        if selection.state != SelectionState.PARTIAL_START:
            return Selection(start=day)
        if day < selection.start:
            return Selection(start=day)
        if not self.is_valid_stay(selection.start, day):
            # too short, too long or overlapping: start over from the clicked day
            return Selection(start=day)
        return Selection(start=selection.start, end=day)

    def select_day(self, day: datetime.date) -> SelectionQuote:
        if not is_calendar_day(day):
            raise TypeError('Calendar day (datetime.date) expected, got {0!r}'.format(day))

        if not self.is_selectable(day):
            logger.debug('Ignoring click on unavailable day {0}'.format(day))
            return self.get_quote()

        selection = self.next_selection(day)
        assert selection.end is None or selection.start < selection.end
        self._selection = selection

        quote = self.get_quote()
        self._notify(quote)
        return quote

    def is_selection_valid(self) -> bool:
        selection = self._selection
        state = selection.state
        if state == SelectionState.EMPTY:
            return True
        if state == SelectionState.PARTIAL_START:
            return self.is_selectable(selection.start)
        return self.is_valid_stay(selection.start, selection.end)

    def get_quote(self) -> SelectionQuote:
        selection = self._selection
        state = selection.state
        is_valid = self.is_selection_valid()
        if state != SelectionState.COMPLETE:
            return SelectionQuote(
                start=selection.start,
                end=selection.end,
                nights=0,
                full_price=0,
                discounted_price=0,
                is_complete=False,
                state=state,
                discount_type=None,
                nightly_prices=(),
                is_valid=is_valid,
            )

        stay_price = calc_stay_price(self.price_rules, selection.start, selection.end)
        return SelectionQuote(
            start=selection.start,
            end=selection.end,
            nights=stay_price.nights,
            full_price=stay_price.full_price,
            discounted_price=stay_price.discounted_price,
            is_complete=True,
            state=state,
            discount_type=stay_price.discount_type,
            nightly_prices=stay_price.nightly_prices,
            is_valid=is_valid,
        )

    def describe_day(self, day: datetime.date) -> DayInfo:
        """Everything a calendar needs to draw a single day"""
        status = self.classify(day)
        is_disabled = status == DayStatus.FULL or (
            self.bounds is not None and not self.bounds.is_within(day)
        )

        price = None
        # nights can't start on START days, so no price is shown for them
        if not is_disabled and status in (DayStatus.FREE, DayStatus.END):
            price = self.price_rules.price_for(day)

        start, end = self._selection
        is_range_start = is_range_end = is_in_range = False
        if status != DayStatus.FULL:
            is_range_start = day == start
            is_range_end = day == end
            is_in_range = start is not None and end is not None and start < day < end

        return DayInfo(
            date=day,
            status=status,
            is_disabled=is_disabled,
            price=price,
            is_range_start=is_range_start,
            is_range_end=is_range_end,
            is_in_range=is_in_range,
        )
