import datetime
import logging
from typing import Any, Iterable, List, Mapping, Optional

from .types import BusyInterval, DayStatus

logger = logging.getLogger(__name__)


def is_calendar_day(value: Any) -> bool:
    # datetime is a subclass of date, but carries a time of day
    return isinstance(value, datetime.date) and not isinstance(value, datetime.datetime)


def to_busy_interval(item: Any) -> Optional[BusyInterval]:
    """
    Return a BusyInterval for a {'start': ..., 'end': ...} mapping or a
    (start, end) pair, or None if it is malformed
    """
    if isinstance(item, Mapping):
        start, end = item.get('start'), item.get('end')
    else:
        try:
            start, end = item
        except (TypeError, ValueError):
            return None
    if not (is_calendar_day(start) and is_calendar_day(end)):
        return None
    if start > end:
        return None
    return BusyInterval(start=start, end=end)


class AvailabilityIndex(object):
    """
    Availability of a listing computed from its existing bookings.

    Each busy interval is an existing stay: guests check in on `start` and
    check out on `end`. Days strictly between are fully occupied, while
    `start` and `end` are turnover days which are still partially free.
    Intervals may come in any order, overlap or repeat.
    """

    def __init__(self, intervals: Optional[Iterable[Any]] = None) -> None:
        self._intervals: List[BusyInterval] = []
        if intervals is not None:
            self.replace(intervals)

    @property
    def intervals(self) -> List[BusyInterval]:
        return list(self._intervals)

    def replace(self, intervals: Iterable[Any]) -> int:
        """
        Replace all busy intervals at once. Malformed entries (not a pair of
        calendar days, or start after end) are dropped with a warning. A value
        which is not a collection of entries (None, a number, a single mapping
        or a string) is ignored with a warning and current intervals are kept.

        Returns:
            number of dropped entries
        """
        if isinstance(intervals, (str, bytes, Mapping)) or not isinstance(intervals, Iterable):
            logger.warning('Ignoring malformed busy intervals {0!r}; keeping {1} interval(s)'.format(
                intervals, len(self._intervals)
            ))
            return 0
        accepted: List[BusyInterval] = []
        dropped = 0
        for item in intervals:
            interval = to_busy_interval(item)
            if interval is None:
                logger.warning('Dropping malformed busy interval: {0!r}'.format(item))
                dropped += 1
                continue
            accepted.append(interval)
        self._intervals = accepted
        return dropped

    def classify(self, day: datetime.date) -> DayStatus:
        status = DayStatus.FREE
        for interval in self._intervals:
            if interval.start < day < interval.end:
                return DayStatus.FULL
            if day == interval.start:
                # the day already ends another stay, no room for a turnover
                if status == DayStatus.END:
                    return DayStatus.FULL
                status = DayStatus.START
            if day == interval.end:
                if status == DayStatus.START:
                    return DayStatus.FULL
                status = DayStatus.END
        return status

    def overlaps(self, start: datetime.date, end: datetime.date) -> bool:
        """
        Check if a stay from start to end intersects any busy interval.
        Touching an interval on a turnover day is not an overlap.
        """
        return any(
            start < interval.end and end > interval.start
            for interval in self._intervals
        )
