import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterator


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Number of nights from start to end; negative if end is before start"""
    return (end - start).days


def iter_days(start: datetime.date, end: datetime.date) -> Iterator[datetime.date]:
    """Yield every day in [start, end), i.e. the end date itself is excluded"""
    for i in range(0, days_between(start, end)):
        yield start + datetime.timedelta(days=i)


def month_day_key(date: datetime.date) -> str:
    return '{0:02d}-{1:02d}'.format(date.month, date.day)


def round_price(price: float) -> int:
    # round half up (x.5 -> x+1), same as how the widget shows prices
    return int(Decimal(str(price)).quantize(Decimal('1.'), rounding=ROUND_HALF_UP))
