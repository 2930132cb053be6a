import datetime
from typing import NamedTuple

from model_utils import Choices

from core.types import StrEnum


class DayStatus(StrEnum):
    FREE = 'free'
    # first day of a booking: free in the morning, busy from the afternoon
    START = 'start'
    # last day of a booking: busy in the morning, free from the afternoon
    END = 'end'
    FULL = 'full'


DAY_STATUS_CHOICES = Choices(
    (DayStatus.FREE.value, 'free', 'Free'),
    (DayStatus.START.value, 'start', 'Busy from the afternoon'),
    (DayStatus.END.value, 'end', 'Busy until the morning'),
    (DayStatus.FULL.value, 'full', 'Fully booked'),
)


class BusyInterval(NamedTuple):
    start: datetime.date
    end: datetime.date
