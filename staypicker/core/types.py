import datetime
from enum import Enum, IntEnum


class StrEnum(str, Enum):
    """Enum where members are also (and must be) strs"""

    def __str__(self):
        return self.value


class Weekday(IntEnum):
    # Numbering follows the price rule feed: 0 is Sunday
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @staticmethod
    def for_date(date: datetime.date) -> 'Weekday':
        return Weekday(date.isoweekday() % 7)
