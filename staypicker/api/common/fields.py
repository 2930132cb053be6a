import datetime

from dateutil import parser
from rest_framework import serializers
from rest_framework.exceptions import ValidationError

from api.common.constants import ErrorMessages


class CalendarDayField(serializers.Field):
    """
    Calendar day read from either a date ('2024-01-10') or an ISO datetime
    ('2024-01-10T00:00:00Z'). Only the date part of a datetime is used, it is
    never converted between timezones.
    """
    default_error_messages = {
        'invalid': ErrorMessages.ERR_INVALID_DATE,
    }

    def to_internal_value(self, data) -> datetime.date:
        if isinstance(data, datetime.datetime):
            return data.date()
        if isinstance(data, datetime.date):
            return data
        if not isinstance(data, str) or not data:
            raise ValidationError(self.error_messages['invalid'])
        try:
            return parser.isoparse(data).date()
        except (ValueError, OverflowError):
            raise ValidationError(self.error_messages['invalid'])

    def to_representation(self, value: datetime.date) -> str:
        return value.isoformat()
