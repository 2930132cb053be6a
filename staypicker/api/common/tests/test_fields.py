import datetime

import pytest
from rest_framework.exceptions import ValidationError

from api.common.constants import ErrorMessages
from api.common.fields import CalendarDayField


class TestCalendarDayField(object):

    def test_to_internal_value(self):
        field = CalendarDayField()
        assert(field.to_internal_value('2024-01-10') == datetime.date(2024, 1, 10))
        assert(field.to_internal_value('2024-01-10T00:00:00') == datetime.date(2024, 1, 10))
        # date part is kept as is, no timezone conversion
        assert(field.to_internal_value(
            '2024-01-10T23:30:00-05:00') == datetime.date(2024, 1, 10))
        assert(field.to_internal_value(
            '2024-01-10T00:30:00+02:00') == datetime.date(2024, 1, 10))
        assert(field.to_internal_value(
            datetime.date(2024, 1, 10)) == datetime.date(2024, 1, 10))
        assert(field.to_internal_value(
            datetime.datetime(2024, 1, 10, 18, 0)) == datetime.date(2024, 1, 10))

    def test_invalid_values(self):
        field = CalendarDayField()
        for value in ['', 'tomorrow', '2024-13-01', 20240110, None]:
            with pytest.raises(ValidationError) as exc_info:
                field.to_internal_value(value)
            assert(exc_info.value.detail[0] == ErrorMessages.ERR_INVALID_DATE)

    def test_to_representation(self):
        field = CalendarDayField()
        assert(field.to_representation(datetime.date(2024, 1, 5)) == '2024-01-05')
