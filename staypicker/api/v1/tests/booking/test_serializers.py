import datetime

from api.common.constants import ErrorMessages
from api.v1.booking.serializers import (
    BusyIntervalSerializer,
    DayInfoSerializer,
    SelectionQuoteSerializer,
)
from availability.types import BusyInterval, DayStatus
from booking.engine import SelectionEngine
from pricing import PriceRuleSet


class TestBusyIntervalSerializer(object):

    def test_from_to_format(self):
        serializer = BusyIntervalSerializer(data={
            'From': '2024-01-10T00:00:00',
            'To': '2024-01-15T00:00:00',
        })
        assert(serializer.is_valid())
        assert(serializer.to_busy_interval() == BusyInterval(
            datetime.date(2024, 1, 10), datetime.date(2024, 1, 15)
        ))

    def test_start_end_format(self):
        serializer = BusyIntervalSerializer(data={
            'startDate': '2024-01-10',
            'endDate': '2024-01-15',
        })
        assert(serializer.is_valid())
        assert(serializer.to_busy_interval() == BusyInterval(
            datetime.date(2024, 1, 10), datetime.date(2024, 1, 15)
        ))

    def test_from_to_win(self):
        serializer = BusyIntervalSerializer(data={
            'From': '2024-02-10T00:00:00Z',
            'To': '2024-02-15T00:00:00Z',
            'startDate': '2024-01-10',
            'endDate': '2024-01-15',
        })
        assert(serializer.is_valid())
        assert(serializer.to_busy_interval().start == datetime.date(2024, 2, 10))

    def test_single_day(self):
        serializer = BusyIntervalSerializer(data={
            'startDate': '2024-01-10',
            'endDate': '2024-01-10',
        })
        assert(serializer.is_valid())

    def test_validation(self):
        serializer = BusyIntervalSerializer(data={
            'startDate': '2024-01-15',
            'endDate': '2024-01-10',
        })
        assert(not serializer.is_valid())
        assert(ErrorMessages.ERR_END_BEFORE_START in serializer.errors['non_field_errors'])

        serializer = BusyIntervalSerializer(data={'From': '2024-01-15'})
        assert(not serializer.is_valid())
        assert(ErrorMessages.ERR_MISSING_DATES in serializer.errors['non_field_errors'])

        serializer = BusyIntervalSerializer(data={'From': None, 'To': None})
        assert(not serializer.is_valid())

        serializer = BusyIntervalSerializer(data={
            'startDate': 'soon',
            'endDate': '2024-01-10',
        })
        assert(not serializer.is_valid())
        assert(ErrorMessages.ERR_INVALID_DATE in serializer.errors['startDate'])


class TestSelectionQuoteSerializer(object):

    def test_incomplete_quote(self):
        engine = SelectionEngine(price_rules=PriceRuleSet(default=100))
        data = SelectionQuoteSerializer(engine.get_quote()).data
        assert(data['startDate'] is None)
        assert(data['endDate'] is None)
        assert(data['nights'] == 0)
        assert(data['fullPrice'] == 0)
        assert(data['discountedPrice'] == 0)
        assert(data['isComplete'] is False)
        assert(data['isValid'] is True)
        assert(data['state'] == 'empty')
        assert(data['discountType'] is None)
        assert(data['nightlyPrices'] == [])

        quote = engine.select_day(datetime.date(2024, 3, 1))
        data = SelectionQuoteSerializer(quote).data
        assert(data['startDate'] == '2024-03-01')
        assert(data['endDate'] is None)
        assert(data['state'] == 'partial_start')

    def test_complete_quote(self):
        engine = SelectionEngine(price_rules=PriceRuleSet(default=100, discount_week=0.1))
        engine.select_day(datetime.date(2024, 3, 1))
        quote = engine.select_day(datetime.date(2024, 3, 8))
        data = SelectionQuoteSerializer(quote).data
        assert(data['startDate'] == '2024-03-01')
        assert(data['endDate'] == '2024-03-08')
        assert(data['nights'] == 7)
        assert(data['fullPrice'] == 700)
        assert(data['discountedPrice'] == 630)
        assert(data['isComplete'] is True)
        assert(data['state'] == 'complete')
        assert(data['discountType'] == 'weekly')
        assert(len(data['nightlyPrices']) == 7)
        assert(data['nightlyPrices'][0] == {'date': '2024-03-01', 'price': 100.0})


class TestDayInfoSerializer(object):

    def test_day_info(self):
        engine = SelectionEngine(
            price_rules=PriceRuleSet(default=100),
            busy_intervals=[BusyInterval(datetime.date(2024, 1, 10), datetime.date(2024, 1, 15))]
        )
        data = DayInfoSerializer(engine.describe_day(datetime.date(2024, 1, 12))).data
        assert(data['date'] == '2024-01-12')
        assert(data['status'] == DayStatus.FULL.value)
        assert(data['isDisabled'] is True)
        assert(data['price'] is None)

        data = DayInfoSerializer(engine.describe_day(datetime.date(2024, 1, 15))).data
        assert(data['status'] == 'end')
        assert(data['isDisabled'] is False)
        assert(data['price'] == 100)
        assert(data['isRangeStart'] is False)
        assert(data['isRangeEnd'] is False)
        assert(data['isInRange'] is False)
