from typing import Optional

from rest_framework import serializers

from api.common.constants import ErrorMessages
from api.common.fields import CalendarDayField
from availability.types import BusyInterval, DAY_STATUS_CHOICES
from booking.types import SelectionQuote


class BusyIntervalSerializer(serializers.Serializer):
    """
    Busy interval entry of the busy dates feed. Entries come either as
    {"From": "2024-01-10T00:00:00", "To": "2024-01-15T00:00:00"} or as
    {"startDate": "2024-01-10", "endDate": "2024-01-15"}; From/To win if both
    are present.
    """
    From = CalendarDayField(required=False, allow_null=True)
    To = CalendarDayField(required=False, allow_null=True)
    startDate = CalendarDayField(required=False, allow_null=True)
    endDate = CalendarDayField(required=False, allow_null=True)

    def validate(self, attrs):
        start = attrs.get('From') or attrs.get('startDate')
        end = attrs.get('To') or attrs.get('endDate')
        if start is None or end is None:
            raise serializers.ValidationError(ErrorMessages.ERR_MISSING_DATES)
        if start > end:
            raise serializers.ValidationError(ErrorMessages.ERR_END_BEFORE_START)
        return {'start': start, 'end': end}

    def to_busy_interval(self) -> BusyInterval:
        return BusyInterval(**self.validated_data)


class NightPriceSerializer(serializers.Serializer):
    date = CalendarDayField()
    price = serializers.FloatField()


class SelectionQuoteSerializer(serializers.Serializer):
    """Payload of the selection-changed event, in the shape the widget consumes"""
    startDate = CalendarDayField(source='start', allow_null=True)
    endDate = CalendarDayField(source='end', allow_null=True)
    nights = serializers.IntegerField()
    fullPrice = serializers.FloatField(source='full_price')
    discountedPrice = serializers.IntegerField(source='discounted_price')
    isComplete = serializers.BooleanField(source='is_complete')
    isValid = serializers.BooleanField(source='is_valid')
    state = serializers.CharField()
    discountType = serializers.SerializerMethodField(method_name='get_discount_type')
    nightlyPrices = NightPriceSerializer(source='nightly_prices', many=True)

    def get_discount_type(self, quote: SelectionQuote) -> Optional[str]:
        if quote.discount_type is None:
            return None
        return quote.discount_type.value


class DayInfoSerializer(serializers.Serializer):
    date = CalendarDayField()
    status = serializers.ChoiceField(choices=DAY_STATUS_CHOICES)
    isDisabled = serializers.BooleanField(source='is_disabled')
    price = serializers.FloatField(allow_null=True)
    isRangeStart = serializers.BooleanField(source='is_range_start')
    isRangeEnd = serializers.BooleanField(source='is_range_end')
    isInRange = serializers.BooleanField(source='is_in_range')
