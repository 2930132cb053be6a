import datetime
import json
from io import TextIOBase

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import ValidationError

from api.common.fields import CalendarDayField
from api.v1.booking.serializers import SelectionQuoteSerializer
from booking.types import SelectionQuote
from booking.utils import build_engine_from_settings
from integrations.rental_feed import refresh_engine


def parse_calendar_day(value: str) -> datetime.date:
    try:
        return CalendarDayField().to_internal_value(value)
    except ValidationError:
        raise CommandError('Invalid date: {0}'.format(value))


def write_quote(quote: SelectionQuote, stdout: TextIOBase) -> None:
    stdout.write(json.dumps(SelectionQuoteSerializer(quote).data, sort_keys=True))


class Command(BaseCommand):
    """
    Quote a stay from START (check-in) to END (check-out) the same way the
    calendar does it: busy dates and price rules are loaded from the feeds,
    then both days are clicked in turn. If the stay can't be booked the
    printed quote is incomplete.
    """
    help = 'Print the price quote of a stay as JSON'

    def add_arguments(self, parser):
        parser.add_argument('start', help='Check-in day, YYYY-MM-DD')
        parser.add_argument('end', help='Check-out day, YYYY-MM-DD')
        parser.add_argument(
            '--busy-url',
            dest='busy_url',
            default=None,
            help='Busy dates feed URL; BUSY_DATES_URL setting by default',
        )
        parser.add_argument(
            '--rules-url',
            dest='rules_url',
            default=None,
            help='Price rules feed URL; PRICE_RULES_URL setting by default',
        )

    def handle(self, *args, **options):
        start = parse_calendar_day(options['start'])
        end = parse_calendar_day(options['end'])

        engine = build_engine_from_settings()
        result = refresh_engine(
            engine,
            busy_dates_url=options['busy_url'],
            price_rules_url=options['rules_url'],
        )
        if not result.busy_loaded:
            self.stderr.write('Busy dates are not loaded, all days are shown as free')
        if not result.rules_loaded:
            self.stderr.write('Price rules are not loaded, using built-in rules')

        engine.select_day(start)
        quote = engine.select_day(end)
        write_quote(quote, self.stdout)
