"""Tests for date and time helpers"""
from datetime import date, datetime, timedelta

import pytz

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from customer_app.utils.date_time_utils import local_date, parse_timestamp


class TestParseTimestamp:
    def test_two_digit_fraction(self):
        parsed = parse_timestamp("2026-01-27T09:00:00.12+00:00")

        assert parsed.microsecond == 120000
        assert parsed.utcoffset() == timedelta(0)

    def test_trailing_z(self):
        parsed = parse_timestamp("2026-01-27T09:00:00Z")

        assert parsed == datetime(2026, 1, 27, 9, 0, tzinfo=parsed.tzinfo)
        assert parsed.utcoffset() == timedelta(0)

    def test_absent_or_malformed(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("tomorrow-ish") is None


class TestLocalDate:
    def test_fractional_timestamp_lands_on_local_day(self):
        tz = pytz.timezone("Asia/Ho_Chi_Minh")

        assert local_date("2026-01-26T18:30:00.5+00:00", tz) == date(2026, 1, 27)

    def test_naive_timestamp_keeps_its_date(self):
        assert local_date("2026-01-27T23:30:00") == date(2026, 1, 27)
