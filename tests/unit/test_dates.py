"""Unit tests for timestamp parsing."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from feed_filter.dates import parse_date, try_parse_date
from feed_filter.errors import DateUnparseable


class TestParseDate:
    """Each supported layout parses to an aware datetime."""

    def test_rfc1123_numeric_offset(self):
        result = parse_date("Mon, 02 Jan 2006 15:04:05 -0700")

        assert result == datetime(2006, 1, 2, 22, 4, 5, tzinfo=timezone.utc)
        assert result.utcoffset() == timedelta(hours=-7)

    def test_rfc1123_gmt(self):
        result = parse_date("Mon, 02 Jan 2006 15:04:05 GMT")

        assert result == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)

    def test_rfc1123_north_american_zone(self):
        result = parse_date("Mon, 02 Jan 2006 15:04:05 EST")

        assert result.utcoffset() == timedelta(hours=-5)
        assert result == datetime(2006, 1, 2, 20, 4, 5, tzinfo=timezone.utc)

    def test_unknown_zone_abbreviation_reads_as_utc(self):
        result = parse_date("Mon, 02 Jan 2006 15:04:05 CEST")

        assert result == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)

    def test_rfc822_numeric_offset(self):
        result = parse_date("02 Jan 06 15:04 +0100")

        assert result == datetime(2006, 1, 2, 14, 4, tzinfo=timezone.utc)

    def test_rfc822_zone_name(self):
        result = parse_date("02 Jan 06 15:04 PST")

        assert result == datetime(2006, 1, 2, 23, 4, tzinfo=timezone.utc)

    def test_iso8601_zulu(self):
        assert parse_date("2024-06-01T10:00:00Z") == datetime(2024, 6, 1, 10, tzinfo=timezone.utc)

    def test_iso8601_offset(self):
        result = parse_date("2024-06-01T10:00:00+02:00")

        assert result == datetime(2024, 6, 1, 8, tzinfo=timezone.utc)

    def test_iso8601_fractional_seconds(self):
        result = parse_date("2024-06-01T10:00:00.250Z")

        assert result == datetime(2024, 6, 1, 10, 0, 0, 250000, tzinfo=timezone.utc)

    def test_date_only_is_midnight_utc(self):
        result = parse_date("2024-01-01")

        assert result == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert result.tzinfo is not None

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_date("  2024-01-01\n") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["garbage", "", "   ", None, "2024-13-45", "yesterday"])
    def test_unparseable_values_raise(self, value):
        with pytest.raises(DateUnparseable):
            parse_date(value)


class TestTryParseDate:
    def test_returns_none_for_garbage(self):
        assert try_parse_date("garbage") is None

    def test_returns_datetime_for_valid_value(self):
        assert try_parse_date("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestLayoutLogging:
    def test_matched_layout_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="feed_filter.dates"):
            parse_date("02 Jan 06 15:04 PST")

        assert "RFC822" in caplog.text
        assert "RFC822Z" not in caplog.text
