"""Unit tests for utils.time_utils."""

from datetime import datetime, timedelta, timezone

from utils.time_utils import (
    day_key,
    ensure_utc,
    from_epoch_ms,
    parse_timestamp,
    to_epoch_ms,
    to_iso,
)


class TestParseTimestamp:
    def test_iso_with_z_suffix(self):
        parsed = parse_timestamp("2024-05-10T12:30:00Z")
        assert parsed == datetime(2024, 5, 10, 12, 30, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self):
        parsed = parse_timestamp("2024-05-10T07:30:00-05:00")
        assert parsed == datetime(2024, 5, 10, 12, 30, tzinfo=timezone.utc)

    def test_naive_string_is_assumed_utc(self):
        parsed = parse_timestamp("2024-05-10T12:30:00")
        assert parsed.tzinfo == timezone.utc

    def test_epoch_milliseconds(self):
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert parse_timestamp(86_400_000) == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_invalid_values_return_none(self):
        for value in (None, "", "not a date", True, {"a": 1}):
            assert parse_timestamp(value) is None


class TestConversions:
    def test_epoch_round_trip(self):
        value = datetime(2024, 5, 10, 12, 30, 15, 250000, tzinfo=timezone.utc)
        assert from_epoch_ms(to_epoch_ms(value)) == value

    def test_to_iso_millisecond_z(self):
        value = datetime(2024, 5, 10, 12, 30, tzinfo=timezone.utc)
        assert to_iso(value) == "2024-05-10T12:30:00.000Z"
        assert to_iso(None) is None

    def test_day_key_uses_utc_date(self):
        late_local = datetime(2024, 5, 10, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert day_key(late_local) == "2024-05-11"

    def test_ensure_utc_naive(self):
        assert ensure_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc
