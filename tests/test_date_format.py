"""Tests for UTC-anchored date formatting."""

import time
from datetime import date, datetime, timedelta, timezone

import pytest

from src.application.services.date_format import (
    format_date_ymd,
    format_timestamp,
    to_utc_datetime,
)


@pytest.fixture(params=["America/Los_Angeles", "Asia/Tokyo", "UTC"])
def local_timezone(request, monkeypatch):
    monkeypatch.setenv("TZ", request.param)
    time.tzset()
    yield request.param
    monkeypatch.undo()
    time.tzset()


class TestFormatDateYmd:
    def test_utc_midnight_is_not_shifted(self, local_timezone):
        assert format_date_ymd(datetime(2024, 3, 1, tzinfo=timezone.utc)) == "2024-03-01"

    def test_epoch_seconds_use_utc(self, local_timezone):
        midnight = datetime(2024, 3, 1, tzinfo=timezone.utc).timestamp()
        assert format_date_ymd(midnight) == "2024-03-01"

    def test_aware_datetime_is_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        assert format_date_ymd(datetime(2024, 2, 29, 21, 0, tzinfo=eastern)) == "2024-03-01"

    def test_naive_datetime_is_treated_as_utc(self, local_timezone):
        assert format_date_ymd(datetime(2024, 3, 1, 23, 59)) == "2024-03-01"

    def test_plain_date(self):
        assert format_date_ymd(date(2023, 12, 31)) == "2023-12-31"

    def test_iso_strings(self):
        assert format_date_ymd("2023-12-31") == "2023-12-31"
        assert format_date_ymd("2024-03-01T00:00:00Z") == "2024-03-01"
        assert format_date_ymd("2024-03-01T01:00:00+02:00") == "2024-02-29"

    def test_zero_padding(self):
        assert format_date_ymd(datetime(987, 1, 5, tzinfo=timezone.utc)) == "0987-01-05"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_utc_datetime([2024, 3, 1])


class TestFormatTimestamp:
    def test_millisecond_z_suffix(self):
        moment = datetime(2024, 3, 8, 15, 30, 0, 250000, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2024-03-08T15:30:00.250Z"

    def test_non_utc_input(self):
        plus_one = timezone(timedelta(hours=1))
        moment = datetime(2024, 3, 8, 0, 30, tzinfo=plus_one)
        assert format_timestamp(moment) == "2024-03-07T23:30:00.000Z"
