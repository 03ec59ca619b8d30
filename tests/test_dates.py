"""Canonical UTC datetime text."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from siren.utils.dates import format_instant, parse_datetime, to_utc


def test_whole_seconds_have_no_fraction() -> None:
    assert format_instant(datetime(2019, 1, 1, 2, 23, 59, tzinfo=timezone.utc)) == "2019-01-01T02:23:59Z"


def test_offsets_are_converted_to_utc() -> None:
    oslo_winter = timezone(timedelta(hours=1))
    assert format_instant(datetime(2019, 1, 1, 2, 23, 59, tzinfo=oslo_winter)) == "2019-01-01T01:23:59Z"


def test_milliseconds_use_three_digits() -> None:
    instant = datetime(2019, 1, 1, 1, 23, 59, 120000, tzinfo=timezone.utc)
    assert format_instant(instant) == "2019-01-01T01:23:59.120Z"


def test_microseconds_use_six_digits() -> None:
    instant = datetime(2019, 1, 1, 1, 23, 59, 28290, tzinfo=timezone.utc)
    assert format_instant(instant) == "2019-01-01T01:23:59.028290Z"


def test_naive_values_are_taken_as_utc() -> None:
    naive = datetime(2020, 5, 17, 12, 0, 0)
    assert to_utc(naive) == datetime(2020, 5, 17, 12, 0, 0, tzinfo=timezone.utc)
    assert format_instant(naive) == "2020-05-17T12:00:00Z"


def test_parse_z_suffix() -> None:
    parsed = parse_datetime("2015-12-14T09:01:10.587Z")
    assert parsed == datetime(2015, 12, 14, 9, 1, 10, 587000, tzinfo=timezone.utc)


def test_parse_numeric_offset() -> None:
    parsed = parse_datetime("2019-01-01T02:23:59+01:00")
    assert format_instant(parsed) == "2019-01-01T01:23:59Z"


def test_parse_region_suffix() -> None:
    try:
        oslo = ZoneInfo("Europe/Oslo")
    except ZoneInfoNotFoundError:
        pytest.skip("time zone database not available")

    parsed = parse_datetime("2019-01-01T02:23:59+01:00[Europe/Oslo]")
    assert parsed.tzinfo == oslo
    assert format_instant(parsed) == "2019-01-01T01:23:59Z"


@pytest.mark.parametrize("value", ["not a date", "2019-01-01T02:23:59", "2019-01-01T02:23:59Z[Nowhere/Zone]"])
def test_parse_rejects_bad_text(value: str) -> None:
    with pytest.raises(ValueError):
        parse_datetime(value)
