# -*- coding: utf-8 -*-
from datetime import datetime, timedelta, timezone

import pytest

from utils.datetime_helpers import datetime_to_iso, parse_iso_datetime, utcnow


def test_utcnow_is_naive():
    assert utcnow().tzinfo is None


def test_parse_zulu_suffix_to_naive_utc():
    parsed = parse_iso_datetime("2025-10-20T16:00:00Z")

    assert parsed == datetime(2025, 10, 20, 16, 0, 0)
    assert parsed.tzinfo is None


def test_parse_converts_offsets_to_utc():
    parsed = parse_iso_datetime("2025-10-21T00:00:00+08:00")

    assert parsed == datetime(2025, 10, 20, 16, 0, 0)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_iso_datetime("yesterday")


@pytest.mark.parametrize(
    "dt, expected",
    [
        (datetime(2025, 10, 20, 16, 0, 0), "2025-10-20T16:00:00+00:00"),
        (
            datetime(2025, 10, 20, 18, 0, 0, tzinfo=timezone(timedelta(hours=2))),
            "2025-10-20T16:00:00+00:00",
        ),
        (None, None),
    ],
)
def test_datetime_to_iso(dt, expected):
    assert datetime_to_iso(dt) == expected
