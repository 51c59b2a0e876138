# clean_api/test/unit/test_duration.py

from datetime import timedelta

import pytest

from clean_api.shared.utils.duration import parse_duration


@pytest.mark.parametrize(
    "value, expected",
    [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("12h", timedelta(hours=12)),
        ("7d", timedelta(days=7)),
    ],
)
def test_parse_duration_units(value, expected):
    assert parse_duration(value, "1m") == expected


@pytest.mark.parametrize("value", ["", "15", "m15", "1.5h", "10w", None])
def test_malformed_duration_falls_back_to_default(value):
    assert parse_duration(value, "15m") == timedelta(minutes=15)


def test_malformed_default_raises():
    with pytest.raises(ValueError):
        parse_duration("bad", "also-bad")
