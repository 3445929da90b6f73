"""
Tests for expiration duration parsing.
"""
from datetime import timedelta

import pytest

from shortlink_app.exceptions import InvalidExpirationError
from shortlink_app.services.duration import parse_duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("24h", timedelta(hours=24)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1h0m10s", timedelta(hours=1, seconds=10)),
        ("1.5h", timedelta(minutes=90)),
        (".5m", timedelta(seconds=30)),
        (" 3m ", timedelta(minutes=3)),
    ],
)
def test_valid_durations(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "24", "h", "1d", "10 m", "-5m", "abc", "1h-30m", "5ms", None],
)
def test_malformed_durations(text):
    with pytest.raises(InvalidExpirationError):
        parse_duration(text)


@pytest.mark.parametrize("text", ["0s", "0h0m", "0.0m"])
def test_zero_duration_rejected(text):
    with pytest.raises(InvalidExpirationError):
        parse_duration(text)


def test_invalid_expiration_is_a_value_error():
    with pytest.raises(ValueError):
        parse_duration("forever")


@pytest.mark.parametrize("text", ["99999999999h", "9" * 400 + "h"])
def test_too_large_duration_rejected(text):
    with pytest.raises(InvalidExpirationError):
        parse_duration(text)


def test_large_duration_still_parses():
    """Fits in a timedelta; the registry decides whether the expiry is reachable"""
    assert parse_duration("2000000000h") == timedelta(hours=2_000_000_000)
