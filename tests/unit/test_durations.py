from datetime import timedelta

import pytest

from envbind.utils import parse_duration, to_timedelta
from envbind.utils.durations import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND


def test_parse_duration_compound_literals():
    assert parse_duration("1h30m") == 90 * MINUTE
    assert parse_duration("500ms") == 500 * MILLISECOND
    assert parse_duration("2h45m10s") == 2 * HOUR + 45 * MINUTE + 10 * SECOND
    assert parse_duration("1µs") == MICROSECOND
    assert parse_duration("1us") == MICROSECOND
    assert parse_duration("7ns") == 7


def test_parse_duration_signs_and_fractions():
    assert parse_duration("1.5h") == 90 * MINUTE
    assert parse_duration("-1.5h") == -90 * MINUTE
    assert parse_duration("+10s") == 10 * SECOND
    assert parse_duration(".5s") == 500 * MILLISECOND


def test_parse_duration_bare_zero():
    assert parse_duration("0") == 0
    assert parse_duration("-0") == 0


def test_parse_duration_errors():
    with pytest.raises(ValueError) as e:
        parse_duration("garbage")
    assert 'invalid duration "garbage"' in str(e.value)

    with pytest.raises(ValueError) as e:
        parse_duration("1")
    assert "missing unit" in str(e.value)

    with pytest.raises(ValueError) as e:
        parse_duration("1x")
    assert 'unknown unit "x"' in str(e.value)

    for bad in ("", "-", "h", ".s"):
        with pytest.raises(ValueError):
            parse_duration(bad)


def test_parse_duration_int64_limits():
    assert parse_duration("2562047h47m16.854775807s") == 2**63 - 1
    with pytest.raises(ValueError):
        parse_duration("2562048h")


def test_to_timedelta():
    assert to_timedelta(90 * MINUTE) == timedelta(minutes=90)
    assert to_timedelta(-1500) == timedelta(microseconds=-1)
    assert to_timedelta(999) == timedelta(0)
