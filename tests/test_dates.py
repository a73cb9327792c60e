from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from creditledger.dates import (
    diff_month,
    format_date,
    format_period,
    month_add,
    thai_now,
)


def test_month_add_crosses_year():
    assert month_add("2024-12-24", "1") == "2025-01-24"


def test_month_add_zero_is_identity():
    assert month_add("2024-12-24", "0") == "2024-12-24"


@pytest.mark.parametrize("months", ["1", "5", "11", "12", "25"])
def test_month_add_round_trip(months):
    forward = month_add("2024-12-24", months)
    assert month_add(forward, "-" + months) == "2024-12-24"


def test_month_add_accepts_plus_sign():
    assert month_add("2024-12-24", "+3") == month_add("2024-12-24", "3")


def test_month_add_missing_day_gives_empty():
    assert month_add("2024-01-31", "1") == ""


@pytest.mark.parametrize("bad_date", ["24/12/24", "", "2024-13-01"])
def test_month_add_bad_date_gives_empty(bad_date):
    assert month_add(bad_date, "1") == ""


@pytest.mark.parametrize("bad_add", ["", "one", "1.5", " 1"])
def test_month_add_bad_count_gives_empty(bad_add):
    assert month_add("2024-12-24", bad_add) == ""


def test_format_date_statement_style():
    assert format_date("24/12/24") == "2024-12-24"


@pytest.mark.parametrize("bad", ["2024-12-24", "32/01/24", "24/13/24", "xx"])
def test_format_date_invalid_gives_empty(bad):
    assert format_date(bad) == ""


def test_format_date_then_period_prefix():
    iso = format_date("24/12/24")
    assert iso.startswith(format_period(iso))


def test_format_period_value():
    assert format_period("2024-12-24") == "2024-12"


def test_format_period_invalid_raises():
    with pytest.raises(ValueError):
        format_period("24/12/24")


def test_diff_month_same_month_counts_one():
    assert diff_month("2024-12-24", "2024-12-24") == 1


@pytest.mark.parametrize("months", [0, 1, 7, 13, 30])
def test_diff_month_matches_month_add(months):
    later = month_add("2024-12-24", str(months))
    assert diff_month("2024-12-24", later) == months + 1


def test_diff_month_invalid_raises():
    with pytest.raises(ValueError):
        diff_month("2024-12-24", "nope")


@freeze_time("2024-12-24 20:00:00")
def test_thai_now_is_utc_plus_seven():
    now = thai_now()
    assert now.utcoffset() == timedelta(hours=7)
    assert now == datetime(2024, 12, 24, 20, 0, tzinfo=timezone.utc)