from datetime import datetime

import pytest

from schedbot.nlp.dates import (
    add_months,
    entry_datetime,
    format_display_date,
    format_display_time,
    next_weekday,
    normalize_date,
    normalize_relative_date,
    normalize_time,
    parse_date_string,
)

# A Monday.
NOW = datetime(2026, 10, 19, 13, 0)


def test_normalize_date_relative_words():
    assert normalize_date("hari ini", NOW) == "19-10-2026"
    assert normalize_date("besok", NOW) == "20-10-2026"
    assert normalize_date("lusa", NOW) == "21-10-2026"


def test_normalize_date_is_stable_within_a_tick():
    results = {normalize_date("hari ini", NOW) for _ in range(5)}
    assert results == {"19-10-2026"}


def test_normalize_date_explicit_forms():
    assert normalize_date("tanggal 5", NOW) == "05-10-2026"
    assert normalize_date("12 november", NOW) == "12-11-2026"
    assert normalize_date("tanggal 3 Januari", NOW) == "03-01-2026"
    assert normalize_date("10/9", NOW) == "10-09-2026"
    assert normalize_date("10-9-2027", NOW) == "10-09-2027"


def test_normalize_date_falls_back_to_today():
    assert normalize_date("kapan-kapan", NOW) == "19-10-2026"
    assert normalize_date("", NOW) == "19-10-2026"


def test_normalize_date_does_not_check_calendar():
    assert normalize_date("tanggal 31 februari", NOW) == "31-02-2026"


def test_relative_date_weeks_and_months():
    assert normalize_relative_date("minggu depan", NOW) == "26-10-2026"
    assert normalize_relative_date("bulan depan", NOW) == "19-11-2026"


def test_bulan_depan_clamps_day():
    assert normalize_relative_date("bulan depan", datetime(2026, 1, 31, 9, 0)) == "28-02-2026"
    assert add_months(datetime(2027, 12, 31).date(), 2).isoformat() == "2028-02-29"


def test_weekday_is_strictly_after_today():
    assert next_weekday("senin", NOW) == "26-10-2026"
    assert next_weekday("jumat", NOW) == "23-10-2026"
    assert normalize_relative_date("hari rabu", NOW) == "21-10-2026"


def test_relative_date_defers_to_normalize_date():
    assert normalize_relative_date("besok", NOW) == "20-10-2026"
    assert normalize_relative_date("tanggal 1", NOW) == "01-10-2026"


@pytest.mark.parametrize(
    "phrase, expected",
    [
        ("7 pagi", "07:00"),
        ("12 pagi", "00:00"),
        ("1 siang", "13:00"),
        ("12 siang", "12:00"),
        ("4 sore", "16:00"),
        ("7 malam", "19:00"),
        ("12 malam", "00:00"),
        ("jam 7.30 malam", "19:30"),
        ("19.45", "19:45"),
        ("8:05", "08:05"),
        ("24", "00:00"),
        ("25", "01:00"),
        ("9.75", "09:59"),
        ("7:-5", "07:00"),
    ],
)
def test_normalize_time(phrase, expected):
    assert normalize_time(phrase) == expected


def test_normalize_time_without_digits():
    assert normalize_time("") == "00:00"
    assert normalize_time("nanti malam") == "00:00"


def test_parse_date_string_rejects_impossible_dates():
    assert parse_date_string("29-02-2028") is not None
    assert parse_date_string("29-02-2027") is None
    assert parse_date_string("32-01-2026") is None
    assert parse_date_string("01-13-2026") is None
    assert parse_date_string("2026-10-19") is None


def test_display_helpers():
    assert format_display_date("10-09-2026") == "10 SEP 2026"
    assert format_display_date("01-08-2026") == "01 AGS 2026"
    assert format_display_time("07:30") == "07.30"


def test_entry_datetime():
    assert entry_datetime("19-10-2026", "13:45") == datetime(2026, 10, 19, 13, 45)
    assert entry_datetime("31-02-2026", "13:45") is None
