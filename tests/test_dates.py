import re
from datetime import datetime

import pytest

from stealer_normalizer.parsing.dates import (
    extract_time,
    normalize_datetime,
    trim_date_annotations,
)

TIME_SHAPE = re.compile(r"^\d{2}:\d{2}:\d{2}$")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2024-03-05 14:07:09", ("2024-03-05", "14:07:09")),
        ("2024-03-05T14:07", ("2024-03-05", "14:07:00")),
        ("2024-03-05", ("2024-03-05", "00:00:00")),
        ("13/02/2024", ("2024-02-13", "00:00:00")),
        ("02/13/2024", ("2024-02-13", "00:00:00")),
        ("01/02/2024", ("2024-02-01", "00:00:00")),
        ("2024/03/05", ("2024-03-05", "00:00:00")),
        ("5.3.24 7:05 PM", ("2024-03-05", "19:05:00")),
        ("12/31/2023 12:30:00 AM", ("2023-12-31", "00:30:00")),
        ("13/02/2024 08:15:00 PM", ("2024-02-13", "20:15:00")),
        ("6/2/2024 3:06:00 PM", ("2024-02-06", "15:06:00")),
        ("19/07/2025 17:14:05 (sig:8a6e0f)", ("2025-07-19", "17:14:05")),
    ],
)
def test_numeric_dates(raw, expected):
    assert normalize_datetime(raw) == expected


def test_text_month_dates():
    assert normalize_datetime("29 Jun 25 21:02 CEST") == ("2025-06-29", "21:02:00")
    assert normalize_datetime("Jun 29, 2025 21:02 CEST") == ("2025-06-29", "21:02:00")
    assert normalize_datetime("March 2024") == ("2024-03-01", "00:00:00")


def test_canonical_output_is_a_fixed_point():
    for raw in ("13/02/2024 08:15:00 PM", "29 Jun 25 21:02 CEST", "01/02/2024"):
        date, time = normalize_datetime(raw)
        assert normalize_datetime(f"{date} {time}") == (date, time)


def test_time_is_always_well_formed():
    samples = [
        None,
        "",
        "Unknown",
        "garbage",
        "1719698520",
        "2024-01-01",
        "5.3.24 7:05 PM",
        "Jun 29, 2025",
    ]
    for raw in samples:
        assert TIME_SHAPE.match(normalize_datetime(raw).time)


def test_unresolved_dates():
    assert normalize_datetime(None) == (None, "00:00:00")
    assert normalize_datetime("Unknown") == (None, "00:00:00")
    assert normalize_datetime("hello world") == (None, "00:00:00")
    assert normalize_datetime("March 1850") == (None, "00:00:00")


def test_out_of_range_iso_dates_are_rejected():
    assert normalize_datetime("2024-13-45") == (None, "00:00:00")
    assert normalize_datetime("2024-12-31 10:00") == ("2024-12-31", "10:00:00")


def test_fallback_timestamp():
    fallback = datetime(2024, 1, 2, 3, 4, 5)
    assert normalize_datetime("[REDACTED]", fallback=fallback) == (
        "2024-01-02",
        "03:04:05",
    )
    assert normalize_datetime("2024-05-06", fallback=fallback) == (
        "2024-05-06",
        "00:00:00",
    )


def test_year_range_is_configurable():
    assert normalize_datetime("March 1990") == (None, "00:00:00")
    assert normalize_datetime("March 1990", year_range=(1980, 2100)) == (
        "1990-03-01",
        "00:00:00",
    )


def test_trim_date_annotations():
    assert trim_date_annotations("19/07/2025 17:14:05 (sig:8a6e0f)") == "19/07/2025 17:14:05"
    assert trim_date_annotations("Jun 29, 2025 21:02 CEST") == "Jun 29, 2025 21:02"
    assert trim_date_annotations("6/2/2024 3:06:00 PM") == "6/2/2024 3:06:00 PM"
    assert trim_date_annotations("2024-05-06") == "2024-05-06"


def test_extract_time():
    assert extract_time("on 7:05 PM") == "19:05:00"
    assert extract_time("12:00 AM") == "00:00:00"
    assert extract_time("at 9:3:7") == "09:03:07"
    assert extract_time("no time") is None
