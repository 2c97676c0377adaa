"""Date and time normalization.

Stealers write the infection date in whatever format the victim's locale or the
malware author picked: ISO dates, day-first or month-first numeric dates, 12-hour
clocks, month names, and trailing time zone or signature annotations. Everything
is brought down to a ``YYYY-MM-DD`` date and a ``HH:mm:ss`` time.

Ambiguous numeric dates such as ``01/02/2024`` are read day-first.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import NamedTuple

from dateutil import parser as date_parser

DEFAULT_TIME = "00:00:00"
UNSET_VALUES: frozenset[str] = frozenset(
    {"disabled", "none", "n/a", "null", "unknown", "[redacted]"}
)

_ISO_DATE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})(?:[ T]+(\d{1,2}):(\d{2})(?::(\d{2}))?)?"
)
_NUMERIC_DATE = re.compile(
    r"^(\d{1,4})[./-](\d{1,2})[./-](\d{2,4})"
    r"(?:,?\s+(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?(?:\s*([AP]M))?)?",
    re.I,
)
_TEXT_DATE = (
    re.compile(r"[a-z]{3,9}\.?\s+\d{1,2}(?:st|nd|rd|th)?,?\s+\d{2,4}", re.I),
    re.compile(r"\d{1,2}(?:st|nd|rd|th)?\s+[a-z]{3,9}\.?,?\s+\d{2,4}", re.I),
)
_TIME = re.compile(r"(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?(?:\s*([AP]M))?", re.I)

_LETTERS = re.compile(r"[a-z]", re.I)
_DAY_FIRST_TEXT = re.compile(r"^(\d+\s+\w+\s+[\d\s:]+(?:\s+[A-Z]{2,})?)", re.I)
_MONTH_FIRST_TEXT = re.compile(r"^(\w+\s+\d+,?\s+[\d\s:]+(?:\s+[A-Z]{2,})?)", re.I)
_UNTIL_ANNOTATION = re.compile(r"^([^(\[]+)")
_NUMERIC_RUN = re.compile(r"^([\d./\-\s:,]+(?:\s*[AP]M)?)", re.I)


class NormalizedDateTime(NamedTuple):
    """A canonical date (or None) and time."""

    date: str | None
    time: str


def trim_date_annotations(value: str) -> str:
    """Keep the leading date and time part of a raw date value.

    Examples
    --------
    >>> trim_date_annotations("19/07/2025 17:14:05 (sig:8a6e0f)")
    '19/07/2025 17:14:05'
    >>> trim_date_annotations("29 Jun 25 21:02 CEST")
    '29 Jun 25 21:02'

    """
    value = value.strip()

    if _LETTERS.search(value):
        for pattern in (_DAY_FIRST_TEXT, _MONTH_FIRST_TEXT, _UNTIL_ANNOTATION):
            match = pattern.match(value)
            if match and len(match.group(1).strip()) > 5:
                return match.group(1).strip()
        return value

    match = _NUMERIC_RUN.match(value)
    if match and len(match.group(1).strip()) > 5:
        return match.group(1).strip().rstrip(",")

    return value


def _format_time(hour: int, minute: int, second: int, meridiem: str | None) -> str:
    if meridiem:
        is_pm = meridiem.upper() == "PM"
        if is_pm and hour < 12:
            hour += 12
        elif not is_pm and hour == 12:
            hour = 0

    return f"{hour:02d}:{minute:02d}:{second:02d}"


def extract_time(value: str) -> str | None:
    """Find a ``H:mm[:ss][ AM/PM]`` time anywhere in a string."""
    match = _TIME.search(value)

    if not match:
        return None

    hour, minute, second, meridiem = match.groups()
    return _format_time(int(hour), int(minute), int(second or 0), meridiem)


def _from_datetime(value: datetime) -> NormalizedDateTime:
    return NormalizedDateTime(value.strftime("%Y-%m-%d"), value.strftime("%H:%M:%S"))


def _unresolved(fallback: datetime | None) -> NormalizedDateTime:
    if fallback:
        return _from_datetime(fallback)
    return NormalizedDateTime(None, DEFAULT_TIME)


def _parse_iso(value: str) -> NormalizedDateTime | None:
    match = _ISO_DATE.match(value)

    if not match:
        return None

    year, month, day, hour, minute, second = match.groups()

    if not (1 <= int(month) <= 12 and 1 <= int(day) <= 31):
        return None

    time = DEFAULT_TIME

    if hour and minute:
        time = _format_time(int(hour), int(minute), int(second or 0), None)

    return NormalizedDateTime(f"{year}-{month}-{day}", time)


def _parse_numeric(value: str) -> NormalizedDateTime | None:
    match = _NUMERIC_DATE.match(value)

    if not match:
        return None

    part1, part2, part3, hour, minute, second, meridiem = match.groups()
    num1, num2, num3 = int(part1), int(part2), int(part3)

    if len(part1) == 4 and len(part3) != 4:
        year, month, day = num1, num2, num3

    else:
        year = num3 if len(part3) == 4 or num3 >= 100 else 2000 + num3

        if num1 > 12:
            day, month = num1, num2
        elif num2 > 12:
            month, day = num1, num2
        else:
            day, month = num1, num2

    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None

    time = DEFAULT_TIME
    if hour and minute:
        time = _format_time(int(hour), int(minute), int(second or 0), meridiem)

    return NormalizedDateTime(f"{year:04d}-{month:02d}-{day:02d}", time)


def _parse_calendar(value: str, fuzzy: bool) -> datetime | None:
    default = datetime(datetime.now().year, 1, 1)

    try:
        return date_parser.parse(
            value, default=default, dayfirst=True, fuzzy=fuzzy, ignoretz=True
        )
    except (ValueError, OverflowError):
        return None


def normalize_datetime(
    raw: str | None,
    fallback: datetime | None = None,
    year_range: tuple[int, int] = (2000, 2100),
) -> NormalizedDateTime:
    """Convert a raw date string into a canonical date and time.

    Parameters
    ----------
    raw : str, optional
        The date as written in the log.
    fallback : datetime.datetime, optional
        Timestamp used when the raw value is missing or can't be read.
    year_range : tuple of int, optional
        Bounds of the years accepted from the generic calendar parse.

    Returns
    -------
    NormalizedDateTime
        The ``YYYY-MM-DD`` date (None if unresolved) and the ``HH:mm:ss`` time.

    Examples
    --------
    >>> normalize_datetime("13/02/2024 08:15:00 PM")
    NormalizedDateTime(date='2024-02-13', time='20:15:00')
    >>> normalize_datetime("01/02/2024")
    NormalizedDateTime(date='2024-02-01', time='00:00:00')

    """
    if raw is None or raw.strip().lower() in UNSET_VALUES | {""}:
        return _unresolved(fallback)

    cleaned = raw.strip()

    for parse in (_parse_iso, _parse_numeric):
        result = parse(cleaned)
        if result:
            return result

    trimmed = trim_date_annotations(cleaned)

    if any(pattern.search(trimmed) for pattern in _TEXT_DATE):
        parsed = _parse_calendar(trimmed, fuzzy=True)
        if parsed:
            return NormalizedDateTime(
                parsed.strftime("%Y-%m-%d"),
                extract_time(trimmed) or parsed.strftime("%H:%M:%S"),
            )

    parsed = _parse_calendar(trimmed, fuzzy=False)
    if parsed and year_range[0] <= parsed.year <= year_range[1]:
        return NormalizedDateTime(
            parsed.strftime("%Y-%m-%d"),
            extract_time(trimmed) or parsed.strftime("%H:%M:%S"),
        )

    return _unresolved(fallback)
