"""Line grammar shared by every system information layout.

Stealer dumps are "Label: Value" text with a handful of recurring conventions:
dash-prefixed items, indented continuation lines, dashed or equal-signed divider
lines which sometimes carry a section title, and INI-style ``[Section]`` headers.
The helpers below are total over string input and never raise.
"""
from __future__ import annotations

import re
from ipaddress import ip_address

JUNK_VALUES: frozenset[str] = frozenset(
    {"unknown", "[redacted]", "n/a", "none", "null", ""}
)

# Labels which, when present in a bracketed line, make it a field and not a banner.
SYSTEM_FIELD_LABELS: tuple[str, ...] = (
    "os:",
    "ip:",
    "user:",
    "cpu:",
    "ram:",
    "gpu:",
    "country:",
    "hwid:",
    "path:",
)

CANONICAL_SECTIONS: tuple[str, ...] = (
    "network",
    "hardware",
    "geolocation",
    "machine",
    "miscellaneous",
    "system",
)

_DASH_PREFIX = re.compile(r"^-\s*")
_PURE_SEPARATOR = re.compile(r"^(?:={8,}|-{8,})$")
_BRACKETED_SEPARATOR = re.compile(
    r"^(?:-{3,}\s+.+\s+-{3,}|={3,}\s+.+\s+={3,}"
    r"|-{3,}[^-\s](?:.*[^-\s])?-{3,}|={3,}[^=\s](?:.*[^=\s])?={3,})$"
)
_SEPARATOR_TITLE = re.compile(r"^[-=]{3,}\s+(.+?)\s+[-=]{3,}$")
_INI_HEADER = re.compile(r"^\[([^\[\]]+)\]$")
_INDENT = re.compile(r"^(?:\t|\s{2,})")


def normalize_line(line: str) -> str:
    """Strip a leading ``-`` item marker and the surrounding whitespace."""
    return _DASH_PREFIX.sub("", line.strip()).lstrip()


def is_indented(line: str) -> bool:
    """Tell whether a raw line starts with a tab or at least two spaces."""
    return bool(_INDENT.match(line))


def is_separator_line(
    line: str, field_labels: tuple[str, ...] = SYSTEM_FIELD_LABELS
) -> bool:
    """Tell whether a line delimits a block or a section.

    Parameters
    ----------
    line : str
        The raw line.
    field_labels : tuple of str, optional
        Lower-case labels which disqualify a bracketed line from being a separator.

    Returns
    -------
    bool

    """
    trimmed = line.strip()

    if not trimmed or _PURE_SEPARATOR.match(trimmed):
        return True

    if _BRACKETED_SEPARATOR.match(trimmed):
        lowered = trimmed.lower()
        return not any(label in lowered for label in field_labels)

    return False


def extract_section_from_separator(line: str) -> str | None:
    """Return the title of a ``--- Title ---`` line."""
    match = _SEPARATOR_TITLE.match(line.strip())
    return match.group(1).strip() if match else None


def canonical_section(title: str) -> str:
    """Map a section title onto one of the canonical section tags."""
    lowered = title.strip().lower()

    for tag in CANONICAL_SECTIONS:
        if tag in lowered:
            return tag

    return lowered


def ini_section(line: str) -> str | None:
    """Return the lower-case name of a ``[Section]`` header line."""
    match = _INI_HEADER.match(line.strip())
    return match.group(1).strip().lower() if match else None


def extract_value(line: str) -> str:
    """Return what follows the label of a "Label: Value" line.

    The separator is the first colon, else the first dash not starting the line,
    else the first equal sign. Without separator the whole line is the value.
    """
    index = line.find(":")

    if index == -1:
        index = line.find("-")
        if index <= 0:
            index = line.find("=")

    if index == -1:
        return line.strip()

    return line[index + 1 :].strip()


def clean_value(value: str | None) -> str | None:
    """Trim a value and discard placeholder tokens.

    Examples
    --------
    >>> clean_value("  US ")
    'US'
    >>> clean_value("[REDACTED]") is None
    True

    """
    if value is None:
        return None

    cleaned = value.strip()

    if cleaned.lower() in JUNK_VALUES:
        return None

    return cleaned


def extract_ip(value: str | None) -> str | None:
    """Drop a trailing mask or annotation following a slash."""
    if not value:
        return None
    return value.split("/", 1)[0].strip()


def extract_username(value: str | None) -> str | None:
    """Drop a leading ``DOMAIN/`` or ``DOMAIN\\`` qualifier."""
    if not value:
        return None

    for delimiter in ("/", "\\"):
        if delimiter in value:
            return value.split(delimiter, 1)[1].strip()

    return value.strip()


def is_valid_ip(value: str | None) -> bool:
    """Tell whether a value is an IPv4 or IPv6 literal."""
    if not value:
        return False

    try:
        ip_address(value.strip())
    except ValueError:
        return False

    return True


_VERSION_NOISE: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"N/A\s+Build\s+", re.I), ""),
    (re.compile(r"\s+Build\s+", re.I), " "),
    (re.compile(r"N/A", re.I), ""),
)


def combine_os(name: str | None, version: str | None) -> str | None:
    """Join an OS product name with its version.

    Examples
    --------
    >>> combine_os("Microsoft Windows 10 Pro", "10.0.19045 N/A Build 19045")
    'Microsoft Windows 10 Pro 10.0.19045 19045'

    """
    if not name or not version:
        return name or version

    for pattern, replacement in _VERSION_NOISE:
        version = pattern.sub(replacement, version)

    combined = f"{name} {version.strip()}".strip()

    if len(combined) < 5:
        return name

    return combined


def normalize_encoding(content: str | bytes) -> str:
    """Decode raw file content to text.

    Bytes are decoded as UTF-16 when they carry its byte order mark, else as UTF-8
    (BOM aware), else as cp1252, else as latin-1. Text that is UTF-8 mistakenly
    decoded as latin-1 is repaired.
    """
    if isinstance(content, bytes):
        if content.startswith((b"\xff\xfe", b"\xfe\xff")):
            return content.decode("utf-16", errors="replace")

        for encoding in ("utf-8-sig", "cp1252"):
            try:
                return content.decode(encoding)
            except UnicodeDecodeError:
                continue

        return content.decode("latin-1")

    text = content.lstrip("\ufeff")

    try:
        return text.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return text
