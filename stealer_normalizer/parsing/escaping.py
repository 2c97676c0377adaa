"""Reversible escaping of credential values before they are stored."""
from __future__ import annotations

import re
from typing import NamedTuple

MAX_USERNAME_LENGTH = 500

# Backslash first, so the escapes added afterwards aren't escaped again.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("'", "\\'"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("\0", "\\0"),
)
_UNESCAPES: dict[str, str] = {escaped[1]: raw for raw, escaped in _ESCAPES}
_ESCAPE_SEQUENCE = re.compile(r"\\([\\'\"nrt0])")
_SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?`~]")


class TruncatedUsername(NamedTuple):
    """A username cut down to the storage limit."""

    value: str
    was_truncated: bool
    original_length: int


def escape_password(value: str | None) -> str | None:
    """Escape backslashes, quotes, line breaks, tabs and NUL characters.

    Examples
    --------
    >>> print(escape_password("it's"))
    it\\'s

    """
    if not value:
        return value

    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)

    return value


def unescape_password(value: str | None) -> str | None:
    """Reverse :func:`escape_password`.

    Sequences are read in a single left-to-right pass, so that ``\\\\n`` is a
    backslash followed by ``n`` and not a backslash followed by a line break.
    Unknown sequences are left as they are.
    """
    if not value:
        return value

    return _ESCAPE_SEQUENCE.sub(lambda match: _UNESCAPES[match.group(1)], value)


def has_special_characters(value: str | None) -> bool:
    """Tell whether a value holds punctuation or symbols."""
    if not value:
        return False
    return bool(_SPECIAL_CHARACTERS.search(value))


def truncate_username(
    username: str | None, max_length: int = MAX_USERNAME_LENGTH
) -> TruncatedUsername:
    """Cut a username down to ``max_length`` characters.

    Parameters
    ----------
    username : str, optional
        The username as found in the dump.
    max_length : int, optional
        The maximum length the storage accepts.

    Returns
    -------
    TruncatedUsername
        The value to store, whether it was cut, and its original length. The
        caller logs the truncation.

    """
    if not username:
        return TruncatedUsername(username or "", False, 0)

    length = len(username)

    if length <= max_length:
        return TruncatedUsername(username, False, length)

    return TruncatedUsername(username[:max_length], True, length)
