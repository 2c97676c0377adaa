"""CryptBot ``_Information.txt`` layout."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.grammar import clean_value, extract_username, extract_value
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

if TYPE_CHECKING:
    from stealer_normalizer.parsing.engine import ParseState

_USER_AND_COMPUTER = re.compile(r"^(.+?)\s*\((.+?)\)")


def read_user_and_computer(line: str, lowered: str, state: ParseState) -> bool:
    """Split ``UserName (ComputerName): john (DESKTOP-1)`` into both fields."""
    if "username" not in lowered or "computername" not in lowered:
        return False

    if state.is_set("username") or state.is_set("computer_name"):
        return True

    value = extract_value(line)
    match = _USER_AND_COMPUTER.match(value)

    if match:
        state.assign("username", clean_value(extract_username(match.group(1).strip())))
        state.assign("computer_name", clean_value(match.group(2)))
    else:
        state.assign("username", clean_value(extract_username(value)))

    return True


LAYOUT = AdapterLayout(
    family=StealerFamily.CRYPTBOT,
    line_hooks=[read_user_and_computer],
    rules=[
        FieldRule(field="os", labels=["os:"]),
        FieldRule(
            field="log_date",
            labels=["local date and time:", "local date:", "date and time:"],
            match="contains",
        ),
        FieldRule(field="cpu", labels=["cpu:"], substitutions=[(r"\s*\[.*$", "")]),
        FieldRule(field="ram", labels=["ram:"]),
        FieldRule(field="gpu", labels=["gpu:"]),
    ],
)
