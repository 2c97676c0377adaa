"""Raccoon ``System Info.txt`` layout.

Fields are only read inside the ``System Information:`` block; a divider line
closes it.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule

_SYSTEM = ["system"]

LAYOUT = AdapterLayout(
    family=StealerFamily.RACCOON,
    separator_resets_section=True,
    section_headers={
        "system information:": "system",
        "system info:": "system",
    },
    lists=[
        ListRule(
            field="gpu",
            labels=["display devices:", "display device:"],
            match="contains",
            continuation="numbered",
            sections=_SYSTEM,
        ),
    ],
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], sections=_SYSTEM, transform="ip"),
        FieldRule(
            field="country",
            labels=["location:"],
            sections=_SYSTEM,
            pattern=r",\s*([^,]+?)\s*\(",
            transform="country",
        ),
        FieldRule(
            field="computer_name",
            labels=["computername:"],
            match="contains",
            sections=_SYSTEM,
        ),
        FieldRule(field="username", labels=["username:"], sections=_SYSTEM, transform="username"),
        FieldRule(field="os", labels=["product name:"], match="contains", sections=_SYSTEM),
        FieldRule(field="os", labels=["os:"], match="contains", sections=_SYSTEM),
        FieldRule(
            field="cpu",
            labels=["cpu:"],
            sections=_SYSTEM,
            substitutions=[(r"(?i)\s*\(\d+\s+cores?\)", "")],
        ),
        FieldRule(
            field="ram",
            labels=["ram:"],
            sections=_SYSTEM,
            substitutions=[(r"\s*\(.+?\)$", "")],
        ),
        FieldRule(
            field="ip_address",
            labels=["ip info:"],
            match="contains",
            pattern=r"(\d+\.\d+\.\d+\.\d+)",
        ),
    ],
)
