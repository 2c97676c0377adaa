"""Blank Grabber layout: the victim's ``systeminfo`` command output."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import OS_NAME, OS_VERSION, AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.BLANK_GRABBER,
    combine_os=True,
    rules=[
        FieldRule(field="computer_name", labels=["host name:"]),
        FieldRule(field=OS_NAME, labels=["os name:"]),
        FieldRule(field=OS_VERSION, labels=["os version:"]),
        FieldRule(field="username", labels=["registered owner:"], transform="username"),
        FieldRule(
            field="cpu",
            labels=["processor(s):"],
            next_line=True,
            pattern=r"(?i)\[01\]:\s*(.+)",
        ),
        FieldRule(field="ram", labels=["total physical memory:"]),
        FieldRule(
            field="ip_address",
            labels=["ip address(es)"],
            match="contains",
            next_line=True,
            pattern=r"\[01\]:\s*([0-9.]+)",
            transform="ip",
        ),
    ],
)
