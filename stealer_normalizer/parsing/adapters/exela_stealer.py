"""ExelaStealer layout.

Exela ships the victim's ``systeminfo`` output under its Telegram banner, with a
short ``Label: value`` summary on top for some builds.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import OS_NAME, OS_VERSION, AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.EXELA_STEALER,
    combine_os=True,
    rules=[
        FieldRule(field="computer_name", labels=["host name:", "computer name:"]),
        FieldRule(field=OS_NAME, labels=["os name:"]),
        FieldRule(field=OS_VERSION, labels=["os version:"]),
        FieldRule(
            field="username",
            labels=["registered owner:", "username:", "user name:"],
            transform="username",
        ),
        FieldRule(
            field="cpu",
            labels=["processor(s):"],
            next_line=True,
            pattern=r"(?i)\[01\]:\s*(.+)",
        ),
        FieldRule(field="cpu", labels=["cpu:"]),
        FieldRule(field="gpu", labels=["gpu:"]),
        FieldRule(field="ram", labels=["total physical memory:", "ram:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(
            field="ip_address",
            labels=["ip address(es)"],
            match="contains",
            next_line=True,
            pattern=r"\[01\]:\s*([0-9.]+)",
            transform="ip",
        ),
        FieldRule(field="country", labels=["country:"], transform="country_not_ip"),
        FieldRule(field="hwid", labels=["hwid:"]),
    ],
)
