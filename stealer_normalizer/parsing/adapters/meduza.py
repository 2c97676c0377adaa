"""Meduza ``UserInfo.txt`` layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.MEDUZA,
    rules=[
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="log_date", labels=["log date:"], match="contains"),
        FieldRule(
            field="country",
            labels=["country code:"],
            match="contains",
            transform="country",
        ),
        FieldRule(field="username", labels=["user name:"], transform="username"),
        FieldRule(field="computer_name", labels=["computer name:"]),
        FieldRule(
            field="os",
            labels=["operation system:", "operating system:"],
            match="contains",
        ),
        FieldRule(
            field="cpu",
            labels=["cpu:"],
            substitutions=[(r"(?i)\s*,\s*\d+\s+cores?$", "")],
        ),
        FieldRule(field="gpu", labels=["gpu:"]),
        FieldRule(field="ram", labels=["ram:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="file_path", labels=["execute path:"], match="contains"),
    ],
)
