"""Banshee macOS stealer layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.BANSHEE,
    rules=[
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="log_date", labels=["log date:"], match="contains"),
        FieldRule(
            field="country",
            labels=["country code:"],
            match="contains",
            transform="country",
        ),
        FieldRule(
            field="username",
            labels=["user name:"],
            substitutions=[(r"\s*\(.+?\)$", "")],
            transform="username",
        ),
        FieldRule(field="computer_name", labels=["computer name:"]),
        FieldRule(field="os", labels=["operation system:"], match="contains"),
        FieldRule(
            field="cpu",
            labels=["cpu:"],
            substitutions=[(r"(?i)\s*,\s*\d+\.\d+\s+ghz$", "")],
        ),
        FieldRule(field="ram", labels=["ram:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
    ],
)
