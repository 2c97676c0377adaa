"""Astris layout: INI-style ``[Section]`` blocks."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.ASTRIS,
    ini_sections=True,
    rules=[
        FieldRule(field="hwid", labels=["hwid:"], sections=["general"]),
        FieldRule(field="log_date", labels=["date:"], sections=["general"]),
        FieldRule(field="computer_name", labels=["computer name:"], sections=["machine"]),
        FieldRule(
            field="username",
            labels=["user name:"],
            sections=["machine"],
            transform="username",
        ),
        FieldRule(field="os", labels=["system:"], sections=["machine"]),
        FieldRule(field="antivirus", labels=["antiviruses:"], sections=["machine"]),
        FieldRule(
            field="country",
            labels=["country:"],
            sections=["geolocation"],
            transform="country",
        ),
        FieldRule(
            field="ip_address",
            labels=["public ip address:"],
            sections=["network"],
            transform="ip",
        ),
        FieldRule(
            field="ip_address",
            labels=["private ip address:"],
            sections=["network"],
            transform="ip",
        ),
        FieldRule(field="cpu", labels=["cpu:"], sections=["hardware"]),
        FieldRule(field="gpu", labels=["gpu:"], sections=["hardware"]),
        FieldRule(field="ram", labels=["ram:"], sections=["hardware"]),
    ],
)
