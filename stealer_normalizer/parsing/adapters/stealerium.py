"""Stealerium layout: INI-style ``[IP]``, ``[Machine]`` and ``[Virtualization]`` blocks."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

_MACHINE = ["machine"]

LAYOUT = AdapterLayout(
    family=StealerFamily.STEALERIUM,
    ini_sections=True,
    rules=[
        FieldRule(
            field="ip_address",
            labels=["external ip:"],
            match="contains",
            sections=["ip"],
            transform="ip",
        ),
        FieldRule(
            field="ip_address",
            labels=["internal ip:"],
            match="contains",
            sections=["ip"],
            transform="ip",
        ),
        FieldRule(field="username", labels=["username:"], sections=_MACHINE, transform="username"),
        FieldRule(field="computer_name", labels=["compname:"], sections=_MACHINE),
        FieldRule(field="os", labels=["system:"], sections=_MACHINE),
        FieldRule(field="cpu", labels=["cpu:"], sections=_MACHINE),
        FieldRule(field="gpu", labels=["gpu:"], sections=_MACHINE),
        FieldRule(field="ram", labels=["ram:"], sections=_MACHINE),
        FieldRule(field="log_date", labels=["date:"], sections=_MACHINE),
        FieldRule(field="antivirus", labels=["antivirus:"], sections=["virtualization"]),
    ],
)
