"""Noxty ``Identification.txt`` layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.NOXTY,
    rules=[
        FieldRule(field="username", labels=["user:"], transform="username"),
        FieldRule(field="os", labels=["operating system:"], match="contains"),
        FieldRule(field="file_path", labels=["process executable path:"], match="contains"),
        FieldRule(
            field="cpu",
            labels=["cpu:"],
            substitutions=[(r"(?i)\s+\d+\.\d+\s+ghz$", "")],
        ),
        FieldRule(field="ram", labels=["ram:"]),
        FieldRule(field="gpu", labels=["gpu:"], substitutions=[(r"\s*\(.+?\)$", "")]),
        FieldRule(field="hwid", labels=["serial number:"], match="contains"),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
    ],
)
