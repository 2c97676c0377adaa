"""Phemedrone layout: ``----- Title -----`` separated sections."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.PHEMEDRONE,
    separator_sections=True,
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], sections=["geolocation"], transform="ip"),
        FieldRule(
            field="country",
            labels=["country:"],
            sections=["geolocation"],
            transform="country",
        ),
        FieldRule(
            field="username",
            labels=["username:"],
            sections=["hardware"],
            transform="username",
        ),
        FieldRule(
            field="os",
            labels=["windows name:"],
            match="contains",
            sections=["hardware"],
        ),
        FieldRule(
            field="hwid",
            labels=["hardware id:"],
            match="contains",
            sections=["hardware"],
        ),
        FieldRule(field="gpu", labels=["gpu:"], sections=["hardware"]),
        FieldRule(field="cpu", labels=["cpu:"], sections=["hardware"]),
        FieldRule(field="ram", labels=["ram:"], sections=["hardware"]),
        FieldRule(
            field="antivirus",
            labels=["antivirus products:"],
            match="contains",
            sections=["miscellaneous"],
        ),
        FieldRule(
            field="file_path",
            labels=["file location:"],
            match="contains",
            sections=["miscellaneous"],
        ),
    ],
)
