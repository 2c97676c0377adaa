"""Vidar ``information.txt`` layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

_HARDWARE = ["hardware"]

LAYOUT = AdapterLayout(
    family=StealerFamily.VIDAR,
    ini_sections=True,
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="log_date", labels=["date:"]),
        FieldRule(field="log_date", labels=["local time:"], match="contains"),
        FieldRule(field="hwid", labels=["machineid:"], match="contains"),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="file_path", labels=["path:"]),
        FieldRule(field="os", labels=["windows:"]),
        FieldRule(field="computer_name", labels=["computer name:"]),
        FieldRule(field="username", labels=["user name:"], transform="username"),
        FieldRule(field="cpu", labels=["processor:"], sections=_HARDWARE),
        FieldRule(field="ram", labels=["ram:"], sections=_HARDWARE),
        FieldRule(field="gpu", labels=["videocard:"], match="contains", sections=_HARDWARE),
    ],
)
