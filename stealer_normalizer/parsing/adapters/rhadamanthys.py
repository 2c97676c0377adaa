"""Rhadamanthys layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.RHADAMANTHYS,
    rules=[
        FieldRule(field="log_date", labels=["install date:"], match="contains"),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="hwid", labels=["machineid:"], match="contains"),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="cpu", labels=["processor:"]),
        FieldRule(field="ram", labels=["installed ram:"], match="contains"),
        FieldRule(field="os", labels=["os:"]),
        FieldRule(field="gpu", labels=["video card:"], match="contains"),
        FieldRule(field="computer_name", labels=["computer name:"]),
        FieldRule(field="username", labels=["user name:"], transform="username"),
    ],
)
