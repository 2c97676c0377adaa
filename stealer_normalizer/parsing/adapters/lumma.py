"""Lumma ``System.txt`` layout.

GPUs and anti-viruses are listed as indented items under their header.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule

LAYOUT = AdapterLayout(
    family=StealerFamily.LUMMA,
    lists=[
        ListRule(field="gpu", labels=["gpu:"]),
        ListRule(field="antivirus", labels=["anti virus:", "antivirus:"], join=", "),
    ],
    rules=[
        FieldRule(field="os", labels=["os version:"]),
        FieldRule(field="ip_address", labels=["ip address:"], transform="ip"),
        FieldRule(field="username", labels=["user:", "username:"], transform="username"),
        FieldRule(field="cpu", labels=["cpu name:"]),
        FieldRule(field="ram", labels=["ram size:"]),
        FieldRule(field="computer_name", labels=["computer:", "hostname:", "pc:"]),
        FieldRule(field="country", labels=["country:"], transform="country_not_ip"),
        # Skips bare Unix timestamps.
        FieldRule(field="log_date", labels=["local date:"], pattern=r"^(?!\d+$)(.+)$"),
        FieldRule(field="log_date", labels=["time:"]),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="file_path", labels=["path:"]),
    ],
)
