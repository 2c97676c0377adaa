"""Ailurophile ``System.txt`` layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.AILUROPHILE,
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="computer_name", labels=["hostname:"]),
        FieldRule(field="os", labels=["pc type:"], match="contains"),
        FieldRule(field="file_path", labels=["file path:"], match="contains"),
    ],
)
