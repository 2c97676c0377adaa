"""XFiles layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.XFILES,
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="os", labels=["operating system:"], match="contains"),
        FieldRule(field="username", labels=["username:"], transform="username"),
        FieldRule(field="computer_name", labels=["computer name:"]),
        FieldRule(field="hwid", labels=["hardware id:"], match="contains"),
        FieldRule(field="cpu", labels=["cpu", "processor"], match="all"),
        FieldRule(field="gpu", labels=["gpu", "display devices"], match="all"),
        FieldRule(field="ram", labels=["ram", "memory"], match="all"),
    ],
)
