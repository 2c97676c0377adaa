"""StealC ``system_info.txt`` layout.

``Network Info:`` and ``System Summary:`` headers open the two blocks fields are
read from. GPUs are listed as indented items.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule

_NETWORK = ["network"]
_SYSTEM = ["system"]

LAYOUT = AdapterLayout(
    family=StealerFamily.STEALC,
    section_headers={
        "network info": "network",
        "system summary": "system",
    },
    lists=[ListRule(field="gpu", labels=["gpu:"], sections=_SYSTEM)],
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], sections=_NETWORK, transform="ip"),
        FieldRule(field="country", labels=["country:"], sections=_NETWORK, transform="country"),
        FieldRule(field="hwid", labels=["hwid:"], sections=_SYSTEM),
        FieldRule(field="os", labels=["os:"], sections=_SYSTEM),
        FieldRule(field="username", labels=["username:"], sections=_SYSTEM, transform="username"),
        FieldRule(field="computer_name", labels=["computer name:"], sections=_SYSTEM),
        FieldRule(field="log_date", labels=["local time:"], match="contains", sections=_SYSTEM),
        FieldRule(field="file_path", labels=["running path:"], match="contains", sections=_SYSTEM),
        FieldRule(field="cpu", labels=["cpu:"], sections=_SYSTEM),
        FieldRule(field="ram", labels=["ram:"], sections=_SYSTEM),
    ],
)
