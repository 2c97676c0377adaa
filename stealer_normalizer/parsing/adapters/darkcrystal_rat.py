"""DarkCrystal RAT layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.DARKCRYSTAL_RAT,
    rules=[
        FieldRule(field="computer_name", labels=["pc name:"]),
        FieldRule(field="username", labels=["user name:"], transform="username"),
        FieldRule(field="os", labels=["windows:"]),
        FieldRule(field="cpu", labels=["cpu name:"]),
        FieldRule(field="gpu", labels=["gpu name:"]),
        FieldRule(field="ram", labels=["ram:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(
            field="country",
            labels=["country:"],
            pattern=r"^([A-Z]{2})",
            require_pattern=False,
            transform="country",
        ),
        FieldRule(field="log_date", labels=["save time:"], match="contains"),
        FieldRule(field="file_path", labels=["path:"]),
    ],
)
