"""RisePro ``Information.txt`` layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.RISEPRO,
    ini_sections=True,
    rules=[
        FieldRule(field="log_date", labels=["date:"]),
        FieldRule(field="log_date", labels=["local time:"], match="contains"),
        FieldRule(field="hwid", labels=["machineid:"], match="contains"),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="file_path", labels=["path:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(
            field="country",
            labels=["location:"],
            pattern=r"^([A-Z]{2})",
            transform="country",
        ),
        FieldRule(field="os", labels=["windows:"]),
        FieldRule(
            field="computer_name",
            labels=["computer name:"],
            substitutions=[(r"\s*\[.+?\]$", "")],
        ),
        FieldRule(field="username", labels=["user name:"], transform="username"),
        FieldRule(field="cpu", labels=["processor:"], sections=["hardware"]),
        FieldRule(field="ram", labels=["ram:"], sections=["hardware"]),
        FieldRule(
            field="gpu",
            labels=["videocard"],
            match="contains",
            sections=["hardware"],
            pattern=r"^#\d+:\s*(.+)",
            require_pattern=False,
        ),
    ],
)
