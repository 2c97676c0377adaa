"""RL Stealer layout: ``Label : value`` lines with loose labels."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.RL_STEALER,
    rules=[
        FieldRule(field="os", labels=["operating system"], match="contains"),
        FieldRule(
            field="username",
            labels=["pc user"],
            match="contains",
            pattern=r"/(.+)$",
            require_pattern=False,
            transform="username",
        ),
        FieldRule(field="file_path", labels=["launch"], match="contains"),
        FieldRule(field="log_date", labels=["current time"], match="contains"),
        FieldRule(field="log_date", labels=["log date"], match="contains"),
        FieldRule(field="hwid", labels=["hwid"], match="contains"),
        FieldRule(field="cpu", labels=["cpu"]),
        FieldRule(field="ram", labels=["ram"]),
        FieldRule(field="gpu", labels=["gpu"]),
        FieldRule(
            field="ip_address",
            labels=["ip geolocation"],
            match="contains",
            pattern=r"^([\d.]+)",
            transform="ip",
        ),
    ],
)
