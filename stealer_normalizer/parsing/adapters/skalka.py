"""Skalka (Java stealer) layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.SKALKA,
    rules=[
        FieldRule(
            field="os",
            labels=["operation system:"],
            match="contains",
            substitutions=[(r"(?i)^win(\d+)", r"Windows \1")],
        ),
        FieldRule(
            field="file_path",
            labels=["current jarfile path:"],
            match="contains",
            substitutions=[("/", r"\\")],
        ),
        FieldRule(field="username", labels=["username:"], transform="username"),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(
            field="log_date",
            labels=["timezone:"],
            pattern=r"^([\d\-T:.]+)",
            require_pattern=False,
        ),
        FieldRule(
            field="country",
            labels=["language & country:", "language and country:"],
            match="contains",
            pattern=r"_([A-Z]{2})$",
            require_pattern=False,
            transform="country",
        ),
    ],
)
