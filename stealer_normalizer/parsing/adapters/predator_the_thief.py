"""Predator the Thief layout."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule

LAYOUT = AdapterLayout(
    family=StealerFamily.PREDATOR_THE_THIEF,
    rules=[
        FieldRule(field="username", labels=["user name:"], transform="username"),
        FieldRule(field="computer_name", labels=["machine name:"]),
        FieldRule(field="os", labels=["os version:"], match="contains"),
        FieldRule(field="log_date", labels=["launch time:"], match="contains"),
        FieldRule(field="cpu", labels=["cpu info:"], match="contains"),
        FieldRule(
            field="ram",
            labels=["amount of ram:"],
            match="contains",
            substitutions=[(r"\s*\(.+?\)$", "")],
        ),
        FieldRule(field="gpu", labels=["gpu info:"], match="contains"),
        FieldRule(field="file_path", labels=["startup folder:"], match="contains"),
    ],
)
