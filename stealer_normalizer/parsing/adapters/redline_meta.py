"""RedLine and META ``UserInformation.txt`` layout.

Hardware is listed one ``Name: ...`` item per line under a ``Hardwares:`` header;
the items are classified into RAM, CPU and GPU once the list ends. Anti-viruses
follow as a bare block.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule

from ._hardware import classify_hardware

LAYOUT = AdapterLayout(
    family=StealerFamily.REDLINE_META,
    lists=[
        ListRule(
            field="hardware",
            labels=["hardwares:", "hardware:"],
            match="contains",
            continuation="labelled",
            item_label="name:",
            collapse=classify_hardware,
        ),
        ListRule(
            field="antivirus",
            labels=["anti-viruses:", "antiviruses:"],
            match="contains",
            continuation="block",
            join=", ",
        ),
    ],
    rules=[
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="file_path", labels=["filelocation:"], match="contains"),
        FieldRule(field="username", labels=["username:"], transform="username"),
        FieldRule(field="computer_name", labels=["machinename:"]),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="os", labels=["operation system:"], match="contains"),
        FieldRule(field="log_date", labels=["log date:"], match="contains"),
    ],
)
