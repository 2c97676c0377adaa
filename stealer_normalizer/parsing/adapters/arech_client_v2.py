"""ArechClientV2 ``UserInformation.txt`` layout, a RedLine offspring."""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule

from ._hardware import classify_hardware

LAYOUT = AdapterLayout(
    family=StealerFamily.ARECH_CLIENT_V2,
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
        FieldRule(field="file_path", labels=["filelocation:"]),
        FieldRule(field="username", labels=["username:"], transform="username"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(field="hwid", labels=["hwid:"]),
        FieldRule(field="os", labels=["operation system:"], match="contains"),
        FieldRule(field="log_date", labels=["log date:"], match="contains"),
    ],
)
