"""Fallback layout for files no signature claims.

Recognizes the union of the labels used across families. Short labels which
could be the tail of a longer one (``os:`` in ``bios:``, ``pc:`` in ``npc:``) must
not follow a letter. Longer ones match anywhere in the line.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import OS_NAME, OS_VERSION, AdapterLayout, FieldRule

_UNKNOWN = ["unknown"]

LAYOUT = AdapterLayout(
    family=StealerFamily.GENERIC,
    ini_sections=True,
    separator_sections=True,
    combine_os=True,
    rules=[
        # Operating system
        FieldRule(
            field=OS_NAME,
            labels=["os name:", "productname:"],
            match="contains",
            reject=_UNKNOWN,
        ),
        FieldRule(
            field=OS_NAME,
            labels=["windows name:"],
            match="contains",
            sections=["hardware"],
            reject=_UNKNOWN,
        ),
        FieldRule(
            field=OS_VERSION,
            labels=["os version:", "productversion:"],
            match="contains",
            reject=_UNKNOWN,
        ),
        FieldRule(field="os", labels=["os:", "system:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="os",
            labels=["operation system:", "operating system:", "windows:", "pc type:"],
            match="contains",
            reject=_UNKNOWN,
        ),
        # Network
        FieldRule(
            field="ip_address",
            labels=["public ip address:", "external ip:"],
            match="contains",
            pattern=r"^([\d.]+)",
            require_pattern=False,
            transform="ip",
        ),
        FieldRule(
            field="ip_address",
            labels=["ip:"],
            match="word",
            pattern=r"^([\d.]+)",
            require_pattern=False,
            transform="ip",
        ),
        FieldRule(
            field="ip_address",
            labels=[
                "ip address:",
                "ip info:",
                "private ip address:",
                "internal ip:",
                "ip geolocation:",
            ],
            match="contains",
            pattern=r"^([\d.]+)",
            require_pattern=False,
            transform="ip",
        ),
        FieldRule(
            field="country",
            labels=["country:", "country code:"],
            match="contains",
            pattern=r"\(([A-Z]{2})\)|\[([A-Z]{2,})\]",
            require_pattern=False,
            transform="country_not_ip",
        ),
        FieldRule(
            field="country",
            labels=["location:"],
            match="contains",
            sections=["geolocation"],
            pattern=r"\(([A-Z]{2})\)|\[([A-Z]{2,})\]",
            require_pattern=False,
            transform="country_not_ip",
        ),
        # Identity
        FieldRule(
            field="username", labels=["user:"], match="word", transform="username"
        ),
        FieldRule(
            field="username",
            labels=["user name:", "username:", "pc user:", "registered owner:"],
            match="contains",
            transform="username",
        ),
        FieldRule(
            field="username",
            labels=["windows name:"],
            match="contains",
            sections=["hardware"],
            transform="username",
        ),
        FieldRule(field="computer_name", labels=["computer:", "pc:"], match="word"),
        FieldRule(
            field="computer_name",
            labels=[
                "computer name:",
                "compname:",
                "host name:",
                "hostname:",
                "machine name:",
                "netbios:",
                "pc name:",
            ],
            match="contains",
        ),
        FieldRule(field="hwid", labels=["hwid:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="hwid",
            labels=[
                "hardware id:",
                "hardware uuid:",
                "machineid:",
                "bot_id:",
                "user id:",
                "serial number:",
            ],
            match="contains",
            reject=_UNKNOWN,
        ),
        # Hardware
        FieldRule(field="cpu", labels=["cpu:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="cpu",
            labels=[
                "cpu (processor):",
                "cpu info:",
                "cpu name:",
                "processor:",
                "processor(s):",
            ],
            match="contains",
            reject=_UNKNOWN,
        ),
        FieldRule(field="ram", labels=["ram:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="ram",
            labels=[
                "ram (memory):",
                "ram size:",
                "amount of ram:",
                "installed ram:",
                "total physical memory:",
                "memory:",
            ],
            match="contains",
            reject=_UNKNOWN,
        ),
        FieldRule(field="gpu", labels=["gpu:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="gpu",
            labels=[
                "gpu (display devices):",
                "gpu info:",
                "gpu name:",
                "display devices:",
                "video card:",
                "videocard:",
                "chipset model:",
            ],
            match="contains",
            reject=_UNKNOWN,
        ),
        # Infection
        FieldRule(field="log_date", labels=["date:", "time:"], match="word"),
        FieldRule(
            field="log_date",
            labels=["local date:", "current time:", "log date:", "save time:"],
            match="contains",
        ),
        FieldRule(field="file_path", labels=["path:"], match="word"),
        FieldRule(
            field="file_path",
            labels=[
                "file location:",
                "execute path:",
                "running path:",
                "current jarfile path:",
                "process executable path:",
                "startup folder:",
                "launch:",
                "work dir:",
                "file path:",
            ],
            match="contains",
        ),
        FieldRule(field="antivirus", labels=["av:"], match="word", reject=_UNKNOWN),
        FieldRule(
            field="antivirus",
            labels=["anti virus:", "anti-viruses:", "antivirus:", "antivirus products:"],
            match="contains",
            reject=_UNKNOWN,
        ),
    ],
)
