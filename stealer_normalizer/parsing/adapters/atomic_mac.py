"""Atomic macOS Stealer layout.

The OS comes from the ``sw_vers`` triplet, the hardware from the
``system_profiler`` overview and the GPU from its graphics block.
"""
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.layout import (
    OS_BUILD,
    OS_NAME,
    OS_VERSION,
    AdapterLayout,
    FieldRule,
)

LAYOUT = AdapterLayout(
    family=StealerFamily.ATOMIC_MAC,
    combine_os=True,
    section_headers={
        "hardware overview": "hardware",
        "graphics/displays": "graphics",
    },
    rules=[
        FieldRule(field=OS_NAME, labels=["productname:"]),
        FieldRule(field=OS_VERSION, labels=["productversion:"]),
        FieldRule(field=OS_BUILD, labels=["buildversion:"]),
        FieldRule(field="ip_address", labels=["ip:"], transform="ip"),
        FieldRule(field="country", labels=["country:"], transform="country"),
        FieldRule(
            field="computer_name",
            labels=["model name:"],
            match="contains",
            sections=["hardware"],
        ),
        FieldRule(field="cpu", labels=["chip:"], match="contains", sections=["hardware"]),
        FieldRule(field="ram", labels=["memory:"], match="contains", sections=["hardware"]),
        FieldRule(
            field="hwid",
            labels=["serial number"],
            match="contains",
            sections=["hardware"],
        ),
        FieldRule(
            field="gpu",
            labels=["chipset model:"],
            match="contains",
            sections=["graphics"],
        ),
    ],
)
