"""Shared helpers for layouts listing hardware as ``Name: ...`` items."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stealer_normalizer.parsing.grammar import clean_value

if TYPE_CHECKING:
    from stealer_normalizer.parsing.engine import ParseState

_RAM_WORD = re.compile(r"\bram\b", re.I)
_RAM_SIZE = re.compile(r"(\d+\.?\d*)\s*(mb|gb|bytes)", re.I)
_CPU_CORES = re.compile(r",\s*\d+\s+cores?\s*$", re.I)
_GPU_BYTES = re.compile(r",\s*\d+\s+bytes\s*$", re.I)
_GPU_HINTS = ("graphics", "gpu", "nvidia", "radeon")


def classify_hardware(items: list[str], state: ParseState) -> None:
    """Sort ``Hardwares:`` items into the RAM, CPU and GPU fields.

    Parameters
    ----------
    items : list of str
        The item values, without their ``Name:`` label.
    state : ParseState
        The parse state the fields are assigned to.

    """
    for item in items:
        lowered = item.lower()

        if "total of ram" in lowered or _RAM_WORD.search(item):
            match = _RAM_SIZE.search(item)
            if match:
                state.assign("ram", f"{match.group(1)} {match.group(2).upper()}")
            continue

        if any(hint in lowered for hint in ("cpu", "processor", "cores")):
            state.assign("cpu", clean_value(_CPU_CORES.sub("", item)))
            continue

        if any(hint in lowered for hint in _GPU_HINTS) or lowered.endswith("bytes"):
            state.assign("gpu", clean_value(_GPU_BYTES.sub("", item)))
