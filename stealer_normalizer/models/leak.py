"""Data model to define the processing report of a leak."""
from dataclasses import dataclass, field

from .batch import BatchResult


@dataclass
class LeakReport:
    """Class defining the outcome of processing a logs archive.

    Attributes
    ----------
    filename : str
        The archive filename.
    devices : list of str
        The compromised devices (top-level directories) found in the archive.
    system_info : stealer_normalizer.models.BatchResult
        Outcome of the system information files.
    credentials : stealer_normalizer.models.BatchResult
        Outcome of the password dump files.

    """

    filename: str
    devices: list[str] = field(default_factory=list)
    system_info: BatchResult = field(default_factory=BatchResult)
    credentials: BatchResult = field(default_factory=BatchResult)
