"""Module that contains data models."""
from .archive_wrapper import ArchiveWrapper
from .batch import BatchResult, FileError, RawFile
from .credential import Credential, UrlInfo
from .directory_wrapper import DirectoryArchiveWrapper
from .family import StealerFamily
from .leak import LeakReport
from .system_info import TEXT_FIELDS, SystemInfo

__all__ = [
    "ArchiveWrapper",
    "BatchResult",
    "FileError",
    "RawFile",
    "Credential",
    "UrlInfo",
    "DirectoryArchiveWrapper",
    "StealerFamily",
    "LeakReport",
    "TEXT_FIELDS",
    "SystemInfo",
]
