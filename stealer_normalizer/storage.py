"""Storage collaborator interface and an in-memory implementation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from threading import Lock

from stealer_normalizer.models import Credential, SystemInfo


class RecordSink(ABC):
    """Receive the records produced by the processors."""

    @abstractmethod
    def save_system_information(
        self, device_id: str, info: SystemInfo, source_filename: str
    ) -> None:
        """Persist a finished system information record."""

    @abstractmethod
    def save_credentials(self, device_id: str, credentials: list[Credential]) -> None:
        """Persist the credentials found on a device."""


@dataclass
class SourcedSystemInfo:
    """A system information record and the file it was read from."""

    source_filename: str
    info: SystemInfo


@dataclass
class DeviceRecords:
    """Everything saved for one compromised device."""

    device_id: str
    system_info: list[SourcedSystemInfo] = field(default_factory=list)
    credentials: list[Credential] = field(default_factory=list)


class MemorySink(RecordSink):
    """Keep records in memory, per device, in insertion order."""

    def __init__(self) -> None:
        self._devices: dict[str, DeviceRecords] = {}
        self._lock = Lock()

    def _device(self, device_id: str) -> DeviceRecords:
        if device_id not in self._devices:
            self._devices[device_id] = DeviceRecords(device_id=device_id)
        return self._devices[device_id]

    def save_system_information(
        self, device_id: str, info: SystemInfo, source_filename: str
    ) -> None:
        with self._lock:
            self._device(device_id).system_info.append(
                SourcedSystemInfo(source_filename=source_filename, info=info)
            )

    def save_credentials(self, device_id: str, credentials: list[Credential]) -> None:
        with self._lock:
            self._device(device_id).credentials.extend(credentials)

    @property
    def devices(self) -> list[DeviceRecords]:
        return list(self._devices.values())

    def get(self, device_id: str) -> DeviceRecords | None:
        return self._devices.get(device_id)
