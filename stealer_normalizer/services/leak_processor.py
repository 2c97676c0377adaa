"""Leak processing component."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol
from zipfile import BadZipFile

from rarfile import BadRarFile
from verboselogs import VerboseLogger

from stealer_normalizer.models import LeakReport, RawFile
from stealer_normalizer.services.credential_processor import CredentialProcessor
from stealer_normalizer.services.system_info_processor import SystemInfoProcessor


class LogsArchive(Protocol):
    """What the processor needs from an archive or an extracted directory."""

    @property
    def filename(self) -> str: ...

    def namelist(self) -> list[str]: ...

    def read_file(self, filename: str) -> bytes: ...


class LeakProcessor:
    """Orchestrates the processing of a leak from an archive."""

    def __init__(
        self,
        system_info_processor: SystemInfoProcessor,
        credential_processor: CredentialProcessor,
        logger: VerboseLogger,
    ) -> None:
        self.system_info_processor = system_info_processor
        self.credential_processor = credential_processor
        self.logger = logger

    def process_leak(self, archive: LogsArchive) -> LeakReport:
        """
        Process every device directory in an archive.
        """
        self.logger.info(f"Processing: {archive.filename} ...")
        report = LeakReport(filename=str(archive.filename))
        devices: dict[str, list[RawFile]] = {}

        for file_path in archive.namelist():
            if file_path.endswith("/"):
                continue

            is_system_info = self.system_info_processor.is_system_info_file(file_path)
            is_password = self.credential_processor.is_password_file(file_path)

            if not (is_system_info or is_password):
                continue

            try:
                content = archive.read_file(file_path)

            except (BadRarFile, BadZipFile, KeyError, RuntimeError, OSError) as err:
                self.logger.error(f"Failed to read {file_path} from archive: {err}")
                batch = report.system_info if is_system_info else report.credentials
                batch.add_failure(file_path, f"Read failed: {err}")
                continue

            device_id = self._get_device_dir(file_path) or Path(archive.filename).stem
            devices.setdefault(device_id, []).append(RawFile(file_path, content))

        for device_id, files in devices.items():
            report.devices.append(device_id)
            report.system_info.merge(
                self.system_info_processor.process_files(device_id, files)
            )
            report.credentials.merge(
                self.credential_processor.process_files(device_id, files)
            )

        self.logger.info(
            f"Parsed '{report.filename}' ({len(report.devices)} devices): "
            f"system information {report.system_info.success} ok, "
            f"{report.system_info.failed} failed; password files "
            f"{report.credentials.success} ok, {report.credentials.failed} failed."
        )
        return report

    def _get_device_dir(self, filepath: str) -> str:
        """Retrieve name of the compromised device directory."""
        parts = filepath.split("/")
        return parts[0] if len(parts) > 1 else ""
