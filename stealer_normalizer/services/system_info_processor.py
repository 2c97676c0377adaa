"""System information processing component."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import PurePosixPath
from typing import Iterable

from verboselogs import VerboseLogger

from stealer_normalizer.config import Settings
from stealer_normalizer.exceptions import SystemInfoParseError
from stealer_normalizer.models import TEXT_FIELDS, BatchResult, RawFile, SystemInfo
from stealer_normalizer.parsing.dates import normalize_datetime
from stealer_normalizer.parsing.grammar import clean_value, normalize_encoding
from stealer_normalizer.parsing.registry import AdapterRegistry
from stealer_normalizer.parsing.signatures import SignatureDetector
from stealer_normalizer.storage import RecordSink


class SystemInfoProcessor:
    """Detect, parse, clean and store the system information files of a device.

    Parameters
    ----------
    adapter_registry : AdapterRegistry
        The family to adapter lookup.
    signature_detector : SignatureDetector
        The family detector.
    sink : RecordSink
        Where finished records go.
    logger : verboselogs.VerboseLogger
        The program's logger.
    settings : Settings, optional
        The application settings.

    """

    def __init__(
        self,
        adapter_registry: AdapterRegistry,
        signature_detector: SignatureDetector,
        sink: RecordSink,
        logger: VerboseLogger,
        settings: Settings | None = None,
    ) -> None:
        self.adapter_registry = adapter_registry
        self.signature_detector = signature_detector
        self.sink = sink
        self.logger = logger
        self.settings = settings or Settings()

    def is_system_info_file(self, filename: str) -> bool:
        """Tell whether a file's name follows a system information naming convention."""
        name = PurePosixPath(filename.replace("\\", "/")).name.lower()
        return any(pattern in name for pattern in self.settings.system_info_patterns)

    def process_files(self, device_id: str, files: Iterable[RawFile]) -> BatchResult:
        """Process a device's system information files.

        A failing file is recorded in the result and never stops the batch.

        Parameters
        ----------
        device_id : str
            The compromised device the files belong to.
        files : iterable of RawFile
            The device's files. Files not named like system information are skipped.

        Returns
        -------
        BatchResult
            Counters and per-file errors, in file order.

        """
        selected = [raw for raw in files if self.is_system_info_file(raw.filename)]
        process = partial(self._process_file, device_id)

        if self.settings.max_workers > 1 and len(selected) > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
                partials = list(executor.map(process, selected))
        else:
            partials = [process(raw) for raw in selected]

        result = BatchResult()
        for file_result in partials:
            result.merge(file_result)

        self.logger.info(
            f"Device '{device_id}': {result.success} system information file(s) "
            f"parsed, {result.failed} failed."
        )
        for error in result.errors:
            self.logger.warning(f"  {error.filename}: {error.error}")

        return result

    def _process_file(self, device_id: str, raw: RawFile) -> BatchResult:
        result = BatchResult()

        try:
            info = self.parse(raw)
            self.sink.save_system_information(device_id, info, raw.filename)

        except Exception as err:  # One bad file must not abort the batch.
            self.logger.error(f"Failed processing '{raw.filename}': {err}")
            result.add_failure(raw.filename, str(err))

        else:
            self.logger.debug(f"Parsed '{raw.filename}' as {info.stealer_type}.")
            result.add_success()

        return result

    def parse(self, raw: RawFile) -> SystemInfo:
        """Parse and clean a single system information file.

        Raises
        ------
        SystemInfoParseError
            If the adapter or the cleaning pass fails.

        """
        content = normalize_encoding(raw.content)
        family = self.signature_detector.detect(content, raw.filename)
        adapter = self.adapter_registry.adapter_for(family)

        self.logger.debug(f"Detected {family} in '{raw.filename}'.")

        try:
            return self.clean(adapter.parse(content, raw.filename))
        except Exception as err:
            raise SystemInfoParseError(raw.filename, err) from err

    def clean(self, info: SystemInfo) -> SystemInfo:
        """Run the final cleaning pass and normalize the infection date."""
        for name in TEXT_FIELDS:
            setattr(info, name, clean_value(getattr(info, name)))

        info.log_date, info.log_time = normalize_datetime(
            info.log_date,
            year_range=(self.settings.date_min_year, self.settings.date_max_year),
        )

        return info
