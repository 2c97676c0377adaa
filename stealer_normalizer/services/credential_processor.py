"""Credential processing component."""
from __future__ import annotations

from dataclasses import replace
from pathlib import PurePosixPath
from typing import Iterable

from verboselogs import VerboseLogger

from stealer_normalizer.config import Settings
from stealer_normalizer.models import BatchResult, Credential, RawFile
from stealer_normalizer.parsing.credentials import CredentialExtractor
from stealer_normalizer.parsing.escaping import escape_password, truncate_username
from stealer_normalizer.parsing.grammar import normalize_encoding
from stealer_normalizer.storage import RecordSink


class CredentialProcessor:
    """Extract, escape and store the credentials of a device's password dumps."""

    def __init__(
        self,
        credential_extractor: CredentialExtractor,
        sink: RecordSink,
        logger: VerboseLogger,
        settings: Settings | None = None,
    ) -> None:
        self.credential_extractor = credential_extractor
        self.sink = sink
        self.logger = logger
        self.settings = settings or Settings()

    def is_password_file(self, filename: str) -> bool:
        """Tell whether a file is named like a browser password dump."""
        name = PurePosixPath(filename.replace("\\", "/")).name.lower()
        return any(pattern in name for pattern in self.settings.password_file_names)

    def process_files(self, device_id: str, files: Iterable[RawFile]) -> BatchResult:
        """Process a device's password dumps.

        Parameters
        ----------
        device_id : str
            The compromised device the files belong to.
        files : iterable of RawFile
            The device's files. Files not named like password dumps are skipped.

        Returns
        -------
        BatchResult
            One success per dump read, one failure per dump which couldn't be.

        """
        result = BatchResult()
        count = 0

        for raw in files:
            if not self.is_password_file(raw.filename):
                continue

            try:
                content = normalize_encoding(raw.content)
                credentials = [
                    self.prepare(credential)
                    for credential in self.credential_extractor.extract(
                        content, raw.filename
                    )
                ]
                self.sink.save_credentials(device_id, credentials)

            except Exception as err:  # One bad dump must not abort the batch.
                self.logger.error(f"Failed processing '{raw.filename}': {err}")
                result.add_failure(raw.filename, str(err))

            else:
                self.logger.debug(
                    f"Extracted {len(credentials)} credential(s) from '{raw.filename}'."
                )
                count += len(credentials)
                result.add_success()

        self.logger.info(
            f"Device '{device_id}': {count} credential(s) from {result.success} "
            f"password file(s), {result.failed} failed."
        )

        return result

    def prepare(self, credential: Credential) -> Credential:
        """Escape the password and truncate the username for storage."""
        truncated = truncate_username(
            credential.username, self.settings.max_username_length
        )

        if truncated.was_truncated:
            self.logger.warning(
                f"Username truncated from {truncated.original_length} to "
                f"{self.settings.max_username_length} characters ({credential.url})."
            )

        return replace(
            credential,
            username=truncated.value,
            password=escape_password(credential.password),
        )
