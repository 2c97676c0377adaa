"""Exceptions raised by the normalization engine."""


class NormalizerError(Exception):
    """Base class of the package's exceptions."""


class SystemInfoParseError(NormalizerError):
    """A system information file could not be parsed or cleaned."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f"Parse failed: {cause}")
        self.filename = filename
        self.cause = cause


class UnsupportedArchiveError(NormalizerError, NotImplementedError):
    """The archive's file extension is not handled."""
