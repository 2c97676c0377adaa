"""Data models for batches of raw files."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawFile:
    """A file as handed over by the extraction step.

    Attributes
    ----------
    filename : str
        The file's name, used for routing and as a signature hint.
    content : str or bytes
        The file's content.

    """

    filename: str
    content: str | bytes


@dataclass(frozen=True)
class FileError:
    """Failure report of a single file."""

    filename: str
    error: str


@dataclass
class BatchResult:
    """Counters and errors accumulated over a batch of files."""

    success: int = 0
    failed: int = 0
    errors: list[FileError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success + self.failed

    def add_success(self) -> None:
        self.success += 1

    def add_failure(self, filename: str, error: str) -> None:
        self.failed += 1
        self.errors.append(FileError(filename=filename, error=error))

    def merge(self, other: "BatchResult") -> "BatchResult":
        """Add another result's counters and errors to this one."""
        self.success += other.success
        self.failed += other.failed
        self.errors.extend(other.errors)
        return self
