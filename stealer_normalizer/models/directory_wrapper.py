from __future__ import annotations

from pathlib import Path


class DirectoryArchiveWrapper:
    """A directory-backed wrapper exposing the same interface as ArchiveWrapper.

    Used for logs that were already extracted, and for 7-Zip archives which are
    unpacked to a temporary directory before being read.
    """

    def __init__(self, root_dir: Path, filename: str | None = None) -> None:
        self.root_dir = Path(root_dir)
        if not self.root_dir.exists() or not self.root_dir.is_dir():
            raise ValueError(f"Not a directory: {root_dir}")
        self._filename = filename or str(self.root_dir)

    @property
    def filename(self) -> str:
        return self._filename

    def namelist(self) -> list[str]:
        entries: list[str] = []
        for p in sorted(self.root_dir.rglob("*")):
            rel = p.relative_to(self.root_dir).as_posix()
            if p.is_dir():
                entries.append(rel + "/")
            else:
                entries.append(rel)
        return entries

    def read_file(self, filename: str) -> bytes:
        path = (self.root_dir / filename).resolve()
        if not path.is_file():
            raise KeyError(f"{filename} not found.")
        return path.read_bytes()

    def close(self) -> None:
        return None
