"""Uniform reader over ZIP, RAR and 7-Zip archives."""
from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
from zipfile import ZipFile

from py7zr import SevenZipFile
from rarfile import RarFile

from .directory_wrapper import DirectoryArchiveWrapper


class ArchiveWrapper:
    """Wrap an opened archive to list and read its members.

    Parameters
    ----------
    archive : zipfile.ZipFile or rarfile.RarFile or py7zr.SevenZipFile
        The opened archive.
    filename : str
        The archive's file name.
    password : str, optional
        The archive's password if required.

    """

    def __init__(
        self,
        archive: ZipFile | RarFile | SevenZipFile,
        filename: str,
        password: str | None = None,
    ) -> None:
        self.archive = archive
        self._filename = filename
        self._password = password
        self._tmpdir: TemporaryDirectory | None = None
        self._unpacked: DirectoryArchiveWrapper | None = None

        if isinstance(archive, SevenZipFile):
            # py7zr has no per-member reader, unpack once.
            self._tmpdir = TemporaryDirectory(prefix="stealer_normalizer_")
            archive.extractall(path=self._tmpdir.name)
            self._unpacked = DirectoryArchiveWrapper(
                Path(self._tmpdir.name), filename=filename
            )

        elif password:
            if isinstance(archive, ZipFile):
                archive.setpassword(password.encode())
            else:
                archive.setpassword(password)

    @property
    def filename(self) -> str:
        return self._filename

    def namelist(self) -> list[str]:
        if self._unpacked:
            return self._unpacked.namelist()
        return self.archive.namelist()

    def read_file(self, filename: str) -> bytes:
        """Read an archive member.

        Raises
        ------
        KeyError
            If the member doesn't exist.
        rarfile.Error, zipfile.BadZipFile, RuntimeError
            If the member can't be decompressed or decrypted.

        """
        if self._unpacked:
            return self._unpacked.read_file(filename)
        return self.archive.read(filename)

    def close(self) -> None:
        self.archive.close()
        if self._tmpdir:
            self._tmpdir.cleanup()
            self._tmpdir = None
