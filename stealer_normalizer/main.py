"""Infostealer logs normalizer."""
from argparse import Namespace
from io import BytesIO
from pathlib import Path
from zipfile import BadZipFile, ZipFile

from dependency_injector import providers
from dependency_injector.wiring import Provide, inject
from py7zr import SevenZipFile
from py7zr.exceptions import Bad7zFile
from rarfile import Error as RarError
from rarfile import RarFile
from verboselogs import VerboseLogger

from stealer_normalizer.config import Settings
from stealer_normalizer.containers import AppContainer
from stealer_normalizer.exceptions import UnsupportedArchiveError
from stealer_normalizer.helpers import dump_to_file, parse_options, settings_overrides
from stealer_normalizer.models import ArchiveWrapper, DirectoryArchiveWrapper, LeakReport
from stealer_normalizer.services.leak_processor import LeakProcessor
from stealer_normalizer.storage import MemorySink, RecordSink


def read_archive(
    buffer: BytesIO, filename: str, password: str | None
) -> ArchiveWrapper:
    """Open logs archive and returns a reader object.

    Parameters
    ----------
    buffer : io.BytesIO
        The opened archive stream.
    filename : str
        The archive filename.
    password : str
        If applicable, the password required to open the archive.

    Returns
    -------
    stealer_normalizer.models.archive_wrapper.ArchiveWrapper

    Raises
    ------
    UnsupportedArchiveError
        If the file extension is not handled.
    rarfile.Error
        If either unrar, unar or bdstar binary is not found.
    py7zr.exceptions.Bad7zFile
        If the file is not a 7-Zip file.

    """
    archive: RarFile | ZipFile | SevenZipFile

    match Path(filename).suffix.lower():
        case ".rar":
            archive = RarFile(buffer)

        case ".zip":
            archive = ZipFile(buffer)

        case ".7z":
            archive = SevenZipFile(buffer, password=password)

        case other_ext:
            raise UnsupportedArchiveError(f"{other_ext or 'No extension'} not handled.")

    return ArchiveWrapper(archive, filename=filename, password=password)


def process_path(
    path: str, password: str | None, leak_processor: LeakProcessor
) -> LeakReport:
    """Process an archive, or a directory of already extracted logs."""
    if Path(path).is_dir():
        directory = DirectoryArchiveWrapper(Path(path))
        try:
            return leak_processor.process_leak(directory)
        finally:
            directory.close()

    archive: ArchiveWrapper | None = None

    try:
        with open(path, "rb") as file_handle:
            with BytesIO(file_handle.read()) as buffer:
                archive = read_archive(buffer, path, password)
                return leak_processor.process_leak(archive)
    finally:
        if archive:
            archive.close()


@inject
def main(
    args: Namespace,
    logger: VerboseLogger = Provide[AppContainer.logger],
    leak_processor: LeakProcessor = Provide[AppContainer.leak_processor],
    sink: RecordSink = Provide[AppContainer.sink],
) -> LeakReport | None:
    """Program's entrypoint."""
    report: LeakReport | None = None

    try:
        report = process_path(args.filename, args.password, leak_processor)

    except (
        FileNotFoundError,
        UnsupportedArchiveError,
        OSError,
        PermissionError,
        RarError,
        BadZipFile,
        Bad7zFile,
    ) as err:
        logger.error(f"Failed reading {args.filename}: {err}")

    except RuntimeError as err:
        logger.error(f"Failed parsing {args.filename}: {err}")

    else:
        if args.dump_json:
            devices = sink.devices if isinstance(sink, MemorySink) else []
            dump_to_file(logger, args.dump_json, {"report": report, "devices": devices})

    return report


def run(argv: list[str] | None = None) -> None:
    """Build the container and run the program."""
    args = parse_options("Normalize infostealer logs archives.", argv)

    app_container = AppContainer()
    overrides = settings_overrides(args)
    if overrides:
        app_container.config.override(providers.Singleton(Settings, **overrides))

    app_container.wire(modules=[__name__])
    app_container.init_resources()
    try:
        main(args)
    finally:
        app_container.shutdown_resources()
        app_container.unwire()


if __name__ == "__main__":
    run()
