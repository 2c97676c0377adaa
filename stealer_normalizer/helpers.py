"""Logging, command-line and JSON output helpers."""
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from json import JSONEncoder, dumps
from pathlib import Path, PurePath
from typing import Any

import coloredlogs
from verboselogs import VerboseLogger

# Indexed by the number of ``-v`` flags.
LOG_LEVELS: list[str] = ["INFO", "VERBOSE", "DEBUG", "SPAM"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVEL_STYLES: dict[str, dict[str, Any]] = {
    **coloredlogs.DEFAULT_LEVEL_STYLES,
    "verbose": {"color": "cyan"},
    "spam": {"color": "white", "faint": True},
}


class RecordEncoder(JSONEncoder):
    """Serialize normalized records, families and report counters."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, Enum):
            return o.value
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, PurePath):
            return o.as_posix()
        if isinstance(o, (set, frozenset)):
            return sorted(o)
        return super().default(o)


def dump_to_file(logger: VerboseLogger, filename: str, records: Any) -> bool:
    """Write the collected records to a JSON file.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    filename : str
        The JSON file to write. Missing parent directories are created.
    records : Any
        The report and device records.

    Returns
    -------
    bool
        Whether the file was written.

    """
    filepath = Path(filename)

    try:
        payload = dumps(records, ensure_ascii=False, cls=RecordEncoder, indent=4)
    except (TypeError, ValueError) as err:
        logger.error(f"Records can't be serialized to JSON: {err}")
        return False

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(payload, encoding="utf-8")

    except OSError as err:
        logger.error(f"Failed to write file to '{filepath}': {err}")
        return False

    logger.info(f"Wrote {len(payload)} characters of records to '{filepath}'.")
    return True


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_options(description: str, argv: list[str] | None = None) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : list of str, optional
        The arguments to parse. Defaults to the process' arguments.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    source = parser.add_argument_group("logs source")
    source.add_argument(
        "filename",
        help="a .rar, .zip or .7z logs archive, or a directory of extracted logs",
    )
    source.add_argument(
        "-p",
        "--password",
        metavar="ARCHIVE_PASSWORD",
        default=None,
        help="the archive's password if required",
    )

    processing = parser.add_argument_group("processing")
    processing.add_argument(
        "-w",
        "--workers",
        type=_positive_int,
        default=None,
        help="parse system information files on this many threads",
    )
    processing.add_argument(
        "--max-username-length",
        metavar="LENGTH",
        type=_positive_int,
        default=None,
        help="truncate longer credential usernames",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--dump-json",
        metavar="FILENAME.json",
        default=None,
        help="write the normalized records to a JSON file",
    )
    output.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )

    return parser.parse_args(argv)


def settings_overrides(args: Namespace) -> dict[str, Any]:
    """Collect the settings given on the command line.

    Options left out keep the value from the environment or ``.env`` file.
    """
    overrides: dict[str, Any] = {}

    if args.verbose:
        overrides["log_level"] = verbosity_to_level(args.verbose)
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.max_username_length is not None:
        overrides["max_username_length"] = args.max_username_length

    return overrides


def verbosity_to_level(verbosity: int) -> str:
    """Map a ``-v`` count onto a log level name."""
    return LOG_LEVELS[max(0, min(verbosity, len(LOG_LEVELS) - 1))]


def init_logger(
    name: str, verbosity_level: str | int, formatting: str = LOG_FORMAT
) -> VerboseLogger:
    """Build a colored logger.

    ``verbosity_level`` is either a level name such as ``"DEBUG"`` or a ``-v``
    count.
    """
    if isinstance(verbosity_level, int):
        level = verbosity_to_level(verbosity_level)
    else:
        level = verbosity_level.upper()

    logger = VerboseLogger(name)
    coloredlogs.install(
        logger=logger,
        level=level,
        fmt=formatting,
        level_styles=LEVEL_STYLES,
        isatty=True,
    )

    return logger
