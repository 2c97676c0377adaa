import json
from io import BytesIO
from pathlib import Path
from zipfile import ZipFile

import pytest
from py7zr import SevenZipFile

from stealer_normalizer.exceptions import UnsupportedArchiveError
from stealer_normalizer.helpers import (
    dump_to_file,
    init_logger,
    parse_options,
    settings_overrides,
    verbosity_to_level,
)
from stealer_normalizer.main import read_archive, run
from stealer_normalizer.models import StealerFamily, SystemInfo

LUMMA_SAMPLE = "LID: Ab12\nOS Version: Windows 10 Pro\nTime: 2024-05-06 07:08:09\n"


def _zip(path: Path) -> None:
    with ZipFile(path, "w") as archive:
        archive.writestr("DEVICE-1/System.txt", LUMMA_SAMPLE)
        archive.writestr("DEVICE-1/Passwords.txt", "URL: https://a.com\nUsername: u\nPassword: p\n")


def test_read_archive_rejects_unknown_extensions():
    with pytest.raises(UnsupportedArchiveError):
        read_archive(BytesIO(b""), "logs.tar.gz", None)

    with pytest.raises(UnsupportedArchiveError):
        read_archive(BytesIO(b""), "logs", None)


def test_read_zip_archive(tmp_path: Path):
    _zip(tmp_path / "logs.zip")
    buffer = BytesIO((tmp_path / "logs.zip").read_bytes())

    archive = read_archive(buffer, "logs.ZIP", None)
    try:
        assert "DEVICE-1/System.txt" in archive.namelist()
        assert archive.read_file("DEVICE-1/System.txt").decode("utf-8") == LUMMA_SAMPLE
    finally:
        archive.close()


def test_run_dumps_json(tmp_path: Path):
    _zip(tmp_path / "logs.zip")
    output = tmp_path / "out" / "records.json"

    run([str(tmp_path / "logs.zip"), "--dump-json", str(output)])

    dump = json.loads(output.read_text(encoding="utf-8"))
    assert dump["report"]["devices"] == ["DEVICE-1"]
    assert dump["report"]["system_info"]["success"] == 1
    assert dump["report"]["credentials"]["success"] == 1

    device = dump["devices"][0]
    assert device["device_id"] == "DEVICE-1"
    assert device["system_info"][0]["info"]["stealer_type"] == "Lumma"
    assert device["system_info"][0]["info"]["log_date"] == "2024-05-06"
    assert device["credentials"][0]["password"] == "p"


def test_run_on_a_directory(tmp_path: Path):
    (tmp_path / "DEVICE").mkdir()
    (tmp_path / "DEVICE" / "System.txt").write_text(LUMMA_SAMPLE, encoding="utf-8")
    output = tmp_path / "records.json"

    run([str(tmp_path), "-vv", "-w", "2", "--dump-json", str(output)])

    dump = json.loads(output.read_text(encoding="utf-8"))
    assert dump["report"]["devices"] == ["DEVICE"]


def test_run_on_a_missing_file_writes_nothing(tmp_path: Path):
    output = tmp_path / "records.json"
    run([str(tmp_path / "missing.zip"), "--dump-json", str(output)])
    assert not output.exists()


def test_parse_options():
    args = parse_options("test", ["logs.rar", "-p", "infected", "-vvv"])
    assert args.filename == "logs.rar"
    assert args.password == "infected"
    assert args.dump_json is None
    assert verbosity_to_level(args.verbose) == "SPAM"
    assert verbosity_to_level(0) == "INFO"
    assert verbosity_to_level(12) == "SPAM"
    assert args.workers is None
    assert settings_overrides(args) == {"log_level": "SPAM"}


def test_processing_options_override_settings():
    args = parse_options("test", ["logs", "-w", "4", "--max-username-length", "64"])
    assert settings_overrides(args) == {"max_workers": 4, "max_username_length": 64}
    assert settings_overrides(parse_options("test", ["logs"])) == {}

    with pytest.raises(SystemExit):
        parse_options("test", ["logs", "--workers", "0"])


def test_dump_to_file(tmp_path: Path):
    logger = init_logger("test_main", "INFO")
    output = tmp_path / "nested" / "records.json"

    assert dump_to_file(logger, str(output), [SystemInfo(cpu="Intel")])
    record = json.loads(output.read_text(encoding="utf-8"))[0]
    assert record["cpu"] == "Intel"
    assert record["stealer_type"] == StealerFamily.GENERIC.value

    assert not dump_to_file(logger, str(tmp_path / "bad.json"), {"x": object()})
    assert not (tmp_path / "bad.json").exists()


def test_read_7z_archive(tmp_path: Path):
    path = tmp_path / "logs.7z"
    with SevenZipFile(path, "w") as archive:
        archive.writestr(LUMMA_SAMPLE, "DEVICE-1/System.txt")

    archive = read_archive(BytesIO(path.read_bytes()), "logs.7z", None)
    try:
        assert "DEVICE-1/System.txt" in archive.namelist()
        assert archive.read_file("DEVICE-1/System.txt").decode("utf-8") == LUMMA_SAMPLE
    finally:
        archive.close()
