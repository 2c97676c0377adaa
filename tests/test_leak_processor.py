import textwrap
from pathlib import Path

import pytest

from stealer_normalizer.containers import AppContainer
from stealer_normalizer.models import DirectoryArchiveWrapper, StealerFamily

LUMMA_SAMPLE = textwrap.dedent(
    """
    - LID: Ab12
    - OS Version: Windows 10 Pro
    - User: john
    """
)

REDLINE_SAMPLE = textwrap.dedent(
    """
    Build ID: LogsDiller
    UserName: bob
    Log date: 6/2/2024 3:06:00 PM
    """
)

PASSWORDS = "URL: https://a.com\nUsername: u\nPassword: p\n"


@pytest.fixture
def container():
    c = AppContainer()
    c.init_resources()
    try:
        yield c
    finally:
        c.shutdown_resources()


def _write(root: Path, relative: str, content: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_process_extracted_directory(container: AppContainer, tmp_path: Path):
    _write(tmp_path, "DEVICE-1/System.txt", LUMMA_SAMPLE)
    _write(tmp_path, "DEVICE-1/Passwords.txt", PASSWORDS)
    _write(tmp_path, "DEVICE-2/UserInformation.txt", REDLINE_SAMPLE)
    _write(tmp_path, "DEVICE-2/Cookies/chrome.txt", "cookie")

    report = container.leak_processor().process_leak(DirectoryArchiveWrapper(tmp_path))

    assert report.devices == ["DEVICE-1", "DEVICE-2"]
    assert report.system_info.success == 2
    assert report.system_info.failed == 0
    assert report.credentials.success == 1

    sink = container.sink()
    first = sink.get("DEVICE-1")
    assert first.system_info[0].info.stealer_type == StealerFamily.LUMMA
    assert first.system_info[0].info.username == "john"
    assert first.credentials[0].url == "https://a.com"

    second = sink.get("DEVICE-2")
    assert second.system_info[0].source_filename == "DEVICE-2/UserInformation.txt"
    assert second.system_info[0].info.stealer_type == StealerFamily.REDLINE_META
    assert second.system_info[0].info.log_date == "2024-02-06"
    assert second.credentials == []


def test_root_level_files_use_the_archive_name(container: AppContainer, tmp_path: Path):
    logs = tmp_path / "leak"
    _write(logs, "System.txt", LUMMA_SAMPLE)

    report = container.leak_processor().process_leak(
        DirectoryArchiveWrapper(logs, filename="leak.zip")
    )

    assert report.devices == ["leak"]
    assert report.system_info.success == 1


def test_read_failures_are_counted(container: AppContainer, tmp_path: Path):
    _write(tmp_path, "DEVICE/System.txt", LUMMA_SAMPLE)

    class VanishingArchive(DirectoryArchiveWrapper):
        def read_file(self, filename: str) -> bytes:
            raise KeyError(f"{filename} not found.")

    report = container.leak_processor().process_leak(VanishingArchive(tmp_path))

    assert report.devices == []
    assert report.system_info.failed == 1
    assert report.system_info.errors[0].filename == "DEVICE/System.txt"
    assert report.system_info.errors[0].error.startswith("Read failed:")
