import pytest

from stealer_normalizer.parsing.credentials import CREDENTIAL_LABELS
from stealer_normalizer.parsing.grammar import (
    canonical_section,
    clean_value,
    combine_os,
    extract_ip,
    extract_section_from_separator,
    extract_username,
    extract_value,
    ini_section,
    is_indented,
    is_separator_line,
    is_valid_ip,
    normalize_encoding,
    normalize_line,
)


def test_normalize_line_strips_item_marker():
    assert normalize_line("  - OS: Windows 10") == "OS: Windows 10"
    assert normalize_line("\t-Intel UHD") == "Intel UHD"
    assert normalize_line("OS: Windows") == "OS: Windows"


def test_is_indented():
    assert is_indented("\t- item")
    assert is_indented("    item")
    assert not is_indented(" item")
    assert not is_indented("item")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "========",
        "--------------",
        "------- Geolocation Data -------",
        "===== System =====",
        "========Daisy========",
        "====Daisy====",
        "---Hardware---",
    ],
)
def test_separator_lines(line):
    assert is_separator_line(line)


@pytest.mark.parametrize(
    "line",
    [
        "OS: Windows 10",
        "=======",
        "--- IP: 1.2.3.4 ---",
        "===",
        "Passwords: 10",
    ],
)
def test_not_separator_lines(line):
    assert not is_separator_line(line)


def test_banner_with_credential_label_is_a_field():
    assert is_separator_line("========URL: x========")
    assert not is_separator_line("========URL: x========", CREDENTIAL_LABELS)


def test_section_titles():
    assert extract_section_from_separator("----- Hardware Info -----") == "Hardware Info"
    assert extract_section_from_separator("==========") is None
    assert canonical_section("Hardware Info") == "hardware"
    assert canonical_section("Geolocation Data") == "geolocation"
    assert canonical_section("Report Contents") == "report contents"


def test_ini_section():
    assert ini_section("[Machine]") == "machine"
    assert ini_section("  [Hardware]  ") == "hardware"
    assert ini_section("Machine") is None
    assert ini_section("[01]: Intel") is None


def test_extract_value():
    assert extract_value("OS: Windows 10: Pro") == "Windows 10: Pro"
    assert extract_value("Path: C:\\Users\\a.exe") == "C:\\Users\\a.exe"
    assert extract_value("Build - 1234") == "1234"
    assert extract_value("key=value") == "value"
    assert extract_value("-abc") == "-abc"
    assert extract_value("plain value") == "plain value"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("  US ", "US"),
        ("Unknown", None),
        ("[REDACTED]", None),
        ("N/A", None),
        ("none", None),
        ("NULL", None),
        ("   ", None),
        (None, None),
        ("Windows Defender", "Windows Defender"),
    ],
)
def test_clean_value(value, expected):
    assert clean_value(value) == expected


def test_extract_ip_and_username():
    assert extract_ip("1.2.3.4/24") == "1.2.3.4"
    assert extract_ip("8.8.8.8") == "8.8.8.8"
    assert extract_ip("") is None
    assert extract_username("DOMAIN\\john") == "john"
    assert extract_username("PC/jane") == "jane"
    assert extract_username("bob") == "bob"
    assert extract_username(None) is None


def test_is_valid_ip():
    assert is_valid_ip("192.168.0.1")
    assert is_valid_ip("::1")
    assert not is_valid_ip("999.1.1.1")
    assert not is_valid_ip("Germany")
    assert not is_valid_ip(None)


def test_combine_os():
    assert (
        combine_os("Microsoft Windows 10 Pro", "10.0.19045 N/A Build 19045")
        == "Microsoft Windows 10 Pro 10.0.19045 19045"
    )
    assert combine_os("macOS", "14.2.1 (23C71)") == "macOS 14.2.1 (23C71)"
    assert combine_os(None, "11") == "11"
    assert combine_os("Windows", None) == "Windows"
    assert combine_os("W", "1") == "W"
    assert combine_os(None, None) is None


def test_normalize_encoding_bytes():
    assert normalize_encoding(b"\xef\xbb\xbfOS: Windows") == "OS: Windows"
    assert normalize_encoding("OS: Windows".encode("utf-16")) == "OS: Windows"
    assert normalize_encoding("Страна: RU".encode("utf-8")) == "Страна: RU"
    assert normalize_encoding(b"caf\xe9") == "café"


def test_normalize_encoding_text():
    assert normalize_encoding("\ufeffOS: Windows") == "OS: Windows"
    assert normalize_encoding("cafÃ©") == "café"
    assert normalize_encoding("café") == "café"
    assert normalize_encoding("Привет") == "Привет"
