import textwrap

import pytest

from stealer_normalizer.helpers import init_logger
from stealer_normalizer.models import StealerFamily
from stealer_normalizer.parsing.signatures import SIGNATURES, SignatureDetector, is_binary


@pytest.fixture
def detector():
    return SignatureDetector(init_logger("test_signatures", "INFO"))


@pytest.mark.parametrize(
    "content,family",
    [
        ("LummaC2 build\nLID: Ab12", StealerFamily.LUMMA),
        ("Thanks for using t.me/ExelaStealer", StealerFamily.EXELA_STEALER),
        ("[General]\nBuild: recaptcha-verify", StealerFamily.ASTRIS),
        ("ProductName: macOS\nProductVersion: 14.1", StealerFamily.ATOMIC_MAC),
        (
            "OS: Windows 10\nLocal Date and Time: x\nUserName (ComputerName): a (b)",
            StealerFamily.CRYPTBOT,
        ),
        ("Predator The Thief v3.0.0", StealerFamily.PREDATOR_THE_THIEF),
        ("Build compile date: Thu Jan 1", StealerFamily.RACCOON),
        ("Build ID: LogsDiller\nIP: 1.1.1.1", StealerFamily.REDLINE_META),
        ("Install Date: x\nTraffic Name: y", StealerFamily.RHADAMANTHYS),
        ("Build: 4\nMachineID: x", StealerFamily.RISEPRO),
        ("Network Info:\nSystem Summary:", StealerFamily.STEALC),
        ("[IP]\n[Machine]", StealerFamily.STEALERIUM),
        ("IP: 1\nVersion: 2\ninformation.txt", StealerFamily.VIDAR),
        ("Operation ID: 77", StealerFamily.XFILES),
        (
            "PC Type: Microsoft Windows\nAllowed Extensions: txt",
            StealerFamily.AILUROPHILE,
        ),
        ("UserInformation.txt", StealerFamily.ARECH_CLIENT_V2),
        ("HWID: x\nLog Date: y\nBuild Name: z", StealerFamily.BANSHEE),
        ("PC Name: x\nWindows Server 2019", StealerFamily.DARKCRYSTAL_RAT),
        (
            "userinfo.txt\nCountry Code: US\nExecute Path: C:\\a.exe",
            StealerFamily.MEDUZA,
        ),
        ("identification.txt\nUptime: 1\nScreenResolution: 1x1", StealerFamily.NOXTY),
        ("Geolocation Data\nHardware Info", StealerFamily.PHEMEDRONE),
        ("Operating System : Win\nPC User : a/b", StealerFamily.RL_STEALER),
        ("Operation System: win10\nCurrent JarFile Path: /x", StealerFamily.SKALKA),
        (
            "Host Name: PC\nOS Name: Microsoft Windows 10\nOS Version: 10.0",
            StealerFamily.EXELA_STEALER,
        ),
        (
            "Host Name: PC\nSystem Manufacturer: Dell\nTotal Physical Memory: 8 GB",
            StealerFamily.BLANK_GRABBER,
        ),
        ("Hello: world", StealerFamily.GENERIC),
        ("", StealerFamily.GENERIC),
    ],
)
def test_detect_family(detector, content, family):
    assert detector.detect(content) == family


def test_first_matching_fingerprint_wins(detector):
    sample = textwrap.dedent(
        """
        LID: Ab12
        Build ID: abc
        Network Info:
        System Summary:
        """
    )
    assert detector.detect(sample) == StealerFamily.LUMMA


def test_detect_from_filename(detector):
    assert detector.detect("Hello: world", "DEVICE/_Information.txt") == StealerFamily.CRYPTBOT


def test_detect_is_case_insensitive(detector):
    assert detector.detect("NETWORK INFO:\nsystem summary:") == StealerFamily.STEALC


def test_binary_content_is_generic(detector):
    assert detector.detect("LID: Ab12\0\0") == StealerFamily.GENERIC
    assert detector.detect("\x01\x02\x03\x04\x05 LID: x" + "\x06" * 40) == StealerFamily.GENERIC


def test_is_binary():
    assert is_binary("a\0b")
    assert not is_binary("")
    assert not is_binary("OS: Windows\r\n\tIP: 1.1.1.1")
    assert is_binary("\x01" * 3 + "ab", printable_ratio=0.5)
    assert not is_binary("\x01" + "abcd", printable_ratio=0.5)


def test_every_family_has_a_fingerprint():
    fingerprinted = {signature.family for signature in SIGNATURES}
    assert fingerprinted == set(StealerFamily) - {StealerFamily.GENERIC}
