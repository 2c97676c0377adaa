"""Stealer family detection from text fingerprints."""
from __future__ import annotations

from typing import Callable, NamedTuple

from verboselogs import VerboseLogger

from stealer_normalizer.models import StealerFamily

DEFAULT_PRINTABLE_RATIO = 0.8


class Haystack(NamedTuple):
    """Lower-cased file content and name the fingerprints are looked up in."""

    content: str
    filename: str

    def has(self, *phrases: str) -> bool:
        """Tell whether the content contains every phrase."""
        return all(phrase in self.content for phrase in phrases)


class Signature(NamedTuple):
    """A family and the fingerprint identifying it."""

    family: StealerFamily
    test: Callable[[Haystack], bool]


# Fingerprints overlap, the most specific ones come first. Order matters.
SIGNATURES: tuple[Signature, ...] = (
    Signature(StealerFamily.LUMMA, lambda h: h.has("lummac2") or h.has("lid:")),
    Signature(StealerFamily.EXELA_STEALER, lambda h: h.has("t.me/exelastealer")),
    Signature(
        StealerFamily.ASTRIS,
        lambda h: h.has("[general]", "build: recaptcha-verify"),
    ),
    Signature(StealerFamily.ATOMIC_MAC, lambda h: h.has("productname:", "macos")),
    Signature(
        StealerFamily.CRYPTBOT,
        lambda h: "_information.txt" in h.filename
        or h.has("os:", "local date and time:", "username (computername):"),
    ),
    Signature(
        StealerFamily.PREDATOR_THE_THIEF,
        lambda h: h.has("predator the thief")
        or h.has("predatorthethief")
        or h.has("predator", "v3.0.0 release"),
    ),
    Signature(
        StealerFamily.RACCOON,
        lambda h: h.has("build compile date")
        or h.has("bot_id:")
        or h.has("user id:", "last seen:"),
    ),
    Signature(
        StealerFamily.REDLINE_META,
        lambda h: h.has("build id:")
        or h.has("userinformation.txt", "machinename:", "hardwares:"),
    ),
    Signature(StealerFamily.RHADAMANTHYS, lambda h: h.has("install date:", "traffic name:")),
    Signature(
        StealerFamily.RISEPRO,
        lambda h: h.has("build:", "machineid:")
        or h.has("information.txt", "location:", "[hardware]"),
    ),
    Signature(StealerFamily.STEALC, lambda h: h.has("network info:", "system summary:")),
    Signature(StealerFamily.STEALERIUM, lambda h: h.has("[ip]", "[machine]")),
    Signature(
        StealerFamily.VIDAR,
        lambda h: h.has("ip:", "version:", "information.txt")
        or h.has("information.txt", "[hardware]", "videocard:"),
    ),
    Signature(StealerFamily.XFILES, lambda h: h.has("operation id:")),
    Signature(
        StealerFamily.AILUROPHILE,
        lambda h: h.has("pc type: microsoft windows", "allowed extensions:"),
    ),
    Signature(
        StealerFamily.ARECH_CLIENT_V2,
        lambda h: h.has("userinformation.txt")
        or h.has("filelocation:", "current language:", "hardwares:"),
    ),
    Signature(
        StealerFamily.BANSHEE,
        lambda h: h.has("hwid:", "log date:", "build name:")
        or h.has("system_information.txt", "operation system:", "macos"),
    ),
    Signature(StealerFamily.DARKCRYSTAL_RAT, lambda h: h.has("pc name:", "windows server")),
    Signature(
        StealerFamily.MEDUZA,
        lambda h: h.has("hwid:", "build name:", "userinfo.txt")
        or h.has("userinfo.txt", "country code:", "execute path:"),
    ),
    Signature(
        StealerFamily.NOXTY,
        lambda h: h.has("user:", "operating system:", "identification.txt")
        or h.has("identification.txt", "uptime:", "screenresolution:"),
    ),
    Signature(StealerFamily.PHEMEDRONE, lambda h: h.has("geolocation data", "hardware info")),
    Signature(StealerFamily.RL_STEALER, lambda h: h.has("operating system :", "pc user :")),
    Signature(
        StealerFamily.SKALKA,
        lambda h: h.has("operation system:", "current jarfile path:"),
    ),
    # Plain systeminfo output, told apart by the fields each one keeps.
    Signature(
        StealerFamily.EXELA_STEALER,
        lambda h: h.has("host name:", "os name:", "os version:"),
    ),
    Signature(
        StealerFamily.BLANK_GRABBER,
        lambda h: h.has("host name:", "system manufacturer:", "total physical memory:"),
    ),
)


def is_binary(content: str, printable_ratio: float = DEFAULT_PRINTABLE_RATIO) -> bool:
    """Tell whether decoded content is most likely binary data.

    Content holding a NUL character, or whose share of printable ASCII characters
    (plus tabs and line breaks) is below ``printable_ratio``, is binary.
    """
    if "\0" in content:
        return True

    if not content:
        return False

    printable = sum(1 for char in content if " " <= char <= "~" or char in "\t\r\n")
    return printable / len(content) < printable_ratio


class SignatureDetector:
    """Classify a system information file into a stealer family.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    printable_ratio : float, optional
        The share of printable characters under which content is binary.

    """

    def __init__(
        self,
        logger: VerboseLogger,
        printable_ratio: float = DEFAULT_PRINTABLE_RATIO,
    ) -> None:
        self.logger = logger
        self.printable_ratio = printable_ratio

    def detect(self, content: str, filename: str = "") -> StealerFamily:
        """Return the family of the first matching fingerprint.

        Parameters
        ----------
        content : str
            The decoded file content.
        filename : str, optional
            The file's name or path.

        Returns
        -------
        StealerFamily
            The detected family, Generic for binary content or if none matched.

        """
        if is_binary(content, self.printable_ratio):
            self.logger.debug(f"Binary content in '{filename}', using Generic.")
            return StealerFamily.GENERIC

        haystack = Haystack(content.lower(), filename.lower())

        for signature in SIGNATURES:
            if signature.test(haystack):
                return signature.family

        return StealerFamily.GENERIC
