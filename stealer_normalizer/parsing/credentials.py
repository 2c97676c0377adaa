"""Browser password dump parsing.

A dump is a sequence of blocks such as::

    URL: https://example.com/login
    Username: john
    Password: hunter2
    ===============

Blocks are delimited by separator lines, or implicitly by a new URL line once the
current block already has one.
"""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from stealer_normalizer.models import Credential, UrlInfo

from .escaping import escape_password
from .grammar import is_separator_line, normalize_line

URL_LABELS: tuple[str, ...] = ("url", "host", "hostname")
USERNAME_LABELS: tuple[str, ...] = ("username", "user", "login")
PASSWORD_LABELS: tuple[str, ...] = ("password", "pass")
BROWSER_LABELS: tuple[str, ...] = ("browser", "soft", "application")

# Labels which, found in a branded divider line, make it a field line.
CREDENTIAL_LABELS: tuple[str, ...] = tuple(
    f"{label}:"
    for label in URL_LABELS + USERNAME_LABELS + PASSWORD_LABELS + BROWSER_LABELS
)


def _label_pattern(labels: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(rf"^(?:{'|'.join(labels)})\s*:", re.I)


_URL = _label_pattern(URL_LABELS)
_USERNAME = _label_pattern(USERNAME_LABELS)
_PASSWORD = _label_pattern(PASSWORD_LABELS)
_BROWSER = _label_pattern(BROWSER_LABELS)

_SCHEME = re.compile(r"^https?://", re.I)
_WWW = re.compile(r"^www\.", re.I)
_IPV4 = re.compile(r"^(?:\d{1,3}\.){3}\d{1,3}$")


class ScanState(Enum):
    """Whether the extractor is between blocks or inside one."""

    SCANNING = "scanning"
    ACCUMULATING = "accumulating"


@dataclass
class CredentialBlock:
    """The fields read so far from the current block."""

    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    browser: Optional[str] = None

    def is_valid(self) -> bool:
        """A URL, a username and a password, possibly empty, are required."""
        return bool(self.url) and self.username is not None and self.password is not None


@dataclass
class PasswordFileStats:
    """Summary of a password dump.

    Attributes
    ----------
    credential_count : int
        Number of non-empty passwords which can be escaped for storage.
    domain_count : int
        Number of URLs whose host is not an IP address.
    url_count : int
        Number of non-empty URLs.
    password_counts : collections.Counter
        Occurrences of every password.
    credentials : list of Credential
        The extracted credentials.

    """

    credential_count: int = 0
    domain_count: int = 0
    url_count: int = 0
    password_counts: Counter = field(default_factory=Counter)
    credentials: list[Credential] = field(default_factory=list)


def _host(url: str) -> str:
    host = _WWW.sub("", _SCHEME.sub("", url.strip()))
    return host.split("/", 1)[0].split(":", 1)[0].lower()


def is_ip_url(url: str) -> bool:
    """Tell whether a URL's host is an IPv4 address."""
    return bool(_IPV4.match(_host(url)))


def extract_url_info(url: str | None) -> UrlInfo:
    """Derive the registrable domain and the TLD of a URL.

    Examples
    --------
    >>> extract_url_info("https://v1.api.example.com:8080/path")
    UrlInfo(domain='example.com', tld='com')
    >>> extract_url_info("http://10.0.0.5/x")
    UrlInfo(domain='10.0.0.5', tld=None)

    """
    if not url or not url.strip():
        return UrlInfo(None, None)

    host = _host(url)

    if _IPV4.match(host):
        return UrlInfo(host, None)

    labels = host.split(".")

    if len(labels) >= 2:
        return UrlInfo(".".join(labels[-2:]), labels[-1])

    return UrlInfo(host, None)


def _value(line: str) -> str:
    """Return what follows the first colon."""
    return line.split(":", 1)[1].strip()


def is_escapable(password: str) -> bool:
    """Tell whether a password survives escaping and UTF-8 encoding."""
    try:
        escape_password(password).encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class CredentialExtractor:
    """Split browser password dumps into credential records."""

    def extract(self, content: str, filepath: str | None = None) -> list[Credential]:
        """Extract every valid credential block.

        Parameters
        ----------
        content : str
            The dump's content.
        filepath : str, optional
            The dump's path, kept on every record.

        Returns
        -------
        list of Credential
            The credentials, in file order. Incomplete blocks are dropped.

        """
        credentials: list[Credential] = []
        block = CredentialBlock()
        state = ScanState.SCANNING

        def flush() -> None:
            nonlocal block, state
            if block.is_valid():
                credentials.append(self._to_credential(block, filepath))
            block = CredentialBlock()
            state = ScanState.SCANNING

        for raw_line in content.splitlines():
            if is_separator_line(raw_line, CREDENTIAL_LABELS):
                flush()
                continue

            line = normalize_line(raw_line)

            if _URL.match(line):
                if block.url:
                    flush()
                block.url = _value(line)
            elif _USERNAME.match(line):
                block.username = _value(line)
            elif _PASSWORD.match(line):
                block.password = _value(line)
            elif _BROWSER.match(line):
                block.browser = _value(line)
            else:
                continue

            state = ScanState.ACCUMULATING

        if state is ScanState.ACCUMULATING:
            flush()

        return credentials

    def analyze(self, content: str, filepath: str | None = None) -> PasswordFileStats:
        """Count the passwords and URLs of a dump and extract its credentials."""
        stats = PasswordFileStats()

        if not content or not content.strip():
            return stats

        for raw_line in content.splitlines():
            line = normalize_line(raw_line)

            if _PASSWORD.match(line):
                password = _value(line)
                if password and is_escapable(password):
                    stats.credential_count += 1
                    stats.password_counts[password] += 1

            elif _URL.match(line):
                url = _value(line)
                if url:
                    stats.url_count += 1
                    if not is_ip_url(url):
                        stats.domain_count += 1

        stats.credentials = self.extract(content, filepath)

        return stats

    @staticmethod
    def _to_credential(block: CredentialBlock, filepath: str | None) -> Credential:
        info = extract_url_info(block.url)
        return Credential(
            url=block.url,
            username=block.username,
            password=block.password,
            browser=block.browser or None,
            domain=info.domain,
            tld=info.tld,
            filepath=filepath,
        )
