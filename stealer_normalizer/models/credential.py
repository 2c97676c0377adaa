"""Data model to define credentials found in password dumps."""
from dataclasses import dataclass
from typing import NamedTuple


class UrlInfo(NamedTuple):
    """Registrable domain and top-level domain of a credential's URL."""

    domain: str | None
    tld: str | None


@dataclass
class Credential:
    """Class defining a stored credential.

    Attributes
    ----------
    url : str
        The website or host the credential is used for.
    username : str
        The login. May be an empty string.
    password : str
        The password. May be an empty string.
    browser : str, optional
        The software the credential was stolen from.
    domain : str, optional
        The domain derived from the URL.
    tld : str, optional
        The top-level domain derived from the URL.
    filepath : str, optional
        The dump file the credential was found in.

    """

    url: str
    username: str
    password: str
    browser: str | None = None
    domain: str | None = None
    tld: str | None = None
    filepath: str | None = None
