"""Free-text country to ISO 3166-1 alpha-2 code normalization."""
from __future__ import annotations

import re

import pycountry

# Names, abbreviations and misspellings seen in logs which pycountry can't resolve.
COUNTRY_VARIATIONS: dict[str, str] = {
    "usa": "US",
    "u.s.a": "US",
    "u.s.a.": "US",
    "united states of america": "US",
    "america": "US",
    "uk": "GB",
    "u.k.": "GB",
    "great britain": "GB",
    "britain": "GB",
    "england": "GB",
    "scotland": "GB",
    "wales": "GB",
    "northern ireland": "GB",
    "uae": "AE",
    "u.a.e": "AE",
    "arab emirate": "AE",
    "arab emirates": "AE",
    "dubai": "AE",
    "abu dhabi": "AE",
    "russia": "RU",
    "russian": "RU",
    "rossiya": "RU",
    "peoples republic of china": "CN",
    "prc": "CN",
    "p.r.c.": "CN",
    "south korea": "KR",
    "korea (south)": "KR",
    "republic of korea": "KR",
    "rok": "KR",
    "north korea": "KP",
    "korea (north)": "KP",
    "dprk": "KP",
    "deutschland": "DE",
    "germani": "DE",
    "gemany": "DE",
    "holland": "NL",
    "netherland": "NL",
    "netherlands": "NL",
    "nederland": "NL",
    "ksa": "SA",
    "saudi": "SA",
    "rsa": "ZA",
    "s. africa": "ZA",
    "brasil": "BR",
    "burma": "MM",
    "cote divoire": "CI",
    "ivory coast": "CI",
    "espana": "ES",
    "espanha": "ES",
    "frace": "FR",
    "hellas": "GR",
    "italia": "IT",
    "japon": "JP",
    "magyarország": "HU",
    "norge": "NO",
    "österreich": "AT",
    "polska": "PL",
    "portugual": "PT",
    "suomi": "FI",
    "sverige": "SE",
    "schweiz": "CH",
    "suisse": "CH",
    "svizzera": "CH",
    "switz": "CH",
    "turkey": "TR",
    "turkiye": "TR",
    "zaire": "CD",
    "iran": "IR",
    "syria": "SY",
    "laos": "LA",
    "vietnam": "VN",
    "bolivia": "BO",
    "brunei": "BN",
    "falkland islands": "FK",
    "macedonia": "MK",
    "micronesia": "FM",
    "moldova": "MD",
    "palestine": "PS",
    "taiwan": "TW",
    "roc": "TW",
    "tanzania": "TZ",
    "venezuela": "VE",
    "vatican": "VA",
    "afganistan": "AF",
    "columbia": "CO",
    "indonesi": "ID",
    "indo": "ID",
    "isreal": "IL",
    "malasia": "MY",
    "pakis": "PK",
    "philipines": "PH",
    "philippine": "PH",
    "phillipines": "PH",
    "singapre": "SG",
    "slovak": "SK",
    "thai": "TH",
    "ukranie": "UA",
}

_CODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^([A-Z]{2})$"),
    re.compile(r"\(([A-Z]{2})\)"),
    re.compile(r"^([A-Z]{2})[,/\s]"),
    re.compile(r"_([A-Z]{2})$"),
)


def is_country_code(code: str) -> bool:
    """Tell whether a string is an assigned ISO 3166-1 alpha-2 code."""
    return pycountry.countries.get(alpha_2=code.upper()) is not None


def normalize_country_to_code(country: str | None) -> str | None:
    """Map a free-text country to its alpha-2 code.

    Handles bare codes (``US``), codes embedded in parentheses
    (``Russia (RU)``), leading codes (``EG, Cairo``), locales (``ru_RU``), and
    English or common country names.

    Parameters
    ----------
    country : str, optional
        The country as written in the log.

    Returns
    -------
    str or None
        The upper-case alpha-2 code, or None if the country is unknown.

    """
    if not country or not country.strip():
        return None

    trimmed = country.strip()

    for pattern in _CODE_PATTERNS:
        match = pattern.search(trimmed)
        if match and is_country_code(match.group(1)):
            return match.group(1)

    lowered = trimmed.lower()

    if lowered in COUNTRY_VARIATIONS:
        return COUNTRY_VARIATIONS[lowered]

    try:
        return pycountry.countries.lookup(trimmed).alpha_2
    except LookupError:
        return None


class CountryNormalizer:
    """Callable wrapper so the lookup can be swapped through the container."""

    def __call__(self, country: str | None) -> str | None:
        return normalize_country_to_code(country)

    def code_or_original(self, country: str | None) -> str | None:
        """Return the alpha-2 code, or the country unchanged if it can't be mapped."""
        if not country:
            return country
        return self(country) or country
