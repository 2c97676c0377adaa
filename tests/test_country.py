import pytest

from stealer_normalizer.parsing.country import (
    CountryNormalizer,
    is_country_code,
    normalize_country_to_code,
)


@pytest.mark.parametrize(
    "country,expected",
    [
        ("US", "US"),
        ("Russia (RU)", "RU"),
        ("EG, Cairo", "EG"),
        ("ru_RU", "RU"),
        ("Germany", "DE"),
        ("United States", "US"),
        ("usa", "US"),
        ("UK", "GB"),
        ("Russia", "RU"),
        ("  France ", "FR"),
    ],
)
def test_normalize_country_to_code(country, expected):
    assert normalize_country_to_code(country) == expected


@pytest.mark.parametrize("country", [None, "", "   ", "Narnia"])
def test_unknown_countries(country):
    assert normalize_country_to_code(country) is None


def test_is_country_code():
    assert is_country_code("de")
    assert not is_country_code("UK")
    assert not is_country_code("XX")


def test_code_or_original():
    normalizer = CountryNormalizer()
    assert normalizer("Netherlands (NL)") == "NL"
    assert normalizer.code_or_original("Netherlands") == "NL"
    assert normalizer.code_or_original("Narnia") == "Narnia"
    assert normalizer.code_or_original(None) is None
