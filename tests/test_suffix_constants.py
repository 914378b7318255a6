import pytest

from ccsuffix.common.suffix.constants import (
    COUNTRY_REGIONS,
    COUNTRY_TO_DOMAIN_SUFFIX,
    DEFAULT_SUFFIX,
)
from ccsuffix.core.contracts import Region

EXPECTED = {
    "US": ".com",
    "CA": ".ca",
    "GB": ".co.uk",
    "IE": ".ie",
    "AT": ".at",
    "BE": ".be",
    "FR": ".fr",
    "DE": ".de",
    "IT": ".it",
    "NL": ".nl",
    "ES": ".es",
    "CH": ".ch",
    "SE": ".se",
    "PL": ".pl",
    "RU": ".ru",
    "AU": ".com.au",
    "NZ": ".com.au",
    "IN": ".in",
    "HK": ".com.hk",
    "MY": ".com.my",
    "SG": ".com.sg",
    "PH": ".ph",
    "TW": ".com.tw",
    "CN": ".com.cn",
}


def test_table_contents_exact():
    assert dict(COUNTRY_TO_DOMAIN_SUFFIX) == EXPECTED


def test_default_suffix():
    assert DEFAULT_SUFFIX == ".com"


def test_keys_are_two_uppercase_ascii_letters():
    for code in COUNTRY_TO_DOMAIN_SUFFIX:
        assert len(code) == 2
        assert code.isascii() and code.isalpha() and code.isupper()


def test_values_start_with_dot():
    for suffix in COUNTRY_TO_DOMAIN_SUFFIX.values():
        assert suffix.startswith(".")
        assert len(suffix) > 1


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COUNTRY_TO_DOMAIN_SUFFIX["JP"] = ".co.jp"  # type: ignore[index]


def test_regions_cover_every_code_once():
    assert set(COUNTRY_REGIONS) == set(COUNTRY_TO_DOMAIN_SUFFIX)
    assert COUNTRY_REGIONS["US"] is Region.NORTH_AMERICA
    assert COUNTRY_REGIONS["GB"] is Region.EUROPE
    assert COUNTRY_REGIONS["NZ"] is Region.ASIA_PACIFIC
    assert COUNTRY_REGIONS["CN"] is Region.CHINA
