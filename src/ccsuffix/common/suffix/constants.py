from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final, Mapping

from ...core.contracts import Region

# Shape of a normalized country code and of a domain suffix
CODE_RE = re.compile(r"[A-Z]{2}")
SUFFIX_RE = re.compile(r"(?:\.[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)+")
# Whitespace plus U+FEFF, which str.strip() keeps
TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")

DEFAULT_SUFFIX: Final[str] = ".com"

# Grouped the same way the table has always been laid out.
_REGION_TABLES: Final[dict[Region, dict[str, str]]] = {
    Region.NORTH_AMERICA: {
        "US": ".com",
        "CA": ".ca",
    },
    Region.EUROPE: {
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
    },
    Region.ASIA_PACIFIC: {
        "AU": ".com.au",
        "NZ": ".com.au",  # shares the Australian suffix
        "IN": ".in",
        "HK": ".com.hk",
        "MY": ".com.my",
        "SG": ".com.sg",
        "PH": ".ph",
        "TW": ".com.tw",
    },
    Region.CHINA: {
        "CN": ".com.cn",
    },
}

# ISO 3166-1 alpha-2 → domain suffix; anything missing falls back to DEFAULT_SUFFIX
COUNTRY_TO_DOMAIN_SUFFIX: Final[Mapping[str, str]] = MappingProxyType(
    {
        code: suffix
        for table in _REGION_TABLES.values()
        for code, suffix in table.items()
    }
)

COUNTRY_REGIONS: Final[Mapping[str, Region]] = MappingProxyType(
    {
        code: region
        for region, table in _REGION_TABLES.items()
        for code in table
    }
)
