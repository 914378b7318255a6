"""
ccsuffix: map two-letter country codes to a plausible domain suffix.

    >>> from ccsuffix import get_domain_suffix_for_country
    >>> get_domain_suffix_for_country("gb")
    '.co.uk'
"""

from .common.suffix import COUNTRY_TO_DOMAIN_SUFFIX, DEFAULT_SUFFIX
from .core.contracts import Region, Resolution, SuffixEntry, SuffixTableError
from .resolver import (
    DEFAULT_RESOLVER,
    CountrySuffixResolver,
    get_domain_suffix_for_country,
)

__all__ = [
    "get_domain_suffix_for_country",
    "CountrySuffixResolver",
    "DEFAULT_RESOLVER",
    "COUNTRY_TO_DOMAIN_SUFFIX",
    "DEFAULT_SUFFIX",
    "Region",
    "SuffixEntry",
    "Resolution",
    "SuffixTableError",
]

__version__ = '0.1.0'
