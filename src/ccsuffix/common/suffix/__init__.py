from .constants import (
    CODE_RE,
    COUNTRY_REGIONS,
    COUNTRY_TO_DOMAIN_SUFFIX,
    DEFAULT_SUFFIX,
    SUFFIX_RE,
    TRIM_RE,
)
from .core import (
    is_valid_code,
    is_valid_suffix,
    normalize_code,
    validate_table,
)

__all__ = [
    # constants
    "CODE_RE",
    "SUFFIX_RE",
    "TRIM_RE",
    "DEFAULT_SUFFIX",
    "COUNTRY_TO_DOMAIN_SUFFIX",
    "COUNTRY_REGIONS",
    # core
    "normalize_code",
    "is_valid_code",
    "is_valid_suffix",
    "validate_table",
]
