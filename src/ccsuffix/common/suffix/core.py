from __future__ import annotations

from typing import Any, Mapping

from .constants import CODE_RE, SUFFIX_RE, TRIM_RE


def normalize_code(code: Any) -> str:
    """
    Trim surrounding whitespace (BOMs included), then uppercase. Anything
    that is not a string normalizes to "" so lookups never fail.
    """
    if not isinstance(code, str):
        return ""
    return TRIM_RE.sub("", code).upper()


def is_valid_code(code: Any) -> bool:
    return isinstance(code, str) and CODE_RE.fullmatch(code) is not None


def is_valid_suffix(suffix: Any) -> bool:
    return isinstance(suffix, str) and SUFFIX_RE.fullmatch(suffix) is not None


def validate_table(table: Mapping[Any, Any]) -> list[str]:
    """
    Check a code → suffix mapping against the table invariants.
    Returns a list of problems; empty means the table is sound.
    """
    problems: list[str] = []
    for code, suffix in table.items():
        if not is_valid_code(code):
            problems.append(
                f"bad country code {code!r}: expected two uppercase ASCII letters"
            )
        if not is_valid_suffix(suffix):
            problems.append(
                f"bad suffix {suffix!r} for {code!r}: expected e.g. '.de' or '.co.uk'"
            )
    return problems
