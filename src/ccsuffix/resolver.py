from __future__ import annotations

from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from .common.suffix import (
    COUNTRY_REGIONS,
    COUNTRY_TO_DOMAIN_SUFFIX,
    DEFAULT_SUFFIX,
    is_valid_suffix,
    normalize_code,
    validate_table,
)
from .core.contracts import Region, Resolution, SuffixEntry, SuffixTableError


def _normalized_copy(table: Mapping[Any, Any]) -> dict[Any, Any]:
    # Non-string keys are kept as-is so validate_table can report them.
    out: dict[Any, Any] = {}
    sources: dict[Any, list[Any]] = {}
    for code, suffix in table.items():
        key = normalize_code(code) if isinstance(code, str) else code
        sources.setdefault(key, []).append(code)
        out[key] = suffix
    problems = [
        f"duplicate code {key!r} (from {', '.join(repr(c) for c in raw)})"
        for key, raw in sources.items()
        if len(raw) > 1
    ]
    if problems:
        raise SuffixTableError(
            f"duplicate country codes ({len(problems)} problem(s))", problems
        )
    return out


class CountrySuffixResolver:
    """
    Maps a country code to a domain suffix.

    The table is fixed at construction and exposed read-only. Lookups trim
    and uppercase the code first; unknown codes get the fallback suffix.
    """

    def __init__(
        self,
        table: Optional[Mapping[str, str]] = None,
        *,
        default: str = DEFAULT_SUFFIX,
    ) -> None:
        if table is None:
            self._table: Mapping[str, str] = COUNTRY_TO_DOMAIN_SUFFIX
        else:
            data = _normalized_copy(table)
            problems = validate_table(data)
            if problems:
                raise SuffixTableError(
                    f"invalid suffix table ({len(problems)} problem(s))",
                    problems,
                )
            self._table = MappingProxyType(data)
        if not is_valid_suffix(default):
            raise SuffixTableError(
                f"invalid fallback suffix {default!r}", [f"default={default!r}"]
            )
        self._default = default

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    @property
    def default(self) -> str:
        return self._default

    def resolve(self, country_code: str) -> str:
        return self._table.get(normalize_code(country_code), self._default)

    def explain(self, country_code: str) -> Resolution:
        code = normalize_code(country_code)
        suffix = self._table.get(code)
        return Resolution(
            raw=country_code,
            code=code,
            suffix=suffix if suffix is not None else self._default,
            matched=suffix is not None,
        )

    def extend(self, extra: Mapping[str, str]) -> "CountrySuffixResolver":
        """Return a new resolver with ``extra`` layered over this table."""
        merged = dict(self._table)
        merged.update(_normalized_copy(extra))
        return CountrySuffixResolver(merged, default=self._default)

    def entries(self, region: Optional[Region] = None) -> List[SuffixEntry]:
        out = [
            SuffixEntry(code=c, suffix=s, region=COUNTRY_REGIONS.get(c))
            for c, s in sorted(self._table.items())
        ]
        if region is not None:
            out = [e for e in out if e.region == region]
        return out

    def __contains__(self, country_code: object) -> bool:
        return normalize_code(country_code) in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return (
            f"CountrySuffixResolver(entries={len(self._table)}, "
            f"default={self._default!r})"
        )


DEFAULT_RESOLVER = CountrySuffixResolver()


def get_domain_suffix_for_country(country_code: str) -> str:
    """
    Domain suffix for a two-letter country code (case-insensitive), e.g.

      get_domain_suffix_for_country("US") -> ".com"
      get_domain_suffix_for_country("gb") -> ".co.uk"
      get_domain_suffix_for_country("ZZ") -> ".com"  (fallback)
    """
    return DEFAULT_RESOLVER.resolve(country_code)
