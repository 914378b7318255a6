"""
Global configuration for ccsuffix.
Only runtime knobs live here (override file location). The built-in table
itself is in common/suffix/constants.py and is not configurable.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Final, Optional, Union

from dotenv import load_dotenv

from .core.contracts import SuffixTableError
from .resolver import DEFAULT_RESOLVER, CountrySuffixResolver

load_dotenv()


def get_env(
    name: str, *, required: bool = False, default: Optional[str] = None
) -> Optional[str]:
    """Small helper to fetch env vars with an optional 'required' flag."""
    val = os.getenv(name, default)
    if required and not val:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return val


# -----------------------------------------------------------------------------
# Overrides
# -----------------------------------------------------------------------------
# Optional JSON object of extra entries, e.g. {"NZ": ".co.nz", "JP": ".co.jp"}
OVERRIDES_PATH: Final[str] = get_env("CCSUFFIX_OVERRIDES", default="") or ""


def load_overrides(path: Union[str, Path]) -> dict[str, str]:
    """
    Read a JSON object of code → suffix entries. Entries are validated when
    they are layered onto a resolver, not here.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SuffixTableError(
            f"override file {p} is not valid UTF-8 JSON", [str(e)]
        ) from e
    if not isinstance(data, dict):
        raise SuffixTableError(
            f"override file {p} must hold a JSON object",
            [f"got {type(data).__name__}"],
        )
    return data


def resolver_from_env(
    path: Optional[Union[str, Path]] = None,
) -> CountrySuffixResolver:
    """Built-in resolver, extended with the override file when one is set."""
    src = path or OVERRIDES_PATH
    if not src:
        return DEFAULT_RESOLVER
    return DEFAULT_RESOLVER.extend(load_overrides(src))


# -----------------------------------------------------------------------------
# Public exports
# -----------------------------------------------------------------------------
__all__ = [
    "OVERRIDES_PATH",
    "get_env",
    "load_overrides",
    "resolver_from_env",
]
