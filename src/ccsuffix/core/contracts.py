from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Region(str, Enum):
    NORTH_AMERICA = "north_america"
    EUROPE = "europe"
    ASIA_PACIFIC = "asia_pacific"
    CHINA = "china"


@dataclass(frozen=True)
class SuffixEntry:
    code: str
    suffix: str
    region: Optional[Region] = None


@dataclass(frozen=True)
class Resolution:
    raw: str
    code: str  # normalized
    suffix: str
    matched: bool  # False when the fallback was used


class SuffixTableError(ValueError):
    """Raised when a code → suffix table breaks the table invariants."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems: List[str] = list(problems or [])

