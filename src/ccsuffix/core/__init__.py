"""
Core exports for ccsuffix.
"""

from .contracts import Region, Resolution, SuffixEntry, SuffixTableError

__all__ = [
    "Region",
    "SuffixEntry",
    "Resolution",
    "SuffixTableError",
]
