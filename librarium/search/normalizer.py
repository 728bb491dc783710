"""
Query normalization for the type-ahead search box.
"""

from typing import Optional


def normalize_query(raw: Optional[str]) -> str:
    """
    Turn raw input into the canonical query used for cache keys and comparisons.

    Only surrounding whitespace is removed. Case is preserved, so "Dune" and
    "dune" are distinct cache entries even though the local scan treats them
    alike. Whitespace-only input normalizes to "".
    """
    if raw is None:
        return ""
    return raw.strip()
