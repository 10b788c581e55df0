"""
Core Utilities

Features:
- String utilities shared by the row normalizer and the aggregators
"""

from __future__ import annotations

from typing import Optional

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def safe_lower(s: Optional[str]) -> str:
    """Trimmed, lower-cased text; ``None`` becomes ``""``."""
    return "" if s is None else s.strip().lower()


# endregion Common functions
