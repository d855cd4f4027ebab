"""Pretty diff - human-readable printing and structural diffs of Python values."""

from __future__ import annotations

from pretty_diff.api import (
    compare,
    diff,
    is_equal,
    similarity_score,
    sprint,
)
from pretty_diff.comparator import Comparator
from pretty_diff.config import COMPARE_CONFIG, DEFAULT_CONFIG, CompareConfig

__version__: str = "0.1.0"
__all__: list[str] = [
    "COMPARE_CONFIG",
    "DEFAULT_CONFIG",
    "Comparator",
    "CompareConfig",
    "compare",
    "diff",
    "is_equal",
    "similarity_score",
    "sprint",
]
