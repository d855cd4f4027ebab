"""Public API functions for pretty-diff.

This module provides the user-facing functions: sprint, diff, compare,
similarity_score and is_equal.  Each call creates a fresh Comparator to
guarantee zero global state mutation between calls.  Every function has a
configuration-bound twin on CompareConfig (``cfg.diff(a, b)`` and so on).
"""

from __future__ import annotations

from typing import Any

from pretty_diff.comparator import Comparator
from pretty_diff.config import COMPARE_CONFIG, DEFAULT_CONFIG, CompareConfig

__all__ = ["compare", "diff", "is_equal", "similarity_score", "sprint"]


def sprint(value: Any, config: CompareConfig | None = None) -> str:
    """Return the canonical text of ``value``.

    Args:
        value:  Any Python value.
        config: Printing options. Defaults to ``DEFAULT_CONFIG`` (aligned
                multi-line style).

    Returns:
        The rendered text, without a trailing newline.
    """
    return Comparator(config if config is not None else DEFAULT_CONFIG).format(value)


def compare(
    a: Any,
    b: Any,
    config: CompareConfig | None = None,
) -> tuple[str, float]:
    """Compare two values and return their diff text and similarity score.

    Args:
        a:      The old value (``-`` lines), typically what the code produced.
        b:      The new value (``+`` lines), typically what the test expects.
        config: Comparison options. Defaults to ``COMPARE_CONFIG`` when None.

    Returns:
        ``(text, score)`` where ``text`` is ``""`` when the values are
        equivalent and ``score`` is in [0.0, 1.0].
    """
    return Comparator(config if config is not None else COMPARE_CONFIG).compare(a, b)


def diff(a: Any, b: Any, config: CompareConfig | None = None) -> str:
    """Return the line diff between ``a`` and ``b``; empty when they match."""
    return compare(a, b, config=config)[0]


def similarity_score(a: Any, b: Any, config: CompareConfig | None = None) -> float:
    """Return the fraction of leaves of ``a`` and ``b`` that compare equal.

    Returns:
        A float in [0.0, 1.0]. 1.0 means identical; 0.0 means no equal leaf.
    """
    return compare(a, b, config=config)[1]


def is_equal(a: Any, b: Any, config: CompareConfig | None = None) -> bool:
    """Return True if ``a`` and ``b`` produce an empty diff under ``config``."""
    return not diff(a, b, config=config)
