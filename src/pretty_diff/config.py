"""CompareConfig and the two stock configurations.

CompareConfig is a frozen (immutable) dataclass holding every option that
influences normalization, formatting, comparison and scoring.  Instances are
safe to share between threads.  To derive a variant, copy it with
``dataclasses.replace`` rather than mutating a shared instance::

    from dataclasses import replace
    from pretty_diff import COMPARE_CONFIG

    cfg = replace(COMPARE_CONFIG, skip_zero_fields=True)
    text, score = cfg.compare(got, want)
"""

from __future__ import annotations

import datetime
import decimal
import pathlib
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pretty_diff.money import DecimalMoneyParser
from pretty_diff.protocols import MoneyParser

__all__ = ["COMPARE_CONFIG", "DEFAULT_CONFIG", "DEFAULT_FORMATTERS", "CompareConfig"]

DEFAULT_FORMATTERS: Mapping[type, Callable[[Any], str]] = MappingProxyType(
    {
        datetime.datetime: str,
        datetime.date: str,
        datetime.time: str,
        datetime.timedelta: str,
        decimal.Decimal: str,
        uuid.UUID: str,
        pathlib.PurePath: str,
    }
)


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for printing and comparing values.

    Attributes:
        compact: Render everything on one line (``{a:1,b:[2]}``).
        compact_threshold: In the default style, containers whose compact
            rendering is at most this many characters are printed compact.
            0 disables the collapse.
        diffable: Render one element per line with trailing delimiters.
            Diffs are always rendered in this style.
        include_private: Include attributes whose names start with ``_``.
        print_stringers: Replace values whose class defines ``__str__`` by
            their quoted string form instead of expanding them.
        skip_zero_fields: Omit record fields holding a zero value.
        ignore_money_format_differences: Treat two strings as equal when
            ``money_parser`` reads the same amount from both.
        formatters: Per-type renderers (looked up along the MRO); the
            returned text is printed verbatim.
        money_parser: Predicate/parser used for money equivalence.
        partial_credit: Score credit in [0, 1] for a leaf that differs.
    """

    compact: bool = False
    compact_threshold: int = 0
    diffable: bool = False
    include_private: bool = False
    print_stringers: bool = False
    skip_zero_fields: bool = False
    ignore_money_format_differences: bool = False
    formatters: Mapping[type, Callable[[Any], str]] = field(
        default_factory=dict, hash=False
    )
    money_parser: MoneyParser = field(default_factory=DecimalMoneyParser)
    partial_credit: float = 0.0

    def __post_init__(self) -> None:
        if self.compact and self.diffable:
            msg = "compact and diffable are mutually exclusive"
            raise ValueError(msg)
        if self.compact_threshold < 0:
            msg = f"compact_threshold must be >= 0, got {self.compact_threshold}"
            raise ValueError(msg)
        if not 0.0 <= self.partial_credit <= 1.0:
            msg = f"partial_credit must be in [0, 1], got {self.partial_credit}"
            raise ValueError(msg)
        if not callable(self.money_parser):
            msg = f"money_parser must be callable, got {self.money_parser!r}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Configuration-bound entry points
    # ------------------------------------------------------------------

    def sprint(self, value: Any) -> str:
        """Return the canonical text of ``value`` under this configuration."""
        from pretty_diff.comparator import Comparator

        return Comparator(self).format(value)

    def diff(self, a: Any, b: Any) -> str:
        """Return the line diff between ``a`` and ``b``; empty when they match."""
        from pretty_diff.comparator import Comparator

        return Comparator(self).compare(a, b)[0]

    def compare(self, a: Any, b: Any) -> tuple[str, float]:
        """Return ``(diff_text, similarity_score)`` for ``a`` and ``b``."""
        from pretty_diff.comparator import Comparator

        return Comparator(self).compare(a, b)

    def similarity_score(self, a: Any, b: Any) -> float:
        """Return the fraction of leaves that compare equal, in [0, 1]."""
        from pretty_diff.comparator import Comparator

        return Comparator(self).compare(a, b)[1]


DEFAULT_CONFIG = CompareConfig()

COMPARE_CONFIG = CompareConfig(
    diffable=True,
    include_private=True,
    formatters=DEFAULT_FORMATTERS,
)
