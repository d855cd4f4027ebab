"""Scalar equivalence under a CompareConfig.

Two scalars are equal when their canonical literals are equal, which makes
the comparison type-aware (``1``, ``1.0``, ``true`` and ``"1"`` all differ)
and reflexive even for NaN.  With ``ignore_money_format_differences``
enabled, two *strings* are also equal when the configured money parser
reads the same amount from both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pretty_diff.tree.nodes import ValueNode

if TYPE_CHECKING:
    from pretty_diff.config import CompareConfig


def scalars_equal(a: ValueNode, b: ValueNode, config: CompareConfig) -> bool:
    """Return True if scalar nodes ``a`` and ``b`` are equivalent."""
    if a.text == b.text:
        return True
    if not config.ignore_money_format_differences:
        return False
    if not (isinstance(a.value, str) and isinstance(b.value, str)):
        return False
    amount_a = config.money_parser(a.value)
    if amount_a is None:
        return False
    amount_b = config.money_parser(b.value)
    return amount_b is not None and amount_a == amount_b
