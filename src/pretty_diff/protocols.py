"""MoneyParser Protocol for the money-equivalence extension point.

Defines the structural interface used when
``CompareConfig.ignore_money_format_differences`` is enabled.  Users can plug
in their own parser without inheriting from any base class; any callable
object with a conformant ``__call__`` passes ``isinstance`` checks.

Example::

    from decimal import Decimal
    from pretty_diff.protocols import MoneyParser

    class CentsParser:
        def __call__(self, text: str) -> Decimal | None:
            return Decimal(text) / 100 if text.isdigit() else None

    assert isinstance(CentsParser(), MoneyParser)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decimal import Decimal


@runtime_checkable
class MoneyParser(Protocol):
    """Structural protocol for money parsers.

    The ``__call__`` method must:
    - Accept a single string.
    - Return the ``Decimal`` amount the string denotes when it is money-like.
    - Return None (never raise) when it is not.
    """

    def __call__(self, text: str) -> Decimal | None: ...
