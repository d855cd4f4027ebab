"""DecimalMoneyParser: the default money-likeness predicate.

A string is money-like when, after trimming surrounding whitespace, it
matches::

    [sign] [symbol] digits [. digits]

where ``sign`` is ``+`` or ``-``, ``symbol`` is one of the configured
currency symbols, and the integer part is either plain digits or digits
grouped in threes by commas.  "3456.00", "$3,456.00", "-$12" and "€0.5" are
money-like; "3,45", "$", "12 USD" and "1.2.3" are not.  No locale support:
the decimal mark is always ``.`` and the group separator always ``,``.

This parser satisfies the MoneyParser Protocol structurally (via
``__call__``) without inheriting from it.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

__all__ = ["DEFAULT_SYMBOLS", "DecimalMoneyParser"]

DEFAULT_SYMBOLS: tuple[str, ...] = ("$", "€", "£", "¥")


class DecimalMoneyParser:
    """Parses money-like strings into ``Decimal`` amounts.

    Example::

        from pretty_diff.money import DecimalMoneyParser

        parse = DecimalMoneyParser()
        parse("$3,456.00") == parse("3456")   # True
        parse("three dollars")                # None
    """

    __slots__ = ("_pattern", "symbols")

    def __init__(self, symbols: tuple[str, ...] = DEFAULT_SYMBOLS) -> None:
        self.symbols = tuple(symbols)
        symbol_alt = "|".join(re.escape(s) for s in self.symbols) or "(?!)"
        self._pattern = re.compile(
            rf"(?P<sign>[-+])?(?:{symbol_alt})?"
            r"(?P<int>\d{1,3}(?:,\d{3})+|\d+)(?P<frac>\.\d+)?"
        )

    def __call__(self, text: str) -> Decimal | None:
        """Return the amount ``text`` denotes, or None if it is not money-like."""
        match = self._pattern.fullmatch(text.strip())
        if match is None:
            return None
        digits = match["int"].replace(",", "") + (match["frac"] or "")
        try:
            amount = Decimal(digits)
        except InvalidOperation:
            return None
        return -amount if match["sign"] == "-" else amount

    def __repr__(self) -> str:
        return f"DecimalMoneyParser(symbols={self.symbols!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalMoneyParser):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self) -> int:
        return hash(self.symbols)
