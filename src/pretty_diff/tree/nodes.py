"""ValueNode dataclass and ValueKind StrEnum for the normalized value model.

Every Python value handed to pretty-diff is first converted (by ValueBuilder)
into a tree of ValueNode objects.  The formatter, differ, renderer and scorer
only ever see this representation, never the original objects.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

NIL = "nil"


class ValueKind(StrEnum):
    """Enumeration of the five shapes a normalized value can take.

    - SCALAR    -> "scalar"    : a leaf literal (string, number, bool, raw text)
    - SEQUENCE  -> "sequence"  : ordered elements, compared positionally
    - MAPPING   -> "mapping"   : labelled entries sorted by rendered key
    - RECORD    -> "record"    : labelled fields in declaration order
    - REFERENCE -> "reference" : optional indirection; no child means nil
    """

    SCALAR = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    RECORD = auto()
    REFERENCE = auto()


@dataclass(slots=True)
class ValueNode:
    """A node in the normalized value tree.

    Attributes:
        kind:     Which shape this node has (see ValueKind).
        label:    Field name (RECORD children) or compact key text (MAPPING
                  children); empty for sequence elements and the root.
        text:     Canonical literal for SCALAR nodes; empty otherwise.
        value:    The Python value behind a SCALAR (the string form for
                  stringer substitutions); None for structural nodes.
        children: Elements, entries or fields.  A REFERENCE holds zero
                  children when absent and exactly one when present.
    """

    kind: ValueKind
    label: str = ""
    text: str = ""
    value: Any = None
    children: list[ValueNode] = field(default_factory=list)

    @property
    def is_container(self) -> bool:
        return self.kind in (ValueKind.SEQUENCE, ValueKind.MAPPING, ValueKind.RECORD)

    @property
    def is_absent(self) -> bool:
        return self.kind == ValueKind.REFERENCE and not self.children

    @property
    def target(self) -> ValueNode | None:
        """The referenced node of a present REFERENCE, else None."""
        if self.kind == ValueKind.REFERENCE and self.children:
            return self.children[0]
        return None

    def relabel(self, label: str) -> ValueNode:
        self.label = label
        return self


def scalar(text: str, value: Any = None, label: str = "") -> ValueNode:
    return ValueNode(kind=ValueKind.SCALAR, label=label, text=text, value=value)


def absent(label: str = "") -> ValueNode:
    return ValueNode(kind=ValueKind.REFERENCE, label=label)


def is_zero(node: ValueNode) -> bool:
    """Return True when ``node`` is the default value for its shape.

    A scalar is zero when it holds ``""``, ``b""`` or a number equal to 0
    (``False``, ``0.0`` and ``Decimal(0)`` included).  An absent reference is
    zero and a present one is zero when its target is; a container is zero
    when every child is (so empty ones are).
    """
    if node.kind == ValueKind.SCALAR:
        value = node.value
        if isinstance(value, (str, bytes)):
            return len(value) == 0
        if isinstance(value, numbers.Number):
            try:
                return bool(value == 0)
            except ArithmeticError:
                return False
        return False
    return all(is_zero(child) for child in node.children)
