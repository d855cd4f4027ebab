"""ValueBuilder: converts any Python value into a typed ValueNode tree.

Uses recursive dispatch to convert scalars, mappings, sequences, sets,
records (dataclasses, named tuples, slotted and plain objects) and
references (None, weak references) into ValueNode trees.  The builder never
raises: shapes it does not understand, and user code that fails while being
inspected, degrade to a raw scalar holding the value's ``repr``.

Cycle safety: the ids of the containers on the current path are tracked; a
container met again while it is still being expanded becomes the
``<cyclic reference>`` sentinel scalar.  Shared (non-cyclic) substructures
are expanded every time they appear.
"""

from __future__ import annotations

import enum
import inspect
import json
import logging
import numbers
import types
import weakref
from collections.abc import Mapping, Set
from collections.abc import Sequence as SequenceABC
from typing import TYPE_CHECKING, Any

from pretty_diff.formatter import Formatter
from pretty_diff.tree.introspect import find_formatter, has_custom_str, record_fields
from pretty_diff.tree.nodes import ValueKind, ValueNode, absent, is_zero, scalar

if TYPE_CHECKING:
    from pretty_diff.config import CompareConfig

__all__ = ["CYCLE_SENTINEL", "ValueBuilder", "quote"]

logger = logging.getLogger(__name__)

CYCLE_SENTINEL = "<cyclic reference>"

_MISSING = object()

# bool MUST precede int: bool subclasses int.
_SCALAR_TYPES: tuple[type, ...] = (bool, str, int, float, complex, bytes, bytearray)


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted, escaped string literal."""
    return json.dumps(text, ensure_ascii=False)


def _debug_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        logger.debug("repr() failed for %s", type(value).__name__, exc_info=True)
        return f"<{type(value).__name__} object>"


class ValueBuilder:
    """Converts Python values into ValueNode trees under a CompareConfig.

    Dispatch order matters:

    1. ``None`` and weak references become REFERENCE nodes.
    2. A formatter registered for the type wins over everything else.
    3. Exact builtin scalars (bool, int, float, complex, str, bytes).
    4. Stringer substitution, when enabled and the class defines ``__str__``.
    5. Enum members collapse to their underlying value.
    6. Subclasses of builtin scalars and other ``numbers.Number`` types.
    7. Mappings, sets, sequences and records.
    8. Anything else degrades to its ``repr``.

    ``bool`` MUST be tested before ``int`` because bool subclasses int.

    Example::

        builder = ValueBuilder(COMPARE_CONFIG)
        tree = builder.build({"name": "Zaphod"})
        # tree: MAPPING -> SCALAR('"Zaphod"', label='"name"')
    """

    def __init__(self, config: CompareConfig) -> None:
        self._config = config
        self._formatter = Formatter(config)

    def build(self, value: Any) -> ValueNode:
        """Convert ``value`` into a ValueNode tree.  Never raises."""
        return self._build(value, set())

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _build(self, value: Any, visiting: set[int]) -> ValueNode:
        if value is None:
            return absent()

        if isinstance(value, weakref.ReferenceType):
            target = value()
            if target is None:
                return absent()
            return ValueNode(
                kind=ValueKind.REFERENCE, children=[self._build(target, visiting)]
            )

        cls = type(value)
        formatter = find_formatter(self._config.formatters, cls)
        if formatter is not None:
            return scalar(self._call_str(formatter, value), value)

        literal = self._builtin_scalar(value, exact=True)
        if literal is not None:
            return literal

        if self._config.print_stringers and has_custom_str(cls):
            text = self._call_str(str, value)
            return scalar(quote(text), text)

        if isinstance(value, enum.Enum):
            return self._build(value.value, visiting)

        literal = self._builtin_scalar(value, exact=False)
        if literal is not None:
            return literal

        if isinstance(value, numbers.Number):
            return scalar(self._call_str(str, value), value)

        try:
            return self._build_container(value, cls, visiting)
        except Exception:  # noqa: BLE001
            logger.debug("Could not expand %s; using repr", cls.__name__, exc_info=True)
            return scalar(_debug_repr(value))

    @staticmethod
    def _builtin_scalar(value: Any, exact: bool) -> ValueNode | None:
        """Build a SCALAR for builtin scalar types (exact types, or subclasses).

        Subclasses are rendered through the builtin base so that overridden
        ``__repr__``/``__str__`` methods do not leak into the literal.
        """
        if exact:
            base = type(value)
        else:
            base = next((t for t in _SCALAR_TYPES if isinstance(value, t)), None)
        if base not in _SCALAR_TYPES:
            return None

        if base is bool:
            return scalar("true" if value else "false", bool(value))
        if base is str:
            text = str.__str__(value)
            return scalar(quote(text), text)
        if base in (bytes, bytearray):
            raw = bytes(value)
            return scalar(repr(raw), raw)
        plain = base(value)
        return scalar(base.__repr__(plain), plain)

    def _call_str(self, func: Any, value: Any) -> str:
        try:
            return str(func(value))
        except Exception:  # noqa: BLE001
            logger.debug(
                "String form of %s failed; using repr", type(value).__name__, exc_info=True
            )
            return _debug_repr(value)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _build_container(
        self, value: Any, cls: type, visiting: set[int]
    ) -> ValueNode:
        if isinstance(value, (type, types.ModuleType)) or inspect.isroutine(value):
            return scalar(_debug_repr(value))

        fields = record_fields(cls)
        is_mapping = isinstance(value, Mapping)
        is_set = isinstance(value, Set)
        is_sequence = isinstance(value, SequenceABC) and not isinstance(
            value, (str, bytes, bytearray)
        )
        if fields is None and not (is_mapping or is_set or is_sequence):
            if not hasattr(value, "__dict__"):
                return scalar(_debug_repr(value))
            fields = tuple(vars(value))

        key = id(value)
        if key in visiting:
            logger.debug("Cyclic reference to %s replaced by sentinel", cls.__name__)
            return scalar(CYCLE_SENTINEL)

        visiting.add(key)
        try:
            if fields is not None:
                return self._build_record(value, fields, visiting)
            if is_mapping:
                return self._build_mapping(value, visiting)
            if is_set:
                return self._build_set(value, visiting)
            return ValueNode(
                kind=ValueKind.SEQUENCE,
                children=[self._build(item, visiting) for item in value],
            )
        finally:
            visiting.discard(key)

    def _build_record(
        self, value: Any, fields: tuple[str, ...], visiting: set[int]
    ) -> ValueNode:
        node = ValueNode(kind=ValueKind.RECORD)
        for name in fields:
            if name.startswith("_") and not self._config.include_private:
                continue
            attr = getattr(value, name, _MISSING)
            if attr is _MISSING:
                continue
            child = self._build(attr, visiting)
            if self._config.skip_zero_fields and is_zero(child):
                continue
            node.children.append(child.relabel(name))
        return node

    def _build_mapping(self, value: Mapping[Any, Any], visiting: set[int]) -> ValueNode:
        entries = [
            self._build(val, visiting).relabel(
                self._formatter.compact(self._build(key, visiting))
            )
            for key, val in value.items()
        ]
        entries.sort(key=lambda child: child.label)
        return ValueNode(kind=ValueKind.MAPPING, children=entries)

    def _build_set(self, value: Set[Any], visiting: set[int]) -> ValueNode:
        items = [self._build(item, visiting) for item in value]
        items.sort(key=self._formatter.compact)
        return ValueNode(kind=ValueKind.SEQUENCE, children=items)
