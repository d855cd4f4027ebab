"""Per-type introspection helpers with LRU memoization.

Record layout (which attribute names make up a record, in declaration order)
and the ``__str__`` capability are properties of a *type*, not of an
instance, so they are computed once per class and held in bounded
``cachetools.LRUCache`` instances.  Both caches are guarded by a lock so
concurrent comparisons may share them; eviction is silent.
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable, Mapping
from typing import Any

from cachetools import LRUCache, cached

__all__ = ["find_formatter", "has_custom_str", "record_fields"]

_LAYOUT_CACHE: LRUCache[Any, tuple[str, ...] | None] = LRUCache(maxsize=512)
_STR_CACHE: LRUCache[Any, bool] = LRUCache(maxsize=512)
_LOCK = threading.RLock()

# Slot names that never hold user data.
_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})


@cached(_LAYOUT_CACHE, lock=_LOCK)
def record_fields(cls: type) -> tuple[str, ...] | None:
    """Return the declared field names of ``cls``, or None if it has none.

    - dataclasses: ``dataclasses.fields`` order.
    - named tuples: ``_fields`` order.
    - classes with ``__slots__``: slots in MRO order, base classes first.

    Returns None for classes whose layout is only known per instance
    (plain objects carrying a ``__dict__``).
    """
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))

    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return tuple(cls._fields)

    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in _IGNORED_SLOTS and name not in names:
                names.append(name)
    if names:
        return tuple(names)
    return None


@cached(_STR_CACHE, lock=_LOCK)
def has_custom_str(cls: type) -> bool:
    """Return True if some class in the MRO of ``cls`` (besides object) defines __str__."""
    return any("__str__" in klass.__dict__ for klass in cls.__mro__ if klass is not object)


def find_formatter(
    formatters: Mapping[type, Callable[[Any], str]],
    cls: type,
) -> Callable[[Any], str] | None:
    """Return the formatter registered for ``cls`` or its nearest base class."""
    if not formatters:
        return None
    for klass in cls.__mro__:
        formatter = formatters.get(klass)
        if formatter is not None:
            return formatter
    return None
