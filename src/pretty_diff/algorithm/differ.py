"""StructuralDiffer: lock-step walk of two ValueNode trees.

Produces a DiffNode tree classifying every position as same, changed, added
or removed.

Architecture:
- REFERENCE on either side: nil against nil is same; present references are
  transparent (the walk continues with their targets); nil against a
  container whose every field or element is zero is same, so a nil pointer
  and a pointer to an empty struct compare equal.
- SCALAR pairs: config-aware literal equality (see ``scalars_equal``).
- RECORD pairs: union of field names, a's fields in a's order first, then
  fields only b has, in b's order.
- MAPPING pairs: union of key labels in sorted order.  Distinct keys that
  render to the same label are paired positionally, never merged.
- SEQUENCE pairs: strictly positional; trailing extras are removed (a) or
  added (b).  An insertion in the middle shows up as a cascade of changes;
  no alignment is attempted.
- Any other pairing of kinds is a single changed leaf.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from pretty_diff.algorithm.equality import scalars_equal
from pretty_diff.algorithm.nodes import DiffNode, DiffStatus
from pretty_diff.tree.nodes import ValueKind, ValueNode, is_zero

if TYPE_CHECKING:
    from pretty_diff.config import CompareConfig

__all__ = ["StructuralDiffer"]


def _deref(node: ValueNode) -> ValueNode:
    """Follow present references down to the first non-reference node."""
    while node.kind == ValueKind.REFERENCE and node.children:
        node = node.children[0]
    return node


def _defaults_to_nil(node: ValueNode) -> bool:
    """True if ``node`` is a container (possibly behind references) holding only zeros."""
    target = _deref(node)
    return target.is_container and is_zero(target)


def _group_by_label(nodes: list[ValueNode]) -> dict[str, list[ValueNode]]:
    groups: dict[str, list[ValueNode]] = {}
    for node in nodes:
        groups.setdefault(node.label, []).append(node)
    return groups


class StructuralDiffer:
    """Compares two ValueNode trees under a CompareConfig.

    Example::

        builder = ValueBuilder(COMPARE_CONFIG)
        differ = StructuralDiffer(COMPARE_CONFIG)
        node = differ.diff(builder.build([1, 2]), builder.build([1, 3]))
        node.status                        # DiffStatus.CHANGED
        [c.status for c in node.children]  # [SAME, CHANGED]
    """

    def __init__(self, config: CompareConfig) -> None:
        self._config = config

    def diff(self, a: ValueNode, b: ValueNode) -> DiffNode:
        """Return the annotated diff of ``a`` (old) against ``b`` (new)."""
        return self._diff(a, b, label="")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _diff(self, a: ValueNode, b: ValueNode, label: str) -> DiffNode:
        if a.kind == ValueKind.REFERENCE or b.kind == ValueKind.REFERENCE:
            return self._diff_references(a, b, label)

        if a.kind != b.kind:
            return DiffNode(DiffStatus.CHANGED, label=label, old=a, new=b)

        if a.kind == ValueKind.SCALAR:
            status = (
                DiffStatus.SAME
                if scalars_equal(a, b, self._config)
                else DiffStatus.CHANGED
            )
            return DiffNode(status, label=label, old=a, new=b)

        if a.kind == ValueKind.SEQUENCE:
            return self._diff_sequences(a, b, label)

        if a.kind == ValueKind.MAPPING:
            return self._diff_mappings(a, b, label)

        # RECORD (final variant)
        return self._diff_records(a, b, label)

    def _diff_references(self, a: ValueNode, b: ValueNode, label: str) -> DiffNode:
        if a.is_absent and b.is_absent:
            return DiffNode(DiffStatus.SAME, label=label, old=a, new=b)

        if a.is_absent or b.is_absent:
            other = b if a.is_absent else a
            status = DiffStatus.SAME if _defaults_to_nil(other) else DiffStatus.CHANGED
            return DiffNode(status, label=label, old=a, new=b)

        return self._diff(_deref(a), _deref(b), label)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _diff_sequences(self, a: ValueNode, b: ValueNode, label: str) -> DiffNode:
        children: list[DiffNode] = []
        for old, new in zip_longest(a.children, b.children):
            if new is None:
                children.append(DiffNode(DiffStatus.REMOVED, old=old))
            elif old is None:
                children.append(DiffNode(DiffStatus.ADDED, new=new))
            else:
                children.append(self._diff(old, new, label=""))
        return DiffNode.container(a, b, children, label=label)

    def _diff_mappings(self, a: ValueNode, b: ValueNode, label: str) -> DiffNode:
        old_entries = _group_by_label(a.children)
        new_entries = _group_by_label(b.children)
        children = [
            self._diff_entry(key, old, new)
            for key in sorted(old_entries.keys() | new_entries.keys())
            for old, new in zip_longest(
                old_entries.get(key, []), new_entries.get(key, [])
            )
        ]
        return DiffNode.container(a, b, children, label=label)

    def _diff_records(self, a: ValueNode, b: ValueNode, label: str) -> DiffNode:
        new_fields = {child.label: child for child in b.children}
        children = [
            self._diff_entry(child.label, child, new_fields.get(child.label))
            for child in a.children
        ]
        old_names = {child.label for child in a.children}
        children.extend(
            DiffNode(DiffStatus.ADDED, label=child.label, new=child)
            for child in b.children
            if child.label not in old_names
        )
        return DiffNode.container(a, b, children, label=label)

    def _diff_entry(
        self, label: str, old: ValueNode | None, new: ValueNode | None
    ) -> DiffNode:
        if new is None:
            return DiffNode(DiffStatus.REMOVED, label=label, old=old)
        if old is None:
            return DiffNode(DiffStatus.ADDED, label=label, new=new)
        return self._diff(old, new, label)
