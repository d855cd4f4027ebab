"""DiffNode dataclass and DiffStatus StrEnum for annotated diff trees.

A DiffNode mirrors the shape of the two ValueNode trees it was computed
from.  Leaves carry the value(s) they describe; paired containers carry one
child DiffNode per entry and derive their status from those children.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

from pretty_diff.tree.nodes import ValueNode


class DiffStatus(StrEnum):
    """Classification of a diff node.

    - SAME    -> "same"    : both sides are equivalent
    - CHANGED -> "changed" : both sides exist but differ
    - ADDED   -> "added"   : only the new (b) side exists
    - REMOVED -> "removed" : only the old (a) side exists
    """

    SAME = auto()
    CHANGED = auto()
    ADDED = auto()
    REMOVED = auto()


@dataclass(slots=True)
class DiffNode:
    """A node in the annotated diff tree.

    Attributes:
        status:   The node's classification (see DiffStatus).
        label:    Field name or key label shared by both sides; empty for
                  sequence elements and the root.
        old:      The a-side value; None for ADDED nodes.
        new:      The b-side value; None for REMOVED nodes.
        children: Per-entry diffs of a paired container; empty for leaves.
    """

    status: DiffStatus
    label: str = ""
    old: ValueNode | None = None
    new: ValueNode | None = None
    children: list[DiffNode] = field(default_factory=list)

    @classmethod
    def container(
        cls,
        old: ValueNode,
        new: ValueNode,
        children: list[DiffNode],
        label: str = "",
    ) -> DiffNode:
        """Build a paired container node whose status is derived from ``children``."""
        same = all(child.status == DiffStatus.SAME for child in children)
        return cls(
            status=DiffStatus.SAME if same else DiffStatus.CHANGED,
            label=label,
            old=old,
            new=new,
            children=children,
        )

    @property
    def is_same(self) -> bool:
        return self.status == DiffStatus.SAME

    @property
    def is_paired(self) -> bool:
        """True for containers diffed entry by entry (rendered with ``children``)."""
        return bool(self.children)

    def iter_leaves(self) -> Iterator[DiffNode]:
        """Yield every leaf DiffNode depth-first, in rendering order."""
        if not self.children:
            yield self
            return
        for child in self.children:
            yield from child.iter_leaves()
