"""DiffRenderer: serializes a DiffNode tree into signed diff lines.

Every output line is a one-character sign followed by diffable-style text:

- ``" "`` for lines shared by both sides (including the delimiters of
  containers that were diffed entry by entry),
- ``"-"`` for lines of the old (a) side,
- ``"+"`` for lines of the new (b) side.

A changed leaf is emitted as its complete old block followed by its complete
new block; a one-sided subtree signs every one of its lines, delimiters
included.  Indentation follows ``Formatter.lines`` exactly, so stripping the
sign column from the unchanged lines gives the formatter's own output.  A
nil that compares equal to an all-zero container is shown as that container
in both directions.  An all-same tree renders as the empty string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pretty_diff.algorithm.nodes import DiffNode, DiffStatus
from pretty_diff.formatter import INDENT, Formatter, delimiters
from pretty_diff.tree.nodes import ValueNode

if TYPE_CHECKING:
    from pretty_diff.config import CompareConfig

__all__ = ["ADDED", "REMOVED", "SAME", "DiffRenderer"]

SAME = " "
REMOVED = "-"
ADDED = "+"

# A block is the rendering of one side of one entry: (sign, text) lines whose
# first text is not yet indented or labelled.
Block = list[tuple[str, str]]


def _require(value: ValueNode | None, node: DiffNode) -> ValueNode:
    if value is None:
        msg = f"{node.status} diff node {node.label!r} is missing the side it renders"
        raise ValueError(msg)
    return value


def _shown_side(node: DiffNode) -> ValueNode:
    """Return the side a same node renders: the present one when the other is nil."""
    old = _require(node.old, node)
    if old.is_absent and node.new is not None and not node.new.is_absent:
        return node.new
    return old


class DiffRenderer:
    """Renders DiffNode trees as line-prefixed text."""

    def __init__(self, config: CompareConfig) -> None:
        self._formatter = Formatter(config)

    def render(self, node: DiffNode) -> str:
        """Return the signed line diff for ``node``, or ``""`` if nothing differs."""
        if node.is_same:
            return ""
        lines = [line for block in self._blocks(node, "") for line in block]
        return "\n".join(sign + text for sign, text in lines)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _blocks(self, node: DiffNode, indent: str) -> list[Block]:
        if node.status == DiffStatus.SAME:
            return [self._signed(SAME, _shown_side(node), indent)]
        if node.status == DiffStatus.REMOVED:
            return [self._signed(REMOVED, _require(node.old, node), indent)]
        if node.status == DiffStatus.ADDED:
            return [self._signed(ADDED, _require(node.new, node), indent)]
        if node.is_paired:
            return [self._paired(node, indent)]
        return [
            self._signed(REMOVED, _require(node.old, node), indent),
            self._signed(ADDED, _require(node.new, node), indent),
        ]

    def _signed(self, sign: str, value: ValueNode, indent: str) -> Block:
        return [(sign, text) for text in self._formatter.lines(value, indent)]

    def _paired(self, node: DiffNode, indent: str) -> Block:
        open_, close = delimiters(_require(node.old, node))
        inner = indent + INDENT
        block: Block = [(SAME, open_)]
        for child in node.children:
            prefix = f"{child.label}: " if child.label else ""
            for sub in self._blocks(child, inner):
                sign, text = sub[0]
                sub[0] = (sign, inner + prefix + text)
                sign, text = sub[-1]
                sub[-1] = (sign, text + ",")
                block.extend(sub)
        block.append((SAME, indent + close))
        return block

