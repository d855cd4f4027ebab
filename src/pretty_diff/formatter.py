"""Formatter: renders a ValueNode tree as deterministic text.

Three styles are supported, selected by the configuration:

- compact (``compact=True``)::

      {Name:"Zaphod",Friends:["Ford","Trillian"]}

- diffable (``diffable=True``): one element per line, every element
  terminated by ``,`` and nested one space deeper than its container::

      {
       Name: "Zaphod",
       Friends: [
        "Ford",
        "Trillian",
       ],
      }

- default: keys aligned to the widest key of their record::

      {Name:    "Zaphod",
       Friends: ["Ford",
                 "Trillian"]}

The diffable style is the one diffs are rendered in: the renderer calls
``Formatter.lines`` for every subtree that is not paired with a counterpart,
so unchanged lines in a diff are byte-identical to ``format`` output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pretty_diff.tree.nodes import NIL, ValueKind, ValueNode

if TYPE_CHECKING:
    from pretty_diff.config import CompareConfig

__all__ = ["INDENT", "Formatter"]

# Added per nesting level in the diffable and default styles.
INDENT = " "

_DELIMITERS: dict[ValueKind, tuple[str, str]] = {
    ValueKind.SEQUENCE: ("[", "]"),
    ValueKind.MAPPING: ("{", "}"),
    ValueKind.RECORD: ("{", "}"),
}


def delimiters(node: ValueNode) -> tuple[str, str]:
    return _DELIMITERS[node.kind]


def entry_prefix(node: ValueNode) -> str:
    """Return the ``label: `` prefix of a container entry (empty for elements)."""
    return f"{node.label}: " if node.label else ""


class Formatter:
    """Renders ValueNode trees according to a CompareConfig.

    Stateless apart from the configuration; one instance may format any
    number of trees.
    """

    def __init__(self, config: CompareConfig) -> None:
        self._config = config

    def format(self, node: ValueNode) -> str:
        """Render ``node`` in the style selected by the configuration."""
        if self._config.compact:
            return self.compact(node)
        if self._config.diffable:
            return "\n".join(self.lines(node))
        return self.aligned(node)

    # ------------------------------------------------------------------
    # Compact style
    # ------------------------------------------------------------------

    def compact(self, node: ValueNode) -> str:
        """Render ``node`` on a single line without optional whitespace."""
        if node.kind == ValueKind.SCALAR:
            return node.text
        if node.kind == ValueKind.REFERENCE:
            target = node.target
            return NIL if target is None else self.compact(target)

        open_, close = delimiters(node)
        parts = [
            f"{child.label}:{self.compact(child)}" if child.label else self.compact(child)
            for child in node.children
        ]
        return open_ + ",".join(parts) + close

    # ------------------------------------------------------------------
    # Diffable style
    # ------------------------------------------------------------------

    def lines(self, node: ValueNode, indent: str = "") -> list[str]:
        """Render ``node`` in the diffable style as a list of lines.

        The first line carries no indentation because it continues whatever
        precedes it (an entry label or the element indent); every following
        line is indented absolutely, relative to ``indent``.
        """
        if node.kind == ValueKind.SCALAR:
            return [node.text]
        if node.kind == ValueKind.REFERENCE:
            target = node.target
            return [NIL] if target is None else self.lines(target, indent)

        open_, close = delimiters(node)
        if not node.children:
            return [open_ + close]

        inner = indent + INDENT
        out = [open_]
        for child in node.children:
            out.extend(self.entry(child, self.lines(child, inner), inner))
        out.append(indent + close)
        return out

    @staticmethod
    def entry(node: ValueNode, body: list[str], indent: str) -> list[str]:
        """Turn the rendered ``body`` of a child into a self-terminated entry."""
        out = list(body)
        out[0] = indent + entry_prefix(node) + out[0]
        out[-1] += ","
        return out

    # ------------------------------------------------------------------
    # Default (aligned) style
    # ------------------------------------------------------------------

    def aligned(self, node: ValueNode, indent: str = "") -> str:
        """Render ``node`` with keys aligned to the widest key of each record."""
        if node.kind == ValueKind.SCALAR:
            return node.text
        if node.kind == ValueKind.REFERENCE:
            target = node.target
            return NIL if target is None else self.aligned(target, indent)

        threshold = self._config.compact_threshold
        if threshold:
            short = self.compact(node)
            if len(short) <= threshold:
                return short

        open_, close = delimiters(node)
        if node.kind == ValueKind.SEQUENCE:
            inner = indent + INDENT
            items = [self.aligned(child, inner) for child in node.children]
            return open_ + (",\n" + inner).join(items) + close

        width = max((len(child.label) for child in node.children), default=0)
        align_key = indent + INDENT
        inner = align_key + " " * width + "  "
        parts = []
        for child in node.children:
            padding = " " * (width - len(child.label))
            parts.append(f"{child.label}:{padding} {self.aligned(child, inner)}")
        return open_ + (",\n" + align_key).join(parts) + close
