"""algorithm subpackage: public API for the structural diff.

Provides the lock-step differ and its annotated result types.  Import from
this module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from pretty_diff import COMPARE_CONFIG
    from pretty_diff.algorithm import StructuralDiffer
    from pretty_diff.tree import ValueBuilder

    builder = ValueBuilder(COMPARE_CONFIG)
    node = StructuralDiffer(COMPARE_CONFIG).diff(builder.build(1), builder.build(2))
    # node.status == DiffStatus.CHANGED
"""

from __future__ import annotations

from pretty_diff.algorithm.differ import StructuralDiffer
from pretty_diff.algorithm.nodes import DiffNode, DiffStatus

__all__ = ["DiffNode", "DiffStatus", "StructuralDiffer"]
