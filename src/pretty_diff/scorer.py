"""SimilarityScorer: coarse "fraction of leaves equal" signal for a diff tree.

Each leaf of the DiffNode tree is weighted by the number of scalar leaves
beneath it (the larger of its two sides, so a one-sided list of three
strings weighs 3).  An absent reference counts as one leaf; an empty
container counts as none.  Same leaves earn full credit, every other leaf
earns ``partial_credit``::

    score = sum(weight * credit) / sum(weight)

A tree without any leaf weight (e.g. two empty lists) scores 1.0: vacuously
identical.

Example::

    scorer = SimilarityScorer()
    scorer.score(differ.diff(builder.build([1, 2]), builder.build([1, 3])))  # 0.5
"""

from __future__ import annotations

import numpy as np

from pretty_diff.algorithm.nodes import DiffNode
from pretty_diff.tree.nodes import ValueKind, ValueNode

__all__ = ["SimilarityScorer", "leaf_count"]


def leaf_count(node: ValueNode | None) -> int:
    """Return the number of scalar leaves (absent references included) in ``node``."""
    if node is None:
        return 0
    if node.kind == ValueKind.SCALAR or node.is_absent:
        return 1
    return sum(leaf_count(child) for child in node.children)


class SimilarityScorer:
    """Scores DiffNode trees in [0.0, 1.0].

    Args:
        partial_credit: Credit in [0, 1] granted to a leaf that is not same.
            Defaults to 0.0, so the score is the plain fraction of equal leaves.
    """

    def __init__(self, partial_credit: float = 0.0) -> None:
        self._partial_credit = partial_credit

    def score(self, node: DiffNode) -> float:
        """Return the weighted fraction of equal leaves in ``node``."""
        leaves = list(node.iter_leaves())
        weights = np.array(
            [max(leaf_count(leaf.old), leaf_count(leaf.new)) for leaf in leaves],
            dtype=float,
        )
        if not weights.sum():
            return 1.0
        credits = np.array(
            [1.0 if leaf.is_same else self._partial_credit for leaf in leaves],
            dtype=float,
        )
        return float(np.average(credits, weights=weights))
