"""Comparator: orchestrator that wires ValueBuilder + StructuralDiffer + renderer + scorer.

This is the central wiring layer between the components and the public API.

Architecture:
- format() builds one tree and renders it in the configured style.
- compare() builds both trees, diffs them once, and hands the same DiffNode
  tree to both the DiffRenderer (text) and the SimilarityScorer (float).
- Diffs are always rendered in the diffable style, whatever style the
  configuration selects for format().
- Nothing is cached between calls; every call builds its own private trees.
"""

from __future__ import annotations

import logging
from typing import Any

from pretty_diff.algorithm.differ import StructuralDiffer
from pretty_diff.algorithm.nodes import DiffNode
from pretty_diff.config import COMPARE_CONFIG, CompareConfig
from pretty_diff.formatter import Formatter
from pretty_diff.renderer import DiffRenderer
from pretty_diff.scorer import SimilarityScorer
from pretty_diff.tree.builder import ValueBuilder
from pretty_diff.tree.nodes import ValueNode

__all__ = ["Comparator"]

logger = logging.getLogger(__name__)


class Comparator:
    """Orchestrator for printing and comparing arbitrary values.

    Example::

        from pretty_diff.comparator import Comparator

        cmp = Comparator()
        text, score = cmp.compare([1, 2, 3], [1, 2])
        print(text)
        #  [
        #   1,
        #   2,
        # - 3,
        #  ]
        print(score)   # 0.666...
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Options for normalization, comparison and scoring.
                Defaults to ``COMPARE_CONFIG``.
        """
        self._config: CompareConfig = config if config is not None else COMPARE_CONFIG
        self._builder = ValueBuilder(self._config)
        self._formatter = Formatter(self._config)
        self._differ = StructuralDiffer(self._config)
        self._renderer = DiffRenderer(self._config)
        self._scorer = SimilarityScorer(self._config.partial_credit)

    @property
    def config(self) -> CompareConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tree(self, value: Any) -> ValueNode:
        """Return the normalized tree of ``value``."""
        return self._builder.build(value)

    def format(self, value: Any) -> str:
        """Return the canonical text of ``value`` in the configured style."""
        return self._formatter.format(self._builder.build(value))

    def diff(self, a: Any, b: Any) -> DiffNode:
        """Return the annotated DiffNode tree of ``a`` (old) against ``b`` (new)."""
        return self._differ.diff(self._builder.build(a), self._builder.build(b))

    def compare(self, a: Any, b: Any) -> tuple[str, float]:
        """Compare two values and return ``(diff_text, similarity_score)``.

        ``diff_text`` is empty when the values are equivalent under the
        configuration, in which case the score is 1.0.
        """
        node = self.diff(a, b)
        text = self._renderer.render(node)
        score = self._scorer.score(node)
        logger.debug(
            "Compared %s with %s: status=%s score=%.4f",
            type(a).__name__,
            type(b).__name__,
            node.status,
            score,
        )
        return text, score
