"""Performance benchmark suite for pretty-diff.

Timing targets on a developer laptop:
- 10-leaf flat objects: <1ms
- ~100-leaf nested objects: <10ms
- ~1000-leaf deeply nested objects: <100ms

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from pretty_diff import COMPARE_CONFIG, compare, sprint


class TestPerformance10Key:
    """Benchmark suite for 10-leaf flat objects."""

    def test_10key_similar(self, benchmark, pair_10key_similar):  # type: ignore[no-untyped-def]
        left, right = pair_10key_similar
        text, score = benchmark(compare, left, right)
        # Verify the result is valid (not just timing)
        assert text
        assert score == 0.9

    def test_10key_dissimilar(self, benchmark, pair_10key_dissimilar):  # type: ignore[no-untyped-def]
        left, right = pair_10key_dissimilar
        _, score = benchmark(compare, left, right)
        assert score == 0.0


class TestPerformance100Key:
    """Benchmark suite for ~100-leaf nested objects."""

    def test_100key_similar(self, benchmark, pair_100key_similar):  # type: ignore[no-untyped-def]
        left, right = pair_100key_similar
        _, score = benchmark(compare, left, right)
        assert 0.0 < score < 1.0

    def test_100key_dissimilar(self, benchmark, pair_100key_dissimilar):  # type: ignore[no-untyped-def]
        left, right = pair_100key_dissimilar
        _, score = benchmark(compare, left, right)
        assert 0.0 <= score < 1.0

    def test_100key_sprint(self, benchmark, pair_100key_similar):  # type: ignore[no-untyped-def]
        left, _ = pair_100key_similar
        text = benchmark(sprint, left, COMPARE_CONFIG)
        assert text.startswith("{")


class TestPerformance1000Key:
    """Benchmark suite for ~1000-leaf deeply nested objects."""

    def test_1000key_similar(self, benchmark, pair_1000key_similar):  # type: ignore[no-untyped-def]
        left, right = pair_1000key_similar
        _, score = benchmark(compare, left, right)
        assert 0.0 < score < 1.0

    def test_1000key_dissimilar(self, benchmark, pair_1000key_dissimilar):  # type: ignore[no-untyped-def]
        left, right = pair_1000key_dissimilar
        _, score = benchmark(compare, left, right)
        assert 0.0 <= score < 1.0
