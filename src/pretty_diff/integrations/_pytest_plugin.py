"""pytest plugin for pretty-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from pretty_diff import CompareConfig, compare


@pytest.fixture(scope="session")
def assert_values_equal() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh Comparator per call).

    Usage in tests::

        def test_user(assert_values_equal):
            assert_values_equal(load_user(), User(name="Zaphod", age=42))

        def test_mismatch(assert_values_equal):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_values_equal({"name": "x"}, {"name": "y"})

    Returns:
        A callable ``_assert(got, want, config=None) -> None`` that raises
        ``AssertionError`` carrying the line diff when the values differ.
    """

    def _assert(got: Any, want: Any, config: CompareConfig | None = None) -> None:
        """Assert that ``got`` and ``want`` are structurally equal.

        Args:
            got:    The value produced by the code under test (``-`` lines).
            want:   The expected value (``+`` lines).
            config: Optional CompareConfig; defaults to ``COMPARE_CONFIG``.

        Raises:
            AssertionError: When the diff is non-empty, with a message
                including the similarity score and the full diff.
        """
        text, score = compare(got, want, config=config)
        if text:
            raise AssertionError(
                f"values differ (-got +want): similarity={score:.4f}\n{text}"
            )

    return _assert
