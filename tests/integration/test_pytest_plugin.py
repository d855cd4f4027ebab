"""Integration tests for the pretty-diff pytest plugin.

These tests verify that the assert_values_equal fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require pretty-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from pretty_diff import CompareConfig


@dataclass
class User:
    name: str
    age: int


def test_fixture_passes_equal_values(assert_values_equal: Any) -> None:
    assert_values_equal(User("Zaphod", 42), User("Zaphod", 42))
    assert_values_equal({"a": [1, 2]}, {"a": [1, 2]})


def test_fixture_fails_on_difference(assert_values_equal: Any) -> None:
    with pytest.raises(AssertionError, match=r"similarity="):
        assert_values_equal(User("Zaphd", 42), User("Zaphod", 42))


def test_fixture_custom_config(assert_values_equal: Any) -> None:
    """Custom CompareConfig should be forwarded to compare()."""
    with pytest.raises(AssertionError):
        assert_values_equal({"price": "12"}, {"price": "$12.00"})

    assert_values_equal(
        {"price": "12"},
        {"price": "$12.00"},
        config=CompareConfig(diffable=True, ignore_money_format_differences=True),
    )


def test_fixture_error_message_contents(assert_values_equal: Any) -> None:
    """AssertionError message should carry the score and the full diff."""
    with pytest.raises(AssertionError) as exc_info:
        assert_values_equal(User("Zaphd", 42), User("Zaphod", 42))

    assert str(exc_info.value) == (
        "values differ (-got +want): similarity=0.5000\n"
        " {\n"
        '- name: "Zaphd",\n'
        '+ name: "Zaphod",\n'
        "  age: 42,\n"
        " }"
    )


def test_fixture_returns_callable(assert_values_equal: Any) -> None:
    assert callable(assert_values_equal)


def test_plugin_discovery() -> None:
    """Verify assert_values_equal appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_values_equal" in result.stdout, (
        f"assert_values_equal not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
