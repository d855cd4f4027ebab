"""Deterministic object generators for performance benchmarks.

All generators produce fixed, reproducible objects. No random values.
Three tiers: 10-leaf flat, ~100-leaf nested, ~1000-leaf deeply nested.
Each tier provides both "similar" (one changed leaf) and "dissimilar"
(every leaf changed) pair generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class Account:
    owner: str
    balance: str
    tags: list[str] = field(default_factory=list)
    parent: Account | None = None


def generate_flat_object(num_keys: int, prefix: str = "value") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"key_{i}": f"{prefix}_{i}" for i in range(num_keys)}


def _make_nested(sections: int, prefix: str) -> dict[str, Any]:
    """Generate ``sections`` sections of 9 leaves mixing lists and records."""
    return {
        f"section_{i}": {
            "items": [f"{prefix}_{i}_{j}" for j in range(5)],
            "account": Account(
                owner=f"{prefix}_owner_{i}",
                balance=f"{i}.00",
                tags=[f"{prefix}_tag_{i}"],
            ),
            "count": i,
        }
        for i in range(sections)
    }


def _make_deep(groups: int, prefix: str) -> dict[str, Any]:
    """Generate ``groups`` groups of ~100 leaves each, three levels deep."""
    return {f"group_{g}": _make_nested(10, f"{prefix}_{g}") for g in range(groups)}


def _with_one_change(obj: dict[str, Any]) -> dict[str, Any]:
    changed = dict(obj)
    first = next(iter(changed))
    changed[first] = "changed"
    return changed


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-leaf flat pair differing in one value."""
    left = generate_flat_object(10)
    return left, _with_one_change(left)


@pytest.fixture
def pair_10key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-leaf flat pair differing in every value."""
    return generate_flat_object(10, "user"), generate_flat_object(10, "product")


@pytest.fixture
def pair_100key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """~100-leaf nested pair (10 sections) differing in one section."""
    left = _make_nested(10, "v")
    return left, _with_one_change(left)


@pytest.fixture
def pair_100key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """~100-leaf nested pair differing in every string leaf."""
    return _make_nested(10, "user"), _make_nested(10, "product")


@pytest.fixture
def pair_1000key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """~1000-leaf deeply nested pair differing in one group."""
    left = _make_deep(10, "v")
    return left, _with_one_change(left)


@pytest.fixture
def pair_1000key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """~1000-leaf deeply nested pair differing in every string leaf."""
    return _make_deep(10, "user"), _make_deep(10, "product")
