"""Tests for ValueNode dataclass, ValueKind StrEnum and the zero predicate.

Verifies:
- ValueKind has exactly 5 members with lowercase string values (StrEnum property)
- ValueNode constructs correctly and gets an independent children list
- absent/target/is_container helpers
- is_zero over scalars, references and containers
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from fractions import Fraction

import pytest

from pretty_diff.tree.nodes import (
    NIL,
    ValueKind,
    ValueNode,
    absent,
    is_zero,
    scalar,
)


class TestValueKind:
    def test_has_exactly_five_members(self) -> None:
        assert len(ValueKind) == 5

    def test_values_are_lowercased(self) -> None:
        assert ValueKind.SCALAR == "scalar"
        assert ValueKind.SEQUENCE == "sequence"
        assert ValueKind.MAPPING == "mapping"
        assert ValueKind.RECORD == "record"
        assert ValueKind.REFERENCE == "reference"

    def test_members_are_str_instances(self) -> None:
        for member in ValueKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestValueNode:
    def test_construction_with_required_fields(self) -> None:
        node = ValueNode(kind=ValueKind.RECORD)
        assert node.kind == ValueKind.RECORD
        assert node.label == ""
        assert node.text == ""
        assert node.value is None
        assert node.children == []

    def test_children_lists_are_independent(self) -> None:
        """Each instance must get its own children list (no shared mutable default)."""
        first = ValueNode(kind=ValueKind.SEQUENCE)
        second = ValueNode(kind=ValueKind.SEQUENCE)
        first.children.append(scalar("1", 1))
        assert second.children == []

    def test_slots_reject_unknown_attributes(self) -> None:
        node = scalar("1", 1)
        with pytest.raises(AttributeError):
            node.extra = True  # type: ignore[attr-defined]

    def test_scalar_helper(self) -> None:
        node = scalar('"x"', "x", label="name")
        assert node.kind == ValueKind.SCALAR
        assert node.text == '"x"'
        assert node.value == "x"
        assert node.label == "name"

    def test_absent_reference(self) -> None:
        node = absent()
        assert node.kind == ValueKind.REFERENCE
        assert node.is_absent
        assert node.target is None
        assert NIL == "nil"

    def test_present_reference_target(self) -> None:
        inner = scalar("1", 1)
        node = ValueNode(kind=ValueKind.REFERENCE, children=[inner])
        assert not node.is_absent
        assert node.target is inner

    def test_is_container(self) -> None:
        assert ValueNode(kind=ValueKind.SEQUENCE).is_container
        assert ValueNode(kind=ValueKind.MAPPING).is_container
        assert ValueNode(kind=ValueKind.RECORD).is_container
        assert not absent().is_container
        assert not scalar("1", 1).is_container

    def test_relabel_returns_same_node(self) -> None:
        node = scalar("1", 1)
        assert node.relabel("age") is node
        assert node.label == "age"


class TestIsZero:
    @pytest.mark.parametrize(
        "value", ["", 0, 0.0, False, b"", 0j, Decimal(0), Decimal("0.00"), Fraction(0)]
    )
    def test_zero_scalars(self, value: object) -> None:
        assert is_zero(scalar(repr(value), value))

    @pytest.mark.parametrize(
        "value",
        ["x", 1, -0.5, True, b"\x00", Decimal("0.01"), Decimal("NaN"), Fraction(1, 3)],
    )
    def test_non_zero_scalars(self, value: object) -> None:
        assert not is_zero(scalar(repr(value), value))

    def test_raw_scalar_is_never_zero(self) -> None:
        """Scalars without a primitive value (repr fallbacks, sentinels) are not zero."""
        assert not is_zero(scalar("<object>"))

    def test_non_numeric_formatted_value_is_not_zero(self) -> None:
        assert not is_zero(scalar("2024-01-02", datetime.date(2024, 1, 2)))

    def test_absent_reference_is_zero(self) -> None:
        assert is_zero(absent())

    def test_present_reference_follows_target(self) -> None:
        zero = ValueNode(kind=ValueKind.REFERENCE, children=[scalar("0", 0)])
        one = ValueNode(kind=ValueKind.REFERENCE, children=[scalar("1", 1)])
        assert is_zero(zero)
        assert not is_zero(one)

    def test_empty_containers_are_zero(self) -> None:
        for kind in (ValueKind.SEQUENCE, ValueKind.MAPPING, ValueKind.RECORD):
            assert is_zero(ValueNode(kind=kind))

    def test_record_is_zero_iff_all_fields_zero(self) -> None:
        zero = ValueNode(
            kind=ValueKind.RECORD,
            children=[scalar('""', "", label="name"), absent("parent")],
        )
        assert is_zero(zero)
        zero.children.append(scalar("42", 42, label="age"))
        assert not is_zero(zero)
