"""Tests for the TransactionType value object."""

import dataclasses

import pytest

from kakeibo.domain.values import (
    DomainError,
    TransactionType,
    TransactionTypeValidationError,
)

VALID_TAGS = ["INCOME", "EXPENSE"]


@pytest.mark.parametrize("tag", VALID_TAGS)
def test_from_string_round_trip(tag: str) -> None:
    parsed = TransactionType.from_string(tag)
    assert parsed.value == tag
    assert str(parsed) == tag


def test_named_constructors_hold_their_tag() -> None:
    assert TransactionType.income().value == "INCOME"
    assert TransactionType.expense().value == "EXPENSE"


def test_parsed_equals_named_constructor() -> None:
    assert TransactionType.from_string("INCOME") == TransactionType.income()
    assert TransactionType.from_string("EXPENSE") == TransactionType.expense()
    assert TransactionType.from_string("INCOME").equals(
        TransactionType.income()
    )


def test_direct_construction_equals_factories() -> None:
    assert TransactionType("INCOME") == TransactionType.income()
    assert TransactionType("EXPENSE").equals(
        TransactionType.from_string("EXPENSE")
    )


def test_income_and_expense_differ() -> None:
    assert TransactionType.income() != TransactionType.expense()
    assert not TransactionType.income().equals(TransactionType.expense())


@pytest.mark.parametrize(
    "instance",
    [
        TransactionType.income(),
        TransactionType.expense(),
        TransactionType.from_string("INCOME"),
        TransactionType.from_string("EXPENSE"),
    ],
)
def test_predicates_are_exclusive_and_exhaustive(
    instance: TransactionType,
) -> None:
    assert instance.is_income() != instance.is_expense()


def test_predicates_match_tag() -> None:
    assert TransactionType.income().is_income()
    assert not TransactionType.income().is_expense()
    assert TransactionType.expense().is_expense()
    assert not TransactionType.expense().is_income()


@pytest.mark.parametrize(
    "text",
    [
        "",
        "income",
        "expense",
        "Income",
        " INCOME",
        "INCOME ",
        "EXPENSE\n",
        "TRANSFER",
        "INCOME,EXPENSE",
    ],
)
def test_from_string_rejects_anything_else(text: str) -> None:
    with pytest.raises(TransactionTypeValidationError):
        TransactionType.from_string(text)


@pytest.mark.parametrize("value", [None, 1, b"INCOME", ["INCOME"]])
def test_from_string_rejects_non_text(value: object) -> None:
    with pytest.raises(TransactionTypeValidationError):
        TransactionType.from_string(value)  # type: ignore[arg-type]


def test_direct_construction_is_validated() -> None:
    with pytest.raises(TransactionTypeValidationError):
        TransactionType("REFUND")  # type: ignore[arg-type]


def test_validation_error_is_a_domain_error() -> None:
    with pytest.raises(DomainError) as exc_info:
        TransactionType.from_string("income")
    assert exc_info.value.name == "TransactionTypeValidationError"
    assert "'income'" in exc_info.value.message


@pytest.mark.parametrize("other", ["INCOME", 0, None, object()])
def test_comparison_with_unrelated_types_is_false(other: object) -> None:
    income = TransactionType.income()
    assert income != other
    assert not income.equals(other)


def test_is_immutable() -> None:
    income = TransactionType.income()
    with pytest.raises(dataclasses.FrozenInstanceError):
        income.value = "EXPENSE"  # type: ignore[misc]
    assert income.is_income()


def test_hash_is_consistent_with_equality() -> None:
    tags = {
        TransactionType.income(),
        TransactionType.from_string("INCOME"),
        TransactionType.expense(),
    }
    assert len(tags) == 2
    lookup = {TransactionType.expense(): "out"}
    assert lookup[TransactionType.from_string("EXPENSE")] == "out"


def test_values_lists_closed_set_in_order() -> None:
    assert TransactionType.values() == ("INCOME", "EXPENSE")


def test_repr() -> None:
    assert repr(TransactionType.expense()) == "TransactionType('EXPENSE')"
