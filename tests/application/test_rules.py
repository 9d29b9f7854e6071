"""Tests for the input rule chain."""

import pytest

from kakeibo.application.use_cases.transactions import (
    CreateTransactionInput,
    InvalidAmountError,
    InvalidCategoryIdsError,
    InvalidTransactionTypeError,
    TransactionTitleRequiredError,
    UpdateTransactionInput,
)
from kakeibo.application.use_cases.transactions.rules import (
    AmountRule,
    BaseValidationRule,
    CategoryIdsRule,
    MemoRule,
    RuleChain,
    TitleRule,
    default_field_rules,
    strip_text,
)
from kakeibo.domain.values import DomainError


def test_chain_returns_entity_when_all_rules_pass() -> None:
    data = UpdateTransactionInput(user_id=1, id=1)
    chain = RuleChain(default_field_rules() + [CategoryIdsRule()])
    assert chain.check(data) is data


def test_chain_raises_first_failure() -> None:
    chain = RuleChain([AmountRule(), CategoryIdsRule()])
    with pytest.raises(InvalidAmountError):
        chain.check(UpdateTransactionInput(1, 1, amount=-1, category_ids=[]))


def test_category_ids_rule() -> None:
    rule = CategoryIdsRule()
    assert rule.validate(UpdateTransactionInput(1, 1)) is None
    supplied = UpdateTransactionInput(1, 1, category_ids=[3])
    assert rule.validate(supplied) is None
    assert isinstance(
        rule.validate(UpdateTransactionInput(1, 1, category_ids=[])),
        InvalidCategoryIdsError,
    )


def test_custom_rules_can_be_chained() -> None:
    class NoPlaceholderTitles(BaseValidationRule):
        def validate(self, entity):
            if entity.title == "TBD":
                return DomainError("Placeholder titles are not allowed")
            return None

    chain = RuleChain(default_field_rules() + [NoPlaceholderTitles()])
    with pytest.raises(DomainError, match="Placeholder"):
        chain.check(UpdateTransactionInput(1, 1, title="TBD"))


def test_optional_rules_skip_missing_fields() -> None:
    assert TitleRule().validate(UpdateTransactionInput(1, 1)) is None


def test_required_rules_reject_missing_fields() -> None:
    data = CreateTransactionInput(
        user_id=1,
        type=None,
        title=None,
        amount=None,
        date=None,
        category_id=1,
    )
    assert isinstance(
        TitleRule(required=True).validate(data),
        TransactionTitleRequiredError,
    )
    with pytest.raises(InvalidTransactionTypeError):
        RuleChain(default_field_rules(required=True)).check(data)


def test_memo_stays_optional_when_fields_are_required() -> None:
    data = UpdateTransactionInput(1, 1, memo=None)
    assert MemoRule().validate(data) is None
    assert MemoRule().required is False


def test_strip_text_leaves_non_text_alone() -> None:
    assert strip_text("  rent ") == "rent"
    assert strip_text(None) is None
    assert strip_text(42) == 42
