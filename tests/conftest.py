"""Shared fixtures for kakeibo tests."""

from datetime import date, timedelta

import pytest

from kakeibo.domain.entities import TransactionRecord
from tests.fakes import (
    BONUS,
    DAILY_GOODS,
    FOOD,
    HOBBY,
    SALARY,
    InMemoryCategoryRepository,
    InMemoryTransactionRepository,
    make_category,
)


@pytest.fixture
def tomorrow() -> str:
    return (date.today() + timedelta(days=1)).isoformat()


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    """Two shared defaults, two custom categories of user 1, one of user 2."""
    return InMemoryCategoryRepository(
        [
            make_category(FOOD, "食費", "EXPENSE", display_order=1),
            make_category(SALARY, "給与", "INCOME", display_order=2),
            make_category(
                DAILY_GOODS,
                "日用品",
                "EXPENSE",
                is_default=False,
                user_id=1,
                display_order=3,
            ),
            make_category(
                BONUS,
                "賞与",
                "INCOME",
                is_default=False,
                user_id=1,
                is_visible=False,
                display_order=4,
            ),
            make_category(
                HOBBY, "趣味", "EXPENSE", is_default=False, user_id=2
            ),
        ]
    )


@pytest.fixture
def transaction_repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def lunch(
    transaction_repository: InMemoryTransactionRepository,
) -> TransactionRecord:
    """Expense of user 1 tagged with two expense categories."""
    return transaction_repository.add(
        user_id=1,
        type="EXPENSE",
        title="Lunch",
        amount=1200,
        date="2024-01-15",
        category_id=FOOD,
        memo="with team",
        category_ids=[FOOD, DAILY_GOODS],
    )
