"""Tests for UpdateCategoryUseCase."""

import pytest

from kakeibo.application.use_cases.categories import (
    CategoryAccessForbiddenError,
    CategoryNotFoundError,
    DefaultCategoryUpdateForbiddenError,
    DuplicateCategoryError,
    InvalidCategoryIdError,
    InvalidUpdateDataError,
    UnexpectedUpdateCategoryError,
    UpdateCategoryInput,
    UpdateCategoryUseCase,
)
from tests.fakes import BONUS, DAILY_GOODS, FOOD, HOBBY, RepositoryDown


@pytest.fixture
def use_case(category_repository):
    return UpdateCategoryUseCase(category_repository)


def test_owner_renames_custom_category(
    use_case, category_repository
) -> None:
    output = use_case.execute(
        UpdateCategoryInput(user_id=1, id=DAILY_GOODS, name="  生活用品 ")
    )

    view = output.category
    assert view.name == "生活用品"
    assert view.updated_at != view.created_at
    assert view.display_order == 3
    assert category_repository.categories[DAILY_GOODS].name == "生活用品"


def test_visibility_and_order(use_case, category_repository) -> None:
    output = use_case.execute(
        UpdateCategoryInput(1, BONUS, is_visible=True, display_order=9)
    )
    assert output.category.is_visible
    assert output.category.display_order == 9
    assert output.category.name == "賞与"
    assert category_repository.categories[BONUS].is_visible


def test_keeping_the_same_name_is_allowed(use_case) -> None:
    output = use_case.execute(UpdateCategoryInput(1, DAILY_GOODS, "日用品"))
    assert output.category.name == "日用品"


def test_nothing_to_update(use_case) -> None:
    with pytest.raises(InvalidUpdateDataError, match="No fields"):
        use_case.execute(UpdateCategoryInput(1, DAILY_GOODS))


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "x" * 51},
        {"name": 3},
        {"display_order": -1},
        {"display_order": True},
        {"is_visible": "yes"},
    ],
)
def test_invalid_fields(use_case, overrides: dict) -> None:
    with pytest.raises(InvalidUpdateDataError):
        use_case.execute(UpdateCategoryInput(1, DAILY_GOODS, **overrides))


def test_default_category_is_read_only(use_case) -> None:
    with pytest.raises(DefaultCategoryUpdateForbiddenError) as exc_info:
        use_case.execute(UpdateCategoryInput(1, FOOD, is_visible=False))
    assert exc_info.value.category_id == FOOD


def test_other_users_category_is_forbidden(
    use_case, category_repository
) -> None:
    with pytest.raises(CategoryAccessForbiddenError):
        use_case.execute(UpdateCategoryInput(1, HOBBY, name="釣り"))
    assert category_repository.categories[HOBBY].name == "趣味"


def test_unknown_category(use_case) -> None:
    with pytest.raises(CategoryNotFoundError):
        use_case.execute(UpdateCategoryInput(1, 99, name="新規"))


@pytest.mark.parametrize("value", [0, "3", None])
def test_rejects_invalid_id(use_case, value: object) -> None:
    with pytest.raises(InvalidCategoryIdError):
        use_case.execute(UpdateCategoryInput(1, value, name="新規"))


@pytest.mark.parametrize("name", ["食費", "賞与"])
def test_rename_must_stay_unique(use_case, name: str) -> None:
    with pytest.raises(DuplicateCategoryError):
        use_case.execute(UpdateCategoryInput(1, DAILY_GOODS, name=name))


def test_repository_failure_is_wrapped(use_case, category_repository) -> None:
    category_repository.fail = True
    with pytest.raises(UnexpectedUpdateCategoryError) as exc_info:
        use_case.execute(UpdateCategoryInput(1, DAILY_GOODS, name="新規"))
    assert isinstance(exc_info.value.cause, RepositoryDown)
