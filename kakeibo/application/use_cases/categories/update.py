"""
Update category use case (partial update).

Custom categories can be renamed, hidden and reordered by their owner.
Shared defaults are read-only.
"""

from dataclasses import dataclass

from structlog import get_logger

from kakeibo.domain.entities.category import Category
from kakeibo.domain.entities.records import CategoryRecord, UpdateCategoryData
from kakeibo.domain.repositories import CategoryRepository
from kakeibo.domain.values.category_name import (
    CategoryName,
    CategoryNameValidationError,
)

from ..base import reraise_unexpected
from ..transactions.errors import CategoryNotFoundError
from .builders import CategoryBuilder, CategoryOutput, to_entity
from .errors import (
    CategoryAccessForbiddenError,
    DefaultCategoryUpdateForbiddenError,
    DuplicateCategoryError,
    InvalidUpdateDataError,
    UnexpectedUpdateCategoryError,
)
from .get import validate_category_id

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateCategoryInput:
    user_id: int
    id: int
    name: str | None = None
    is_visible: bool | None = None
    display_order: int | None = None


class UpdateCategoryUseCase:
    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository
        self.builder = CategoryBuilder()

    def execute(self, data: UpdateCategoryInput) -> CategoryOutput:
        """
        Apply the supplied changes to one of the caller's categories.

        Raises:
            InvalidCategoryIdError: id is not a positive integer.
            InvalidUpdateDataError: Nothing to change, or a supplied
                field is invalid.
            CategoryNotFoundError: No category has this id.
            DefaultCategoryUpdateForbiddenError: The category is a shared
                default.
            CategoryAccessForbiddenError: Another user owns the category.
            DuplicateCategoryError: The new name is already taken.
            UnexpectedUpdateCategoryError: A repository call failed.
        """
        category_id = validate_category_id(data.id)
        new_name = self._validate(data)

        category = to_entity(self._fetch(category_id))
        if category.is_default:
            raise DefaultCategoryUpdateForbiddenError(category_id)
        if not category.can_edit_by(data.user_id):
            raise CategoryAccessForbiddenError(category_id)

        if new_name is not None and not new_name.equals(category.name):
            self._ensure_unique(category, new_name)
            category.update_name(new_name)

        changes = UpdateCategoryData(
            is_visible=data.is_visible, display_order=data.display_order
        )
        with reraise_unexpected(
            UnexpectedUpdateCategoryError, "Failed to update category"
        ):
            record = self.category_repository.update(category, changes)

        logger.info(f"Category {record.id} updated by user {data.user_id}")
        return self.builder.build(record)

    def _validate(self, data: UpdateCategoryInput) -> CategoryName | None:
        if (
            data.name is None
            and data.is_visible is None
            and data.display_order is None
        ):
            raise InvalidUpdateDataError("No fields to update")
        if data.is_visible is not None and not isinstance(
            data.is_visible, bool
        ):
            raise InvalidUpdateDataError("is_visible must be a boolean")
        if data.display_order is not None and (
            not isinstance(data.display_order, int)
            or isinstance(data.display_order, bool)
            or data.display_order < 0
        ):
            raise InvalidUpdateDataError(
                "display_order must be a non-negative integer"
            )
        if data.name is None:
            return None
        try:
            return CategoryName.create(data.name)
        except CategoryNameValidationError as e:
            raise InvalidUpdateDataError(e.message) from e

    def _fetch(self, category_id: int) -> CategoryRecord:
        with reraise_unexpected(
            UnexpectedUpdateCategoryError, "Failed to fetch category"
        ):
            record = self.category_repository.find_by_id(category_id)
        if record is None:
            raise CategoryNotFoundError(category_id)
        return record

    def _ensure_unique(self, category: Category, name: CategoryName) -> None:
        with reraise_unexpected(
            UnexpectedUpdateCategoryError, "Failed to check category name"
        ):
            existing = self.category_repository.find_by_name(
                category.user_id, name.value
            )
        if existing is not None and existing.id != category.id:
            raise DuplicateCategoryError(name.value)
