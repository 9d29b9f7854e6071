"""Errors raised by the category use cases."""

from kakeibo.domain.values.domain_error import DomainError

from ..base import UnexpectedUseCaseError


class InvalidCategoryNameError(DomainError):
    pass


class InvalidCategoryTypeError(DomainError):
    def __init__(self, category_type: object) -> None:
        super().__init__(f"Invalid category type: {category_type!r}")


class DuplicateCategoryError(DomainError):
    def __init__(self, category_name: str) -> None:
        super().__init__(f"Category already exists: {category_name}")
        self.category_name = category_name


class CategoryAccessForbiddenError(DomainError):
    def __init__(self, category_id: int) -> None:
        super().__init__(f"Category {category_id} belongs to another user")
        self.category_id = category_id


class DefaultCategoryUpdateForbiddenError(DomainError):
    def __init__(self, category_id: int) -> None:
        super().__init__(
            f"Default category {category_id} cannot be updated"
        )
        self.category_id = category_id


class InvalidUpdateDataError(DomainError):
    pass


class InvalidSortParameterError(DomainError):
    def __init__(self, parameter: str, value: object) -> None:
        super().__init__(f"Invalid {parameter}: {value!r}")


class UnexpectedCategoryError(UnexpectedUseCaseError):
    pass


class UnexpectedCreateCategoryError(UnexpectedCategoryError):
    pass


class UnexpectedGetCategoryError(UnexpectedCategoryError):
    pass


class UnexpectedListCategoriesError(UnexpectedCategoryError):
    pass


class UnexpectedUpdateCategoryError(UnexpectedCategoryError):
    pass
