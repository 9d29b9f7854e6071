from ..transactions.errors import (
    CategoryNotFoundError,
    InvalidCategoryIdError,
    InvalidPaginationError,
)
from .builders import (
    CategoryOutput,
    CategoryPageInfo,
    CategoryView,
    ListCategoriesOutput,
)
from .create import CreateCategoryInput, CreateCategoryUseCase
from .errors import (
    CategoryAccessForbiddenError,
    DefaultCategoryUpdateForbiddenError,
    DuplicateCategoryError,
    InvalidCategoryNameError,
    InvalidCategoryTypeError,
    InvalidSortParameterError,
    InvalidUpdateDataError,
    UnexpectedCategoryError,
    UnexpectedCreateCategoryError,
    UnexpectedGetCategoryError,
    UnexpectedListCategoriesError,
    UnexpectedUpdateCategoryError,
)
from .get import GetCategoryInput, GetCategoryUseCase
from .list import ListCategoriesInput, ListCategoriesUseCase
from .update import UpdateCategoryInput, UpdateCategoryUseCase

__all__ = [
    "CreateCategoryInput",
    "CreateCategoryUseCase",
    "GetCategoryInput",
    "GetCategoryUseCase",
    "ListCategoriesInput",
    "ListCategoriesUseCase",
    "UpdateCategoryInput",
    "UpdateCategoryUseCase",
    "CategoryOutput",
    "CategoryPageInfo",
    "CategoryView",
    "ListCategoriesOutput",
    "CategoryAccessForbiddenError",
    "CategoryNotFoundError",
    "DefaultCategoryUpdateForbiddenError",
    "DuplicateCategoryError",
    "InvalidCategoryIdError",
    "InvalidCategoryNameError",
    "InvalidCategoryTypeError",
    "InvalidPaginationError",
    "InvalidSortParameterError",
    "InvalidUpdateDataError",
    "UnexpectedCategoryError",
    "UnexpectedCreateCategoryError",
    "UnexpectedGetCategoryError",
    "UnexpectedListCategoriesError",
    "UnexpectedUpdateCategoryError",
]
