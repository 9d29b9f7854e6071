"""CategoryName value object."""

from dataclasses import dataclass

from .domain_error import DomainError

CATEGORY_NAME_MAX_LENGTH = 50


class CategoryNameValidationError(DomainError):
    pass


@dataclass(frozen=True)
class CategoryName:
    value: str

    @classmethod
    def create(cls, name: str) -> "CategoryName":
        """
        Trim and validate a category name.

        Raises:
            CategoryNameValidationError: Name is not text, is blank or is
                longer than CATEGORY_NAME_MAX_LENGTH characters.
        """
        if not isinstance(name, str):
            raise CategoryNameValidationError(
                f"Category name must be text: {name!r}"
            )
        trimmed = name.strip()
        if not trimmed:
            raise CategoryNameValidationError("Category name is required")
        if len(trimmed) > CATEGORY_NAME_MAX_LENGTH:
            raise CategoryNameValidationError(
                "Category name must be at most "
                f"{CATEGORY_NAME_MAX_LENGTH} characters"
            )
        return cls(trimmed)

    def equals(self, other: object) -> bool:
        return self == other

    def __str__(self) -> str:
        return self.value
