"""UserName value object."""

from dataclasses import dataclass

from .domain_error import DomainError

USER_NAME_MAX_LENGTH = 100


class UserNameValidationError(DomainError):
    pass


@dataclass(frozen=True)
class UserName:
    value: str

    @classmethod
    def create(cls, name: str) -> "UserName":
        trimmed = name.strip()
        if not trimmed:
            raise UserNameValidationError("User name is required")
        if len(trimmed) > USER_NAME_MAX_LENGTH:
            raise UserNameValidationError(
                f"User name must be at most {USER_NAME_MAX_LENGTH} characters"
            )
        return cls(trimmed)

    def equals(self, other: object) -> bool:
        return self == other

    def __str__(self) -> str:
        return self.value
