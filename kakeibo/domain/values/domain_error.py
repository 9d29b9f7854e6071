"""
Base error for the domain layer.

Every typed domain failure derives from DomainError so that outer layers
can map the whole family to an "invalid input" response. It is not a
ValueError, so pydantic lets it propagate from validators unchanged
instead of folding it into a ValidationError.
"""


class DomainError(Exception):
    """
    Base domain error.

    Attributes:
        message: Human readable description of the failure.
        name: Error kind. Defaults to the concrete class name.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name or type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"
