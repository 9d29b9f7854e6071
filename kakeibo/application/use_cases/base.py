from contextlib import contextmanager
from typing import Iterator

from structlog import get_logger

from kakeibo.domain.values.domain_error import DomainError

logger = get_logger(__name__)


class UnexpectedUseCaseError(DomainError):
    """
    Infrastructure failure surfaced by a use case.

    The original exception is chained as __cause__.
    """

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


@contextmanager
def reraise_unexpected(
    error_cls: type[UnexpectedUseCaseError], message: str
) -> Iterator[None]:
    """
    Wrap infrastructure failures into a typed use case error.

    Domain errors pass through untouched; anything else is logged and
    re-raised as error_cls(message) with the original chained.
    """
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"{message}: {e}", exc_info=True)
        raise error_cls(message) from e
