from logging import Handler
from pathlib import Path
from typing import Any, Callable, Generic, Protocol, TypeVar

from structlog.types import EventDict, WrappedLogger
from structlog.typing import ProcessorReturnValue

T = TypeVar("T")


class ILoggingConfig(Protocol):
    debug: bool
    app_name: str
    log_level: str
    enable_file_logging: bool
    logs_dir: Path
    logs_file_name: str
    max_file_size_mb: int
    backup_count: int


class IHandler(Protocol):
    def __call__(self) -> Handler: ...


class ILogProcessor(Protocol):
    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue: ...


class StrategyRegistry(Generic[T]):
    """Name -> strategy class lookup shared by renderers and handlers."""

    def __init__(self) -> None:
        self._blueprints: dict[str, Callable[..., T]] = {}

    def register(self, name: str, blueprint: Callable[..., T]) -> None:
        if name in self._blueprints:
            raise ValueError(f"Blueprint '{name}' is already registered")
        self._blueprints[name] = blueprint

    def create(self, name: str, **kwargs: Any) -> T:
        if name not in self._blueprints:
            raise ValueError(f"Blueprint '{name}' not registered")
        return self._blueprints[name](**kwargs)

    def get_available_products(self) -> list[str]:
        return list(self._blueprints)

    def register_in(self, name: str) -> Callable[[Any], Any]:
        def decorator(cls: Any) -> Any:
            self.register(name, cls)
            return cls

        return decorator
