import sys
from logging import Handler, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .enums import HandlerNames
from .interfaces import IHandler, ILoggingConfig, StrategyRegistry

handler_registry: StrategyRegistry[IHandler] = StrategyRegistry()


class HandlerBuilder:
    def __init__(
        self, registry: StrategyRegistry[IHandler] = handler_registry
    ) -> None:
        self.registry = registry

    def build_handler_chain(
        self, logging_config: ILoggingConfig
    ) -> list[Handler]:
        handlers = [self.registry.create(HandlerNames.CONSOLE)()]
        if logging_config.enable_file_logging:
            Path(logging_config.logs_dir).mkdir(parents=True, exist_ok=True)
            file_strategy = self.registry.create(
                HandlerNames.FILE, logging_config=logging_config
            )
            handlers.append(file_strategy())
        return handlers


@handler_registry.register_in(HandlerNames.CONSOLE)
class ConsoleHandlerStrategy:
    def __call__(self) -> Handler:
        return StreamHandler(sys.stdout)


@handler_registry.register_in(HandlerNames.FILE)
class FileHandlerStrategy:
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.logging_config = logging_config

    def __call__(self) -> Handler:
        path = Path(self.logging_config.logs_dir) / (
            self.logging_config.logs_file_name
        )
        return RotatingFileHandler(
            filename=str(path),
            maxBytes=self.logging_config.max_file_size_mb * 1024 * 1024,
            backupCount=self.logging_config.backup_count,
            encoding="utf-8",
        )
