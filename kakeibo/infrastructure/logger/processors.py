from typing import Any

import structlog
from structlog.types import EventDict

from kakeibo.domain.values import DomainError

from .interfaces import ILoggingConfig, ILogProcessor

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogMessageCleaner:
    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event = event_dict.get("event")
        if isinstance(event, str):
            event_dict["event"] = event.strip()
        return event_dict


class AppContextAdder:
    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", self.app_name)
        return event_dict


class DomainErrorFlattener:
    """
    Replace DomainError values bound to a log call with plain dicts.

    Keeps the JSON output serialisable and lets log queries filter on the
    error name, e.g. ``logger.warning("rejected", error=exc)`` renders as
    ``{"error": {"name": "CategoryNotFoundError", "message": "..."}}``.
    """

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, DomainError):
                event_dict[key] = {
                    "name": value.name,
                    "message": value.message,
                }
        return event_dict


class ProcessorBuilder:
    def __init__(
        self, additional_processors: list[ILogProcessor] | None = None
    ) -> None:
        self.additional_processors = additional_processors or []

    def build_base_chain(self) -> list[ILogProcessor]:
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

    def build_shared_chain(
        self, logging_config: ILoggingConfig
    ) -> list[ILogProcessor]:
        chain = self.build_base_chain()
        chain.append(AppContextAdder(app_name=logging_config.app_name))
        chain.append(LogMessageCleaner())
        chain.append(DomainErrorFlattener())
        chain.extend(self.additional_processors)
        return chain

    def build_formatter_wrapper(self) -> ILogProcessor:
        return structlog.stdlib.ProcessorFormatter.wrap_for_formatter
