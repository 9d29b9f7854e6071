from typing import Any, Callable

import orjson
import structlog
from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import ProcessorReturnValue

from .enums import RendererNames
from .interfaces import ILogProcessor, StrategyRegistry

renderer_registry: StrategyRegistry[ILogProcessor] = StrategyRegistry()


class RendererBuilder:
    def __init__(
        self, registry: StrategyRegistry[ILogProcessor] = renderer_registry
    ) -> None:
        self.registry = registry

    def build_renderer(self, debug: bool) -> ILogProcessor:
        if not debug:
            return self.registry.create(RendererNames.JSON)
        return self.registry.create(
            RendererNames.CONSOLE, colors=True, pad_event_to=30
        )


def orjson_dumps(
    data: Any,
    default: Callable[[Any], Any] | None = None,
    **_: Any,
) -> str:
    return orjson.dumps(data, default=default or str).decode("utf-8")


@renderer_registry.register_in(RendererNames.JSON)
class JsonRenderStrategy:
    def __init__(self) -> None:
        self.renderer: Processor = structlog.processors.JSONRenderer(
            serializer=orjson_dumps
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)


@renderer_registry.register_in(RendererNames.CONSOLE)
class ConsoleRenderStrategy:
    def __init__(self, colors: bool = True, pad_event_to: int = 30) -> None:
        self.renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=colors, pad_event_to=pad_event_to
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)
