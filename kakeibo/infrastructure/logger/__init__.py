from .interfaces import ILoggingConfig
from .manager import (
    LoggerManager,
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "ILoggingConfig",
    "LoggerManager",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
