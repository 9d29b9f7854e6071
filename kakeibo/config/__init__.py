from .config import AppConfig, LedgerConfig, LoggingConfig, get_config

__all__ = ["AppConfig", "LedgerConfig", "LoggingConfig", "get_config"]
