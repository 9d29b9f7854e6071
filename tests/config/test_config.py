"""Tests for the settings layer."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kakeibo.config import AppConfig, LedgerConfig, LoggingConfig, get_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_defaults() -> None:
    config = AppConfig()

    assert config.ledger.default_page_limit == 20
    assert config.ledger.default_order == "desc"
    assert config.ledger.default_category_page_limit == 30
    assert config.logger.app_name == "Kakeibo"
    assert config.logger.log_level == "INFO"
    assert config.logger.enable_file_logging is False
    assert config.logger_adapter is config.logger


def test_nested_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KAKEIBO_LEDGER__DEFAULT_PAGE_LIMIT", "50")
    monkeypatch.setenv("KAKEIBO_LEDGER__DEFAULT_ORDER", "asc")
    monkeypatch.setenv("KAKEIBO_LOGGER__LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.ledger.default_page_limit == 50
    assert config.ledger.default_order == "asc"
    assert config.logger.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "KAKEIBO_LOGGER__APP_NAME=Household\n", encoding="utf-8"
    )
    assert AppConfig().logger.app_name == "Household"


@pytest.mark.parametrize("limit", [0, 101])
def test_page_limit_is_bounded(limit: int) -> None:
    with pytest.raises(ValidationError):
        LedgerConfig(default_page_limit=limit)
    with pytest.raises(ValidationError):
        LedgerConfig(default_category_page_limit=limit)


def test_order_is_restricted() -> None:
    with pytest.raises(ValidationError):
        LedgerConfig(default_order="newest")


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingConfig(log_level="verbose")


def test_get_config_is_cached() -> None:
    assert get_config() is get_config()
