"""Tests for config and logging."""

import json
import logging
import sys

import pytest

from portfolio_dash.config import (
    SOURCE_SAMPLE,
    SOURCE_SYNTHETIC,
    DashboardConfig,
    DataSourceConfig,
)
from portfolio_dash.exceptions import ConfigurationError
from portfolio_dash.logging import ContextFormatter, JsonFormatter, get_logger, setup_logging

_ENV_VARS = [
    "PORTFOLIO_LATENCY",
    "PORTFOLIO_SOURCE",
    "PORTFOLIO_NUM_PROPERTIES",
    "SEED",
    "FAKER_LOCALE",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable read by DashboardConfig.from_env."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDataSourceConfig:
    """Tests for DataSourceConfig."""

    def test_default_values(self) -> None:
        config = DataSourceConfig()

        assert config.latency_seconds == 0.8
        assert config.source == SOURCE_SAMPLE
        assert config.num_properties == 12
        assert config.seed is None
        assert config.locale == "no_NO"

    def test_custom_values(self) -> None:
        config = DataSourceConfig(
            latency_seconds=0,
            source=SOURCE_SYNTHETIC,
            num_properties=50,
            seed=7,
            locale="en_US",
        )

        assert config.source == SOURCE_SYNTHETIC
        assert config.num_properties == 50
        assert config.seed == 7

    def test_unknown_source(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown data source"):
            DataSourceConfig(source="postgres")

    def test_negative_latency(self) -> None:
        with pytest.raises(ConfigurationError):
            DataSourceConfig(latency_seconds=-1)

    def test_negative_num_properties(self) -> None:
        with pytest.raises(ConfigurationError):
            DataSourceConfig(num_properties=-1)


class TestDashboardConfig:
    """Tests for DashboardConfig."""

    def test_default_values(self) -> None:
        config = DashboardConfig()

        assert isinstance(config.data_source, DataSourceConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.currency == "NOK"

    def test_unknown_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            DashboardConfig(log_format="xml")

    def test_from_env_default(self, clean_env) -> None:
        config = DashboardConfig.from_env()

        assert config.data_source.latency_seconds == 0.8
        assert config.data_source.source == SOURCE_SAMPLE
        assert config.data_source.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_custom(self, clean_env) -> None:
        clean_env.setenv("PORTFOLIO_LATENCY", "0")
        clean_env.setenv("PORTFOLIO_SOURCE", "synthetic")
        clean_env.setenv("PORTFOLIO_NUM_PROPERTIES", "25")
        clean_env.setenv("SEED", "12345")
        clean_env.setenv("FAKER_LOCALE", "sv_SE")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = DashboardConfig.from_env()

        assert config.data_source.latency_seconds == 0.0
        assert config.data_source.source == SOURCE_SYNTHETIC
        assert config.data_source.num_properties == 25
        assert config.data_source.seed == 12345
        assert config.data_source.locale == "sv_SE"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_number(self, clean_env) -> None:
        clean_env.setenv("PORTFOLIO_LATENCY", "fast")

        with pytest.raises(ConfigurationError, match="Invalid numeric setting"):
            DashboardConfig.from_env()

    def test_from_env_invalid_source(self, clean_env) -> None:
        clean_env.setenv("PORTFOLIO_SOURCE", "kafka")

        with pytest.raises(ConfigurationError):
            DashboardConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("portfolio_dash").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_logs_go_to_stderr(self) -> None:
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stderr

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING
        assert logging.getLogger("asyncio").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        values = {
            "name": "portfolio_dash.store",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Portfolio load %d started",
            "args": (1,),
            "exc_info": None,
        }
        values.update(kwargs)
        return logging.LogRecord(**values)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "portfolio_dash.store"
        assert data["message"] == "Portfolio load 1 started"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info))
        )

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_load_context(self) -> None:
        record = self._record()
        record.load_token = 3
        record.property_id = "prop-2"

        data = json.loads(JsonFormatter().format(record))

        assert data["load_token"] == 3
        assert data["property_id"] == "prop-2"
        assert "store_version" not in data


class TestContextFormatter:
    """Tests for ContextFormatter."""

    def _record(self, **context) -> logging.LogRecord:
        record = logging.LogRecord(
            "portfolio_dash.store", logging.INFO, "/path/to/file.py", 42, "Portfolio load started", (), None
        )
        for key, value in context.items():
            setattr(record, key, value)
        return record

    def test_appends_context(self) -> None:
        formatter = ContextFormatter(fmt="%(message)s")

        result = formatter.format(self._record(load_token=2, store_version=7))

        assert result == "Portfolio load started | load_token=2 store_version=7"

    def test_without_context(self) -> None:
        formatter = ContextFormatter(fmt="%(message)s")

        assert formatter.format(self._record()) == "Portfolio load started"

    def test_standard_setup_uses_context_formatter(self) -> None:
        setup_logging(format_type="standard")

        assert isinstance(logging.getLogger().handlers[0].formatter, ContextFormatter)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("portfolio_dash.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "portfolio_dash.test"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for portfolio_dash __init__.py."""

    def test_version_exported(self) -> None:
        from portfolio_dash import __version__

        assert isinstance(__version__, str)
