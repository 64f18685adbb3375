"""Configuration management for portfolio-dash."""

import os
from dataclasses import dataclass, field

from portfolio_dash.exceptions import ConfigurationError

SOURCE_SAMPLE = "sample"
SOURCE_SYNTHETIC = "synthetic"
_SOURCES = (SOURCE_SAMPLE, SOURCE_SYNTHETIC)
_LOG_FORMATS = ("standard", "json")


@dataclass
class DataSourceConfig:
    """Simulated data source configuration."""

    latency_seconds: float = 0.8
    source: str = SOURCE_SAMPLE  # "sample" or "synthetic"
    num_properties: int = 12  # synthetic source only
    seed: int | None = None
    locale: str = "no_NO"

    def __post_init__(self) -> None:
        if self.source not in _SOURCES:
            raise ConfigurationError(
                f"Unknown data source {self.source!r}, expected one of {_SOURCES}"
            )
        if self.latency_seconds < 0:
            raise ConfigurationError("latency_seconds must not be negative")
        if self.num_properties < 0:
            raise ConfigurationError("num_properties must not be negative")


@dataclass
class DashboardConfig:
    """Main configuration for portfolio-dash."""

    data_source: DataSourceConfig = field(default_factory=DataSourceConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    currency: str = "NOK"

    def __post_init__(self) -> None:
        if self.log_format not in _LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {_LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create config from environment variables."""
        try:
            data_source = DataSourceConfig(
                latency_seconds=float(os.getenv("PORTFOLIO_LATENCY", "0.8")),
                source=os.getenv("PORTFOLIO_SOURCE", SOURCE_SAMPLE),
                num_properties=int(os.getenv("PORTFOLIO_NUM_PROPERTIES", "12")),
                seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
                locale=os.getenv("FAKER_LOCALE", "no_NO"),
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        return cls(
            data_source=data_source,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
