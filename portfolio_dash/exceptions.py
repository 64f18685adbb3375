"""Custom exception hierarchy for portfolio-dash."""


class PortfolioError(Exception):
    """Base exception for all portfolio-dash errors."""


class EntityNotFoundError(PortfolioError):
    """Raised when a referenced entity does not exist."""


class InvalidPropertyIdError(EntityNotFoundError):
    """Raised when a property id is blank or a placeholder such as ``"null"``."""


class DataSourceError(PortfolioError):
    """Raised when the portfolio data source fails to deliver data."""


class ServerError(DataSourceError):
    """Raised when the (simulated) server rejects a request."""


class ConfigurationError(PortfolioError):
    """Raised when configuration is invalid or missing."""


class SinkError(PortfolioError):
    """Raised when a snapshot export fails."""
