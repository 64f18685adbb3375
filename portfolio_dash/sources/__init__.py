"""Portfolio data sources."""

from portfolio_dash.sources.loader import LOAD_ERROR_MESSAGE, load_portfolio, load_property_detail
from portfolio_dash.sources.portfolio import (
    SERVER_ERROR_ID,
    PortfolioDataSource,
    PortfolioPayload,
    validate_property_id,
)

__all__ = [
    "LOAD_ERROR_MESSAGE",
    "PortfolioDataSource",
    "PortfolioPayload",
    "SERVER_ERROR_ID",
    "load_portfolio",
    "load_property_detail",
    "validate_property_id",
]
