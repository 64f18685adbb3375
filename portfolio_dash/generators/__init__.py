"""Synthetic data generators."""

from portfolio_dash.generators.portfolio import PortfolioGenerator

__all__ = ["PortfolioGenerator"]
