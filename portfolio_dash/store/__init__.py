"""Stateful container around the derivation pipeline."""

from portfolio_dash.store.portfolio import PortfolioStore

__all__ = ["PortfolioStore"]
