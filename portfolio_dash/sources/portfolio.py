"""Asynchronous portfolio data source.

Stands in for a real backend: every call awaits a configurable latency and
then returns in-memory records, or fails.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from portfolio_dash.config import SOURCE_SYNTHETIC, DataSourceConfig
from portfolio_dash.exceptions import (
    DataSourceError,
    InvalidPropertyIdError,
    ServerError,
)
from portfolio_dash.models import Property, RentPayment
from portfolio_dash.sources.sample import SAMPLE_PAYMENTS, SAMPLE_PROPERTIES

logger = logging.getLogger(__name__)

# Requesting this id simulates a backend failure
SERVER_ERROR_ID = "Server_error"

_PLACEHOLDER_IDS = frozenset({"null", "undefined"})


@dataclass(frozen=True)
class PortfolioPayload:
    """Result of a successful portfolio load."""

    properties: tuple[Property, ...]
    payments: tuple[RentPayment, ...]


def validate_property_id(property_id: str | None) -> str:
    """Reject blank ids and the ``"null"``/``"undefined"`` placeholders.

    Raises
    ------
    InvalidPropertyIdError
        If the id cannot refer to a property.
    """
    if property_id is None or not property_id.strip() or property_id in _PLACEHOLDER_IDS:
        raise InvalidPropertyIdError(f"Invalid property ID: {property_id!r}")
    return property_id


class PortfolioDataSource:
    """Serve a fixed set of properties and payments asynchronously."""

    def __init__(
        self,
        properties: Sequence[Property] = SAMPLE_PROPERTIES,
        payments: Sequence[RentPayment] = SAMPLE_PAYMENTS,
        latency_seconds: float = 0.8,
        fail_with: DataSourceError | None = None,
    ) -> None:
        """Initialize the data source.

        Parameters
        ----------
        properties : Sequence[Property]
            Properties to serve (default: the sample portfolio).
        payments : Sequence[RentPayment]
            Payments to serve.
        latency_seconds : float
            Simulated round-trip time per call.
        fail_with : DataSourceError | None
            When set, every bulk load raises this error after the delay.
        """
        self._properties = tuple(properties)
        self._payments = tuple(payments)
        self.latency_seconds = latency_seconds
        self.fail_with = fail_with

    @classmethod
    def from_config(
        cls,
        config: DataSourceConfig,
        reference_time: datetime | None = None,
    ) -> "PortfolioDataSource":
        """Create the sample source, or a synthetic one from ``PortfolioGenerator``.

        ``reference_time`` anchors synthetic lease dates and the billing month.
        """
        if config.source == SOURCE_SYNTHETIC:
            from portfolio_dash.generators import PortfolioGenerator

            generator = PortfolioGenerator(
                seed=config.seed, locale=config.locale, reference_time=reference_time
            )
            properties, payments = generator.generate_portfolio(config.num_properties)
            return cls(properties, payments, latency_seconds=config.latency_seconds)

        return cls(latency_seconds=config.latency_seconds)

    async def _delay(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    async def load_portfolio_data(self) -> PortfolioPayload:
        """Load all properties and payments."""
        await self._delay()
        if self.fail_with is not None:
            raise self.fail_with
        logger.debug(
            "Serving %d properties and %d payments", len(self._properties), len(self._payments)
        )
        return PortfolioPayload(properties=self._properties, payments=self._payments)

    async def get_properties(self) -> tuple[Property, ...]:
        await self._delay()
        if self.fail_with is not None:
            raise self.fail_with
        return self._properties

    async def get_payments(self) -> tuple[RentPayment, ...]:
        await self._delay()
        if self.fail_with is not None:
            raise self.fail_with
        return self._payments

    async def get_property_by_id(self, property_id: str) -> Property | None:
        """Look up one property.

        Raises
        ------
        ServerError
            For the ``SERVER_ERROR_ID`` sentinel.
        """
        await self._delay()
        if property_id == SERVER_ERROR_ID:
            raise ServerError("Server error: Failed to fetch property data")

        for prop in self._properties:
            if prop.property_id == property_id:
                return prop
        return None
