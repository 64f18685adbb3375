"""Load the portfolio from a data source into the store."""

import asyncio
import logging

from portfolio_dash.analytics.detail import build_property_detail
from portfolio_dash.exceptions import EntityNotFoundError
from portfolio_dash.models import PropertyDetailViewModel
from portfolio_dash.sources.portfolio import PortfolioDataSource, validate_property_id
from portfolio_dash.store.portfolio import PortfolioStore

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load portfolio data"


async def load_portfolio(store: PortfolioStore, source: PortfolioDataSource) -> bool:
    """Fetch the portfolio and write it into ``store``.

    Overlapping calls are resolved last-write-wins: only the most recently
    started load may update the store. Any failure of the source is stored
    as an error message; cancellation clears the loading flag and propagates.

    Returns
    -------
    bool
        True if this call's result was applied to the store.
    """
    token = store.begin_load()
    try:
        payload = await source.load_portfolio_data()
    except asyncio.CancelledError:
        logger.warning("Portfolio load %d cancelled", token, extra={"load_token": token})
        if store.is_current_load(token):
            store.set_loading(False)
        raise
    except Exception:
        logger.exception("Portfolio load %d failed", token, extra={"load_token": token})
        return store.fail_load(token, LOAD_ERROR_MESSAGE)

    return store.complete_load(token, payload.properties, payload.payments)


async def load_property_detail(
    store: PortfolioStore,
    source: PortfolioDataSource,
    property_id: str | None,
) -> PropertyDetailViewModel:
    """Fetch one property and build its detail view from the store's payments.

    Raises
    ------
    InvalidPropertyIdError
        If ``property_id`` is blank or a placeholder.
    EntityNotFoundError
        If no property has that id.
    ServerError
        If the data source fails.
    """
    property_id = validate_property_id(property_id)
    logger.debug("Loading property detail", extra={"property_id": property_id})
    prop = await source.get_property_by_id(property_id)
    if prop is None:
        raise EntityNotFoundError(f'Property with ID "{property_id}" not found')

    return build_property_detail(prop, store.payments, reference_time=store.now())
