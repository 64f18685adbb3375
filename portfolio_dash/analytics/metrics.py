"""Portfolio metrics over the property collection."""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from portfolio_dash.models import (
    PortfolioMetrics,
    Property,
    PropertyDistribution,
    PropertyStatus,
    PropertyType,
    StatusCounts,
)

ZERO = Decimal("0")
_WHOLE = Decimal("1")


def _round_half_up(value: Decimal) -> Decimal:
    return value.quantize(_WHOLE, rounding=ROUND_HALF_UP)


def _rented(properties: Sequence[Property]) -> list[Property]:
    return [p for p in properties if p.status == PropertyStatus.RENTED]


def calculate_metrics(properties: Sequence[Property]) -> PortfolioMetrics:
    """Calculate occupancy and monthly income.

    Parameters
    ----------
    properties : Sequence[Property]
        All properties in the portfolio.

    Returns
    -------
    PortfolioMetrics
        Occupancy is a rounded percentage (0 for an empty portfolio); income
        only counts rented properties.
    """
    total_properties = len(properties)
    rented = _rented(properties)

    occupancy_rate = 0
    if total_properties > 0:
        occupancy_rate = int(_round_half_up(Decimal(len(rented)) * 100 / total_properties))

    monthly_income = sum((p.monthly_rent for p in rented), ZERO)

    return PortfolioMetrics(
        total_properties=total_properties,
        occupancy_rate=occupancy_rate,
        monthly_income=monthly_income,
    )


def calculate_average_rent(properties: Sequence[Property]) -> Decimal:
    """Mean rent of rented properties, rounded to a whole amount."""
    rented = _rented(properties)
    if not rented:
        return ZERO

    total_income = sum((p.monthly_rent for p in rented), ZERO)
    return _round_half_up(total_income / len(rented))


def count_by_status(properties: Sequence[Property]) -> StatusCounts:
    """Count properties per status."""
    counts = Counter(PropertyStatus(p.status) for p in properties)
    return StatusCounts(
        available=counts[PropertyStatus.AVAILABLE],
        rented=counts[PropertyStatus.RENTED],
        reserved=counts[PropertyStatus.RESERVED],
    )


def calculate_distribution(properties: Sequence[Property]) -> PropertyDistribution:
    """Count properties by type, city and status."""
    return PropertyDistribution(
        by_type=dict(Counter(PropertyType(p.property_type).value for p in properties)),
        by_city=dict(Counter(p.city for p in properties)),
        by_status=dict(Counter(PropertyStatus(p.status).value for p in properties)),
    )
