"""Filter and sort criteria for the portfolio dashboard."""

from dataclasses import dataclass, replace
from typing import Any, Mapping

from portfolio_dash.models.enums import (
    PaymentStatus,
    PropertySortField,
    PropertyStatus,
    PropertyType,
    SortDirection,
)

# Query parameter name -> PropertyFilters field for the dashboard quick stats
QUICK_FILTER_PARAMS: dict[str, str] = {
    "needsAttention": "needs_attention",
    "hasOverduePayment": "has_overdue_payment",
    "leaseExpiringSoon": "lease_expiring_soon",
}


@dataclass(frozen=True)
class PropertyFilters:
    """Narrowing criteria selected by the landlord.

    Every field defaults to a falsy value; a falsy field never excludes
    anything.
    """

    search_term: str = ""
    status: PropertyStatus | None = None
    property_type: PropertyType | None = None
    city: str | None = None
    has_overdue_payment: bool = False
    lease_expiring_soon: bool = False  # within 60 days
    needs_attention: bool = False

    def merge(self, **changes: Any) -> "PropertyFilters":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_FILTERS = PropertyFilters()


@dataclass(frozen=True)
class PaymentFilters:
    """Narrowing criteria for the payment list."""

    search_term: str = ""
    status: PaymentStatus | None = None
    property_id: str | None = None
    month: str | None = None  # YYYY-MM


@dataclass(frozen=True)
class SortOptions:
    """Sort hint passed through to the presentation layer."""

    field: PropertySortField = PropertySortField.ADDRESS
    direction: SortDirection = SortDirection.ASC


DEFAULT_SORT = SortOptions()


def quick_filters_from_params(params: Mapping[str, str]) -> dict[str, bool]:
    """Extract quick-stat filter flags from URL query parameters.

    Only the literal string ``"true"`` enables a flag; anything else is
    ignored.

    Parameters
    ----------
    params : Mapping[str, str]
        Query parameters, keyed by their camelCase names.

    Returns
    -------
    dict[str, bool]
        ``PropertyFilters`` field updates, empty when no quick stat is set.
    """
    return {
        field_name: True
        for param, field_name in QUICK_FILTER_PARAMS.items()
        if params.get(param) == "true"
    }
