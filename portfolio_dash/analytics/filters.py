"""Pure filtering over annotated properties and payments.

``apply_filters`` runs a fixed sequence of steps. Each step is skipped when
its filter value is falsy, and each enabled step only ever removes
properties, so the result is an order-preserving subset of the input.
"""

from typing import Callable, Sequence

from portfolio_dash.analytics.temporal import is_within_expiry_window
from portfolio_dash.models import (
    PaymentFilters,
    PropertyFilters,
    PropertyWithStatus,
    RentPayment,
)


def filter_by_search_term(
    properties: Sequence[PropertyWithStatus],
    search_term: str,
) -> list[PropertyWithStatus]:
    """Match address, city or tenant name, case-insensitively.

    A property without a tenant can still match on address or city.
    """
    if not search_term:
        return list(properties)

    needle = search_term.lower()

    def matches(prop: PropertyWithStatus) -> bool:
        if needle in prop.address.lower() or needle in prop.city.lower():
            return True
        return prop.tenant is not None and needle in prop.tenant.name.lower()

    return [prop for prop in properties if matches(prop)]


def filter_by_status(
    properties: Sequence[PropertyWithStatus],
    status: str | None,
) -> list[PropertyWithStatus]:
    if not status:
        return list(properties)
    return [prop for prop in properties if prop.status == status]


def filter_by_type(
    properties: Sequence[PropertyWithStatus],
    property_type: str | None,
) -> list[PropertyWithStatus]:
    if not property_type:
        return list(properties)
    return [prop for prop in properties if prop.property_type == property_type]


def filter_by_city(
    properties: Sequence[PropertyWithStatus],
    city: str | None,
) -> list[PropertyWithStatus]:
    if not city:
        return list(properties)
    return [prop for prop in properties if prop.city == city]


def filter_with_overdue_payments(
    properties: Sequence[PropertyWithStatus],
) -> list[PropertyWithStatus]:
    return [prop for prop in properties if prop.has_overdue_payment]


def filter_expiring_soon(
    properties: Sequence[PropertyWithStatus],
) -> list[PropertyWithStatus]:
    """Keep leases expiring in 1 to 60 days."""
    return [prop for prop in properties if is_within_expiry_window(prop.days_until_lease_expiry)]


def filter_needs_attention(
    properties: Sequence[PropertyWithStatus],
) -> list[PropertyWithStatus]:
    return [prop for prop in properties if prop.needs_attention]


_Step = Callable[[list[PropertyWithStatus], PropertyFilters], list[PropertyWithStatus]]

# (filter field, step) in application order
FILTER_STEPS: tuple[tuple[str, _Step], ...] = (
    ("search_term", lambda props, f: filter_by_search_term(props, f.search_term)),
    ("status", lambda props, f: filter_by_status(props, f.status)),
    ("property_type", lambda props, f: filter_by_type(props, f.property_type)),
    ("city", lambda props, f: filter_by_city(props, f.city)),
    ("has_overdue_payment", lambda props, f: filter_with_overdue_payments(props)),
    ("lease_expiring_soon", lambda props, f: filter_expiring_soon(props)),
    ("needs_attention", lambda props, f: filter_needs_attention(props)),
)


def apply_filters(
    properties: Sequence[PropertyWithStatus],
    filters: PropertyFilters,
) -> list[PropertyWithStatus]:
    """Apply every enabled filter in sequence.

    Parameters
    ----------
    properties : Sequence[PropertyWithStatus]
        Annotated properties.
    filters : PropertyFilters
        Filter criteria; falsy fields are ignored.

    Returns
    -------
    list[PropertyWithStatus]
        Properties passing every enabled filter, in input order.
    """
    filtered = list(properties)
    for field_name, step in FILTER_STEPS:
        if getattr(filters, field_name):
            filtered = step(filtered, filters)
    return filtered


def has_active_filters(filters: PropertyFilters) -> bool:
    """Check if any filter field is set."""
    return any(getattr(filters, field_name) for field_name, _ in FILTER_STEPS)


def apply_payment_filters(
    payments: Sequence[RentPayment],
    filters: PaymentFilters,
) -> list[RentPayment]:
    """Filter payments by search term, status, property and billing month.

    The search term matches the property address or the tenant name.
    """
    filtered = list(payments)

    if filters.search_term:
        needle = filters.search_term.lower()
        filtered = [
            p
            for p in filtered
            if needle in p.property_address.lower() or needle in p.tenant_name.lower()
        ]
    if filters.status:
        filtered = [p for p in filtered if p.status == filters.status]
    if filters.property_id:
        filtered = [p for p in filtered if p.property_id == filters.property_id]
    if filters.month:
        filtered = [p for p in filtered if p.month == filters.month]

    return filtered
