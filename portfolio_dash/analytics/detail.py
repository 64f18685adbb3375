"""View model for a single property's detail page."""

from datetime import datetime
from typing import Sequence

from portfolio_dash.analytics.attention import evaluate_attention_facts, matching_reasons
from portfolio_dash.models import (
    ErrorState,
    LoadingState,
    Property,
    PropertyDetailViewModel,
    RentPayment,
)

LOADING_MESSAGE = "Loading property..."


def payment_history(property_id: str, payments: Sequence[RentPayment]) -> list[RentPayment]:
    """Payments for one property, newest billing month first."""
    history = [p for p in payments if p.property_id == property_id]
    return sorted(history, key=lambda p: (p.month, p.due_date), reverse=True)


def build_property_detail(
    prop: Property | None,
    payments: Sequence[RentPayment],
    loading: bool = False,
    error: str | None = None,
    *,
    reference_time: datetime | None = None,
) -> PropertyDetailViewModel:
    """Build the detail view model.

    Unlike the portfolio view, every applicable attention reason is listed,
    highest priority first.
    """
    loading_state = LoadingState(
        is_loading=loading,
        loading_message=LOADING_MESSAGE if loading else None,
    )
    error_state = ErrorState(has_error=bool(error), error_message=error)

    if prop is None:
        return PropertyDetailViewModel(
            loading=loading_state,
            error=error_state,
            property=None,
            current_payment=None,
            payment_history=(),
            has_property=False,
            has_tenant=False,
            days_until_lease_expiry=None,
            needs_attention=False,
            attention_reasons=(),
        )

    history = payment_history(prop.property_id, payments)
    facts = evaluate_attention_facts(prop, history, reference_time)
    reasons = tuple(matching_reasons(facts))

    return PropertyDetailViewModel(
        loading=loading_state,
        error=error_state,
        property=prop,
        current_payment=history[0] if history else None,
        payment_history=tuple(history),
        has_property=True,
        has_tenant=prop.tenant is not None,
        days_until_lease_expiry=facts.days_until_lease_expiry,
        needs_attention=bool(reasons),
        attention_reasons=reasons,
    )
