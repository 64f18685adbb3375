"""Attention annotation for properties.

A property needs attention when it has an overdue payment, its lease has
expired, or its lease expires within 60 days. When several hold, the first
row of ``ATTENTION_PRIORITY`` wins.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Callable, Iterable, Sequence

from portfolio_dash.analytics.payments import has_overdue_payment
from portfolio_dash.analytics.temporal import (
    days_until_expiry,
    is_expiring_soon,
    is_lease_expired,
)
from portfolio_dash.models import (
    AttentionItem,
    AttentionReason,
    Property,
    PropertyWithStatus,
    RentPayment,
    Severity,
)


@dataclass(frozen=True)
class AttentionFacts:
    """Raw conditions evaluated for one property."""

    has_overdue: bool
    expired: bool
    expiring_soon: bool
    days_until_lease_expiry: int | None = None


# Ordered decision table: earlier rows take precedence.
ATTENTION_PRIORITY: tuple[tuple[AttentionReason, Callable[[AttentionFacts], bool]], ...] = (
    (AttentionReason.OVERDUE_RENT, lambda facts: facts.has_overdue),
    (AttentionReason.LEASE_EXPIRED, lambda facts: facts.expired),
    (AttentionReason.LEASE_EXPIRING_SOON, lambda facts: facts.expiring_soon),
)

SEVERITY_BY_REASON: dict[AttentionReason, Severity] = {
    AttentionReason.OVERDUE_RENT: Severity.HIGH,
    AttentionReason.LEASE_EXPIRED: Severity.MEDIUM,
    AttentionReason.LEASE_EXPIRING_SOON: Severity.LOW,
}

_ACTION_LABELS: dict[AttentionReason, str] = {
    AttentionReason.OVERDUE_RENT: "Contact tenant",
    AttentionReason.LEASE_EXPIRED: "Renew lease",
    AttentionReason.LEASE_EXPIRING_SOON: "Plan renewal",
}


def evaluate_attention_facts(
    prop: Property,
    payments: Iterable[RentPayment],
    reference: datetime | None = None,
) -> AttentionFacts:
    """Evaluate every attention condition for a property."""
    lease_expires = prop.lease_expires
    if reference is None and lease_expires is not None:
        reference = datetime.now(lease_expires.tzinfo)

    return AttentionFacts(
        has_overdue=has_overdue_payment(prop, payments),
        expired=is_lease_expired(lease_expires, reference),
        expiring_soon=is_expiring_soon(lease_expires, reference),
        days_until_lease_expiry=days_until_expiry(lease_expires, reference),
    )


def matching_reasons(facts: AttentionFacts) -> list[AttentionReason]:
    """All reasons that hold, in priority order."""
    return [reason for reason, applies in ATTENTION_PRIORITY if applies(facts)]


def resolve_attention_reason(facts: AttentionFacts) -> AttentionReason | None:
    """Highest-priority reason that holds, or None."""
    for reason, applies in ATTENTION_PRIORITY:
        if applies(facts):
            return reason
    return None


def needs_attention(
    prop: Property,
    payments: Iterable[RentPayment],
    reference: datetime | None = None,
) -> bool:
    """Check if a property needs the landlord's attention."""
    facts = evaluate_attention_facts(prop, payments, reference)
    return resolve_attention_reason(facts) is not None


def add_status_to_property(
    prop: Property,
    payments: Sequence[RentPayment],
    reference: datetime | None = None,
) -> PropertyWithStatus:
    """Return an annotated copy of ``prop``; the source property is untouched.

    Parameters
    ----------
    prop : Property
        Property to annotate.
    payments : Sequence[RentPayment]
        All payments (filtered to the property internally).
    reference : datetime | None
        Reference instant for lease classification (defaults to now).

    Returns
    -------
    PropertyWithStatus
        Property plus ``needs_attention``, ``attention_reason``,
        ``days_until_lease_expiry`` and ``has_overdue_payment``.
    """
    facts = evaluate_attention_facts(prop, payments, reference)
    reason = resolve_attention_reason(facts)

    # Shallow copy: asdict() would turn the tenant into a plain dict
    base = {f.name: getattr(prop, f.name) for f in fields(Property)}
    return PropertyWithStatus(
        **base,
        needs_attention=reason is not None,
        attention_reason=reason,
        days_until_lease_expiry=facts.days_until_lease_expiry,
        has_overdue_payment=facts.has_overdue,
    )


def _attention_message(prop: PropertyWithStatus, reason: AttentionReason) -> str:
    days = prop.days_until_lease_expiry
    if reason == AttentionReason.OVERDUE_RENT:
        return f"Rent payment for {prop.address} is overdue"
    if reason == AttentionReason.LEASE_EXPIRED:
        return f"Lease for {prop.address} expired {abs(days or 0)} days ago"
    return f"Lease for {prop.address} expires in {days} days"


def build_attention_items(properties: Iterable[PropertyWithStatus]) -> list[AttentionItem]:
    """Build one attention item per flagged property, keeping input order."""
    items = []
    for prop in properties:
        if prop.attention_reason is None:
            continue
        reason = AttentionReason(prop.attention_reason)
        items.append(
            AttentionItem(
                property_id=prop.property_id,
                property_address=prop.address,
                reason=reason,
                severity=SEVERITY_BY_REASON[reason],
                message=_attention_message(prop, reason),
                action_label=_ACTION_LABELS[reason],
            )
        )
    return items
