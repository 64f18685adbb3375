"""Rent payment models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from portfolio_dash.models.enums import PaymentStatus


@dataclass(frozen=True)
class RentPayment:
    """Monthly rent payment for a property.

    ``status`` is authoritative: an unpaid payment past its due date is only
    overdue when the source says so.
    """

    payment_id: str
    property_id: str
    property_address: str
    tenant_id: str
    tenant_name: str
    amount: Decimal
    due_date: datetime
    paid_date: datetime | None
    status: PaymentStatus
    month: str  # YYYY-MM
    currency: str = "NOK"


@dataclass(frozen=True)
class PaymentSummary:
    """Payment totals and counts grouped by status."""

    total_expected: Decimal
    total_paid: Decimal
    total_pending: Decimal
    total_overdue: Decimal
    paid_count: int
    pending_count: int
    overdue_count: int


@dataclass(frozen=True)
class MonthlyPaymentOverview:
    """Collection overview for one billing month."""

    month: str
    total_expected: Decimal
    total_collected: Decimal
    collection_rate: int  # percentage (0-100)
    payments: tuple[RentPayment, ...]
