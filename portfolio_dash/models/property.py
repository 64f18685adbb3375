"""Property models for the landlord portfolio."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from portfolio_dash.models.enums import AttentionReason, PropertyStatus, PropertyType


@dataclass(frozen=True)
class Tenant:
    """Tenant occupying (or holding a reservation on) a property."""

    tenant_id: str
    name: str
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class Property:
    """Rental property in a landlord's portfolio."""

    property_id: str
    address: str
    city: str
    postal_code: str
    property_type: PropertyType
    status: PropertyStatus
    monthly_rent: Decimal
    tenant: Tenant | None
    lease_expires: datetime | None
    created_at: datetime
    updated_at: datetime
    images: tuple[str, ...] = field(default_factory=tuple)
    currency: str = "NOK"


@dataclass(frozen=True)
class PropertyWithStatus(Property):
    """Property enriched with derived attention, overdue and expiry fields."""

    needs_attention: bool = False
    attention_reason: AttentionReason | None = None
    days_until_lease_expiry: int | None = None
    has_overdue_payment: bool = False
