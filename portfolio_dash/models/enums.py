"""Enumeration types for portfolio entities."""

from enum import Enum


class PropertyType(str, Enum):
    FLAT = "flat"
    HOUSE = "house"
    STUDIO = "studio"


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    RESERVED = "reserved"


class PaymentStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class AttentionReason(str, Enum):
    OVERDUE_RENT = "overdue_rent"
    LEASE_EXPIRING_SOON = "lease_expiring_soon"
    LEASE_EXPIRED = "lease_expired"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PropertySortField(str, Enum):
    ADDRESS = "address"
    RENT = "rent"
    STATUS = "status"
    LEASE_EXPIRY = "lease_expiry"
    TENANT = "tenant"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
