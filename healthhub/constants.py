from enum import Enum


class Role(str, Enum):
    """Admin roles for RBAC."""
    SUPERADMIN = "superadmin"
    PATHOLOGY = "pathology"
    PHARMACY = "pharmacy"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PartnerStatus(str, Enum):
    """Operational status shared by pathology centers, pharmacies and delivery partners."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class ApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AvailabilityStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ON_DELIVERY = "on-delivery"


class OrderType(str, Enum):
    PHARMACY = "pharmacy"
    PATHOLOGY = "pathology"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ASSIGNED = "assigned"
    DISPATCHED = "dispatched"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class PaymentMethod(str, Enum):
    UPI = "UPI"
    CARD = "card"
    CASH = "cash"
    WALLET = "wallet"


# Fields that never leave the API, whatever the collection.
SENSITIVE_FIELDS = {"password", "otp", "revision_id"}
