from beanie import Indexed

from healthhub.constants import ApprovalStatus, AvailabilityStatus, PartnerStatus
from healthhub.models.base import TimestampedDocument


class DeliveryPartner(TimestampedDocument):
    """Rider who signs up from the partner app and waits for superadmin approval."""

    name: str
    email: str | None = None
    phoneNumber: Indexed(str, unique=True)
    password: str | None = None
    avatar: str | None = None

    vehicleType: str | None = None
    vehicleNumber: str | None = None
    licenseNumber: str | None = None

    approvalStatus: ApprovalStatus = ApprovalStatus.PENDING
    status: PartnerStatus = PartnerStatus.ACTIVE
    availabilityStatus: AvailabilityStatus = AvailabilityStatus.UNAVAILABLE
    isBlocked: bool = False

    class Settings:
        name = "delivery_partners"
