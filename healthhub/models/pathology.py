from typing import Any

from beanie import Indexed
from beanie import PydanticObjectId as OID
from pydantic import Field

from healthhub.constants import PartnerStatus
from healthhub.models.base import TimestampedDocument


class PathologyCenter(TimestampedDocument):
    """Diagnostic lab onboarded by the superadmin; owned by exactly one pathology Admin."""

    centerName: str
    ownerName: str | None = None
    email: Indexed(str, unique=True)
    phoneNumber: Indexed(str, unique=True)
    address: str
    labs: list[str] = Field(default_factory=list)
    bookings: list[Any] = Field(default_factory=list)
    sampleCollection: list[Any] = Field(default_factory=list)
    status: PartnerStatus = PartnerStatus.ACTIVE

    adminId: OID | None = None

    class Settings:
        name = "pathology_centers"
