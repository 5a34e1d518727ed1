from beanie import Indexed
from beanie import PydanticObjectId as OID

from healthhub.constants import PartnerStatus
from healthhub.models.base import TimestampedDocument


class Pharmacy(TimestampedDocument):
    pharmacyName: str
    ownerName: str | None = None
    email: Indexed(str, unique=True)
    phoneNumber: Indexed(str, unique=True)
    address: str
    licenseNumber: str | None = None
    licenceImage: str | None = None
    status: PartnerStatus = PartnerStatus.ACTIVE

    adminId: OID | None = None

    class Settings:
        name = "pharmacies"
