from beanie import Indexed
from beanie import PydanticObjectId as OID

from healthhub.models.base import TimestampedDocument


class Medicine(TimestampedDocument):
    name: Indexed(str)
    genericName: str | None = None
    manufacturer: str | None = None
    category: str | None = None
    price: float
    mrp: float | None = None
    stock: int = 0
    description: str | None = None
    prescriptionRequired: bool = False
    isActive: bool = True

    # None means a catalogue item available to every pharmacy
    pharmacyId: OID | None = None

    class Settings:
        name = "medicines"
