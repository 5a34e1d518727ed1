from beanie import Indexed
from beanie import PydanticObjectId as OID

from healthhub.constants import Role
from healthhub.models.base import TimestampedDocument


class Admin(TimestampedDocument):
    """Back-office account.

    - superadmin: platform operator, no partner link.
    - pathology / pharmacy: created together with their partner entity and
      linked both ways (pathologyCenterId / pharmacyId <-> adminId).
    """

    name: str
    email: Indexed(str, unique=True)
    phoneNumber: str | None = None
    password: str
    role: Role
    avatar: str | None = None
    isActive: bool = True

    pathologyCenterId: OID | None = None
    pharmacyId: OID | None = None

    class Settings:
        name = "admins"
