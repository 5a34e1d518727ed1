from healthhub.constants import Role
from healthhub.models import Admin, Pharmacy
from healthhub.schemas import PharmacyCreate
from healthhub.services.partner_service import PartnerKind, PartnerService

PHARMACY = PartnerKind(
    model=Pharmacy,
    role=Role.PHARMACY,
    name_field="pharmacyName",
    id_field="pharmacyId",
    label="Pharmacy",
    search_fields=("pharmacyName", "email"),
)

pharmacies = PartnerService(PHARMACY)


async def create_pharmacy(payload: PharmacyCreate) -> tuple[Admin, Pharmacy]:
    """Onboard a pharmacy together with its `pharmacy` admin account."""
    return await pharmacies.create(payload.model_dump(exclude={"password"}), payload.password)
