from healthhub.constants import Role
from healthhub.models import Admin, PathologyCenter
from healthhub.schemas import PathologyCenterCreate
from healthhub.services.partner_service import PartnerKind, PartnerService

PATHOLOGY = PartnerKind(
    model=PathologyCenter,
    role=Role.PATHOLOGY,
    name_field="centerName",
    id_field="pathologyCenterId",
    label="Pathology Center",
    search_fields=("centerName", "email"),
)

pathology_centers = PartnerService(PATHOLOGY)


async def create_pathology_center(payload: PathologyCenterCreate) -> tuple[Admin, PathologyCenter]:
    """Onboard a pathology center together with its `pathology` admin account."""
    fields = payload.model_dump(exclude={"password"})
    fields["bookings"] = fields.get("bookings") or []
    fields["sampleCollection"] = fields.get("sampleCollection") or []
    return await pathology_centers.create(fields, payload.password)
