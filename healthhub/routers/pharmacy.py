from typing import Optional

from fastapi import APIRouter, Depends

from healthhub.constants import Role
from healthhub.models import Admin
from healthhub.responses import success_response
from healthhub.schemas import PharmacyCreate, PharmacyUpdate
from healthhub.security import require_roles, require_superadmin
from healthhub.services.pagination import PageParams, page_params
from healthhub.services.pharmacy_service import create_pharmacy, pharmacies

router = APIRouter(prefix="/admin", tags=["pharmacy"])


@router.post("/create-pharmacy", dependencies=[Depends(require_superadmin)])
async def create_pharmacy_route(payload: PharmacyCreate):
    admin, pharmacy = await create_pharmacy(payload)
    return success_response(201, True, "Pharmacy and Admin created successfully", {
        "admin": admin.to_public(),
        "pharmacy": pharmacy.to_public(),
    })


@router.get("/get-pharmacy-by-id", dependencies=[Depends(require_superadmin)])
async def get_pharmacy_by_id(pharmacyId: Optional[str] = None):
    data = await pharmacies.get_with_admin(pharmacyId)
    return success_response(200, True, "Pharmacy fetched successfully", {"pharmacy": data})


@router.get("/get-all-pharmacy", dependencies=[Depends(require_superadmin)])
async def get_all_pharmacy(params: PageParams = Depends(page_params)):
    page = await pharmacies.list_all(params)
    return page.to_response("pharmacies", "Pharmacies fetched successfully", "No Pharmacies Found")


@router.get("/search-pharmacy", dependencies=[Depends(require_superadmin)])
async def search_pharmacy(value: Optional[str] = None, params: PageParams = Depends(page_params)):
    page = await pharmacies.search(value, params)
    return page.to_response("pharmacies", "Pharmacies fetched successfully", "No Pharmacy Found")


@router.put("/update-pharmacy")
async def update_pharmacy(
    payload: PharmacyUpdate,
    current: Admin = Depends(require_roles([Role.PHARMACY, Role.SUPERADMIN])),
):
    """Superadmin may edit any pharmacy; a pharmacy admin only its own."""
    await pharmacies.ensure_owned_by(current, payload.pharmacyId)
    pharmacy = await pharmacies.update(payload.pharmacyId, payload.changes())
    return success_response(200, True, "Pharmacy updated successfully", pharmacy.to_public())


@router.delete("/delete-pharmacy", dependencies=[Depends(require_superadmin)])
async def delete_pharmacy(pharmacyId: Optional[str] = None):
    await pharmacies.delete(pharmacyId)
    return success_response(200, True, "Pharmacy and associated admin deleted successfully.")
