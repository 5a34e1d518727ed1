from typing import Optional

from fastapi import APIRouter, Depends

from healthhub.responses import success_response
from healthhub.schemas import MedicineCreate, MedicineUpdate
from healthhub.security import require_superadmin
from healthhub.services import medicine_service
from healthhub.services.pagination import PageParams, page_params

router = APIRouter(
    prefix="/admin", tags=["medicines"], dependencies=[Depends(require_superadmin)]
)


@router.post("/create-medicine")
async def create_medicine(payload: MedicineCreate):
    medicine = await medicine_service.create_medicine(payload)
    return success_response(201, True, "Medicine created successfully", medicine.to_public())


@router.put("/update-medicine")
async def update_medicine(payload: MedicineUpdate):
    medicine = await medicine_service.update_medicine(payload.medicineId, payload.changes())
    return success_response(200, True, "Medicine updated successfully", medicine.to_public())


@router.get("/get-all-medicines")
async def get_all_medicines(
    pharmacyId: Optional[str] = None, params: PageParams = Depends(page_params)
):
    page = await medicine_service.list_medicines(params, pharmacyId)
    return page.to_response("medicines", "Medicines fetched successfully", "No Medicines Found")


@router.get("/get-medicine-by-id")
async def get_medicine_by_id(medicineId: Optional[str] = None):
    medicine = await medicine_service.get_medicine(medicineId)
    return success_response(200, True, "Medicine fetched successfully", medicine.to_public())


@router.get("/search-medicine")
async def search_medicine(value: Optional[str] = None, params: PageParams = Depends(page_params)):
    page = await medicine_service.search_medicines(value, params)
    return page.to_response("medicines", "Medicines fetched successfully", "No Medicines Found")
