import re
from typing import Optional

from healthhub.exceptions import ConflictError, ValidationError
from healthhub.models import Medicine, Pharmacy
from healthhub.schemas import MedicineCreate
from healthhub.services.pagination import Page, PageParams, paginate, search_filter
from healthhub.utils.ids import get_or_404, parse_object_id

SEARCH_FIELDS = ("name", "genericName", "manufacturer")


async def _ensure_unique_name(name: str, pharmacy_id, exclude_id=None) -> None:
    query = {
        "name": {"$regex": f"^{re.escape(name)}$", "$options": "i"},
        "pharmacyId": pharmacy_id,
    }
    existing = await Medicine.find_one(query)
    if existing and existing.id != exclude_id:
        raise ConflictError("Medicine with this name already exists")


async def create_medicine(payload: MedicineCreate) -> Medicine:
    data = payload.model_dump()
    pharmacy_id = None
    if payload.pharmacyId:
        pharmacy_id = (await get_or_404(Pharmacy, payload.pharmacyId, "Pharmacy ID", "Pharmacy not found")).id
    data["pharmacyId"] = pharmacy_id
    await _ensure_unique_name(payload.name, pharmacy_id)
    medicine = Medicine(**data)
    await medicine.insert()
    return medicine


async def get_medicine(medicine_id: Optional[str]) -> Medicine:
    return await get_or_404(Medicine, medicine_id, "Medicine ID", "Medicine not found")


async def update_medicine(medicine_id: Optional[str], changes: dict) -> Medicine:
    if not changes:
        raise ValidationError("No fields provided for update")
    medicine = await get_medicine(medicine_id)
    if "name" in changes:
        await _ensure_unique_name(changes["name"], medicine.pharmacyId, exclude_id=medicine.id)
    for key, value in changes.items():
        setattr(medicine, key, value)
    medicine.touch()
    await medicine.save()
    return medicine


async def list_medicines(params: PageParams, pharmacy_id: Optional[str] = None) -> Page:
    filters = {"pharmacyId": parse_object_id(pharmacy_id, "Pharmacy ID")} if pharmacy_id else {}
    return await paginate(Medicine, params, filters)


async def search_medicines(term: Optional[str], params: PageParams) -> Page:
    return await paginate(Medicine, params, search_filter(term, SEARCH_FIELDS))
