from typing import Optional

from fastapi import APIRouter, Depends

from healthhub.responses import success_response
from healthhub.schemas import PathologyCenterCreate, PathologyCenterUpdate
from healthhub.security import require_superadmin
from healthhub.services.pagination import PageParams, page_params
from healthhub.services.pathology_service import create_pathology_center, pathology_centers

router = APIRouter(
    prefix="/admin", tags=["pathology"], dependencies=[Depends(require_superadmin)]
)


@router.post("/create-pathology")
async def create_pathology(payload: PathologyCenterCreate):
    """Create a pathology center and its admin account in one transaction."""
    admin, center = await create_pathology_center(payload)
    return success_response(201, True, "Pathology Center and Admin created successfully", {
        "admin": admin.to_public(),
        "pathologyCenter": center.to_public(),
    })


@router.get("/get-pathology-by-id")
async def get_pathology_by_id(pathologyCenterId: Optional[str] = None):
    data = await pathology_centers.get_with_admin(pathologyCenterId)
    return success_response(200, True, "Pathology Center fetched successfully.", {
        "pathologyCenter": data,
    })


@router.get("/get-all-pathology")
async def get_all_pathology(params: PageParams = Depends(page_params)):
    page = await pathology_centers.list_all(params)
    return page.to_response(
        "pathologyCenters", "Pathology Centers fetched successfully", "No Pathology Centers Found"
    )


@router.put("/update-pathology")
async def update_pathology(payload: PathologyCenterUpdate):
    center = await pathology_centers.update(payload.pathologyCenterId, payload.changes())
    return success_response(200, True, "Pathology Center updated successfully", center.to_public())


@router.delete("/delete-pathology")
async def delete_pathology(pathologyCenterId: Optional[str] = None):
    await pathology_centers.delete(pathologyCenterId)
    return success_response(
        200, True, "Pathology Center and associated admin deleted successfully."
    )


@router.get("/search-pathology")
async def search_pathology(value: Optional[str] = None, params: PageParams = Depends(page_params)):
    page = await pathology_centers.search(value, params)
    return page.to_response("pathologies", "Pathology fetched successfully", "No Pathology Found")
