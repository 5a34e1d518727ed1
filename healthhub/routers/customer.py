from typing import Optional

from fastapi import APIRouter, Depends

from healthhub.responses import success_response
from healthhub.schemas import CustomerBlockIn
from healthhub.security import require_superadmin
from healthhub.services import customer_service
from healthhub.services.pagination import PageParams, page_params

router = APIRouter(
    prefix="/admin", tags=["customers"], dependencies=[Depends(require_superadmin)]
)


@router.get("/get-all-customer")
async def get_all_customers(params: PageParams = Depends(page_params)):
    page = await customer_service.list_customers(params)
    return page.to_response("customers", "Customers fetched successfully", "No Customers Found")


@router.get("/get-customer-by-id")
async def get_customer_by_id(customerId: Optional[str] = None):
    customer = await customer_service.get_customer(customerId)
    return success_response(200, True, "Customer fetched successfully", customer.to_public())


@router.put("/block-unblock-customer")
async def block_unblock_customer(payload: CustomerBlockIn):
    customer = await customer_service.set_blocked(payload.customerId, payload.isBlocked)
    message = "Customer blocked successfully" if customer.isBlocked else "Customer unblocked successfully"
    return success_response(200, True, message, customer.to_public())
