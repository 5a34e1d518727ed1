from typing import Optional

from fastapi import APIRouter, Depends

from healthhub.constants import ApprovalStatus
from healthhub.responses import success_response
from healthhub.schemas import (
    DeliveryPartnerApprovalIn,
    DeliveryPartnerAvailabilityIn,
    DeliveryPartnerIdIn,
    DeliveryPartnerStatusIn,
    DeliveryPartnerUpdate,
)
from healthhub.security import require_superadmin
from healthhub.services import delivery_partner_service as service
from healthhub.services.pagination import PageParams, page_params

router = APIRouter(
    prefix="/admin", tags=["delivery-partners"], dependencies=[Depends(require_superadmin)]
)


@router.put("/approve-delivery-partner")
async def approve_delivery_partner(payload: DeliveryPartnerApprovalIn):
    approval = ApprovalStatus(payload.approvalStatus)
    partner = await service.set_approval(payload.deliveryPartnerId, approval)
    return success_response(
        200, True, f"Delivery Partner {approval.value} successfully", partner.to_public()
    )


@router.get("/get-all-delivery-partner")
async def get_all_delivery_partners(
    approvalStatus: Optional[ApprovalStatus] = None,
    params: PageParams = Depends(page_params),
):
    page = await service.list_delivery_partners(params, approvalStatus)
    return page.to_response(
        "deliveryPartners", "Delivery Partners fetched successfully", "No Delivery Partners Found"
    )


@router.get("/get-delivery-partner-by-id")
async def get_delivery_partner_by_id(deliveryPartnerId: Optional[str] = None):
    partner = await service.get_delivery_partner(deliveryPartnerId)
    return success_response(200, True, "Delivery Partner fetched successfully", partner.to_public())


@router.put("/update-delivery-partner")
async def update_delivery_partner(payload: DeliveryPartnerUpdate):
    partner = await service.update_delivery_partner(payload.deliveryPartnerId, payload.changes())
    return success_response(200, True, "Delivery Partner updated successfully", partner.to_public())


@router.put("/update-availability-status")
async def update_availability_status(payload: DeliveryPartnerAvailabilityIn):
    partner = await service.set_availability(payload.deliveryPartnerId, payload.availabilityStatus)
    return success_response(200, True, "Availability status updated successfully", partner.to_public())


@router.delete("/delete-delivery-partner")
async def delete_delivery_partner(deliveryPartnerId: Optional[str] = None):
    await service.delete_delivery_partner(deliveryPartnerId)
    return success_response(200, True, "Delivery Partner deleted successfully")


@router.put("/block-delivery-partner")
async def block_delivery_partner(payload: DeliveryPartnerIdIn):
    partner = await service.block(payload.deliveryPartnerId)
    return success_response(200, True, "Delivery Partner blocked successfully", partner.to_public())


@router.put("/unblock-delivery-partner")
async def unblock_delivery_partner(payload: DeliveryPartnerIdIn):
    partner = await service.unblock(payload.deliveryPartnerId)
    return success_response(200, True, "Delivery Partner unblocked successfully", partner.to_public())


@router.put("/change-delivery-partner-status")
async def change_delivery_partner_status(payload: DeliveryPartnerStatusIn):
    partner = await service.set_status(payload.deliveryPartnerId, payload.status)
    return success_response(200, True, "Delivery Partner status changed successfully", partner.to_public())
