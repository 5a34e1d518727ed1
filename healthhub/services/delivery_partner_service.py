from typing import Optional

from beanie.exceptions import RevisionIdWasChanged
from pymongo.errors import DuplicateKeyError

from healthhub.constants import ApprovalStatus, AvailabilityStatus, PartnerStatus
from healthhub.exceptions import ConflictError, ValidationError
from healthhub.models import DeliveryPartner
from healthhub.services.pagination import Page, PageParams, paginate
from healthhub.utils.ids import get_or_404
from healthhub.utils.logger import get_logger

logger = get_logger("delivery_partner_service")


async def list_delivery_partners(
    params: PageParams, approval_status: Optional[ApprovalStatus] = None
) -> Page:
    filters = {"approvalStatus": approval_status.value} if approval_status else {}
    return await paginate(DeliveryPartner, params, filters)


async def get_delivery_partner(partner_id: Optional[str]) -> DeliveryPartner:
    return await get_or_404(
        DeliveryPartner, partner_id, "Delivery Partner ID", "Delivery Partner not found"
    )


async def _set(partner_id: Optional[str], **values) -> DeliveryPartner:
    partner = await get_delivery_partner(partner_id)
    for key, value in values.items():
        setattr(partner, key, value)
    partner.touch()
    try:
        await partner.save()
    except (DuplicateKeyError, RevisionIdWasChanged) as e:
        raise ConflictError("Phone number already in use") from e
    logger.info(f"Delivery partner {partner.id} updated: {sorted(values)}")
    return partner


async def set_approval(partner_id: Optional[str], approval: ApprovalStatus) -> DeliveryPartner:
    return await _set(partner_id, approvalStatus=approval)


async def set_status(partner_id: Optional[str], status: PartnerStatus) -> DeliveryPartner:
    return await _set(partner_id, status=status)


async def set_availability(
    partner_id: Optional[str], availability: AvailabilityStatus
) -> DeliveryPartner:
    partner = await get_delivery_partner(partner_id)
    if availability != AvailabilityStatus.UNAVAILABLE and (
        partner.isBlocked or partner.approvalStatus != ApprovalStatus.APPROVED
    ):
        raise ValidationError("Only approved, unblocked delivery partners can go available")
    return await _set(partner_id, availabilityStatus=availability)


async def block(partner_id: Optional[str]) -> DeliveryPartner:
    # a blocked rider cannot keep taking deliveries
    return await _set(
        partner_id, isBlocked=True, availabilityStatus=AvailabilityStatus.UNAVAILABLE
    )


async def unblock(partner_id: Optional[str]) -> DeliveryPartner:
    return await _set(partner_id, isBlocked=False)


async def update_delivery_partner(partner_id: Optional[str], changes: dict) -> DeliveryPartner:
    if not changes:
        raise ValidationError("No fields provided for update")
    phone = changes.get("phoneNumber")
    if phone:
        current = await get_delivery_partner(partner_id)
        taken = await DeliveryPartner.find_one(
            {"phoneNumber": phone, "_id": {"$ne": current.id}}
        )
        if taken:
            raise ConflictError("Phone number already in use")
    return await _set(partner_id, **changes)


async def delete_delivery_partner(partner_id: Optional[str]) -> None:
    partner = await get_delivery_partner(partner_id)
    await partner.delete()
    logger.info(f"Delivery partner {partner.id} deleted")
