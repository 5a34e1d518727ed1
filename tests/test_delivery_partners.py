from beanie import PydanticObjectId as OID

from healthhub.constants import ApprovalStatus
from healthhub.models import DeliveryPartner


async def test_approve_and_reject(client, su_headers, make_delivery_partner):
    partner = await make_delivery_partner()

    approved = await client.put(
        "/admin/approve-delivery-partner",
        json={"deliveryPartnerId": str(partner.id)},
        headers=su_headers,
    )
    rejected = await client.put(
        "/admin/approve-delivery-partner",
        json={"deliveryPartnerId": str(partner.id), "approvalStatus": "rejected"},
        headers=su_headers,
    )

    assert approved.json()["data"]["approvalStatus"] == "approved"
    assert rejected.json()["message"] == "Delivery Partner rejected successfully"
    assert (await DeliveryPartner.get(partner.id)).approvalStatus == ApprovalStatus.REJECTED


async def test_availability_requires_approval(client, su_headers, make_delivery_partner):
    partner = await make_delivery_partner()
    body = {"deliveryPartnerId": str(partner.id), "availabilityStatus": "available"}

    pending = await client.put("/admin/update-availability-status", json=body, headers=su_headers)
    await client.put(
        "/admin/approve-delivery-partner",
        json={"deliveryPartnerId": str(partner.id)},
        headers=su_headers,
    )
    approved = await client.put("/admin/update-availability-status", json=body, headers=su_headers)

    assert pending.status_code == 400
    assert approved.status_code == 200
    assert approved.json()["data"]["availabilityStatus"] == "available"


async def test_block_and_unblock(client, su_headers, make_delivery_partner):
    partner = await make_delivery_partner(
        approvalStatus=ApprovalStatus.APPROVED, availabilityStatus="available"
    )
    body = {"deliveryPartnerId": str(partner.id)}

    blocked = await client.put("/admin/block-delivery-partner", json=body, headers=su_headers)
    blocked_again = await client.put("/admin/block-delivery-partner", json=body, headers=su_headers)
    unblocked = await client.put("/admin/unblock-delivery-partner", json=body, headers=su_headers)

    assert blocked.json()["data"]["isBlocked"] is True
    assert blocked.json()["data"]["availabilityStatus"] == "unavailable"
    assert blocked_again.json()["data"]["isBlocked"] is True
    assert unblocked.json()["data"]["isBlocked"] is False


async def test_change_status(client, su_headers, make_delivery_partner):
    partner = await make_delivery_partner()

    resp = await client.put(
        "/admin/change-delivery-partner-status",
        json={"deliveryPartnerId": str(partner.id), "status": "inactive"},
        headers=su_headers,
    )
    invalid = await client.put(
        "/admin/change-delivery-partner-status",
        json={"deliveryPartnerId": str(partner.id), "status": "sleeping"},
        headers=su_headers,
    )

    assert resp.json()["data"]["status"] == "inactive"
    assert invalid.status_code == 400


async def test_list_filtered_by_approval(client, su_headers, make_delivery_partner):
    await make_delivery_partner(approvalStatus=ApprovalStatus.APPROVED)
    await make_delivery_partner()
    await make_delivery_partner()

    pending = await client.get(
        "/admin/get-all-delivery-partner",
        params={"approvalStatus": "pending"},
        headers=su_headers,
    )
    everyone = await client.get("/admin/get-all-delivery-partner", headers=su_headers)

    assert pending.json()["data"]["total"] == 2
    assert everyone.json()["data"]["total"] == 3
    assert all("password" not in p for p in everyone.json()["data"]["deliveryPartners"])


async def test_update_get_and_delete(client, su_headers, make_delivery_partner):
    partner = await make_delivery_partner()
    pid = str(partner.id)

    nothing = await client.put(
        "/admin/update-delivery-partner", json={"deliveryPartnerId": pid}, headers=su_headers
    )
    updated = await client.put(
        "/admin/update-delivery-partner",
        json={"deliveryPartnerId": pid, "vehicleNumber": "KA-01-1234"},
        headers=su_headers,
    )
    fetched = await client.get(
        "/admin/get-delivery-partner-by-id", params={"deliveryPartnerId": pid}, headers=su_headers
    )
    deleted = await client.delete(
        "/admin/delete-delivery-partner", params={"deliveryPartnerId": pid}, headers=su_headers
    )
    gone = await client.get(
        "/admin/get-delivery-partner-by-id", params={"deliveryPartnerId": pid}, headers=su_headers
    )

    assert nothing.status_code == 400
    assert updated.json()["data"]["vehicleNumber"] == "KA-01-1234"
    assert fetched.json()["data"]["vehicleNumber"] == "KA-01-1234"
    assert deleted.status_code == 200
    assert gone.status_code == 404


async def test_unknown_partner(client, su_headers, db):
    resp = await client.put(
        "/admin/block-delivery-partner", json={"deliveryPartnerId": str(OID())}, headers=su_headers
    )
    assert resp.status_code == 404


async def test_update_to_phone_of_another_partner_conflicts(client, su_headers, make_delivery_partner):
    first = await make_delivery_partner()
    second = await make_delivery_partner()

    resp = await client.put(
        "/admin/update-delivery-partner",
        json={"deliveryPartnerId": str(second.id), "phoneNumber": first.phoneNumber},
        headers=su_headers,
    )
    same_phone = await client.put(
        "/admin/update-delivery-partner",
        json={"deliveryPartnerId": str(second.id), "phoneNumber": second.phoneNumber},
        headers=su_headers,
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Phone number already in use"
    assert same_phone.status_code == 200
    assert (await DeliveryPartner.get(second.id)).phoneNumber == second.phoneNumber
