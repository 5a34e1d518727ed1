from beanie import PydanticObjectId as OID

from healthhub.models import Customer


async def test_customer_listing_second_page(client, su_headers, make_customer):
    for _ in range(12):
        await make_customer()

    resp = await client.get(
        "/admin/get-all-customer", params={"page": 2, "limit": 5}, headers=su_headers
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    data = body["data"]
    assert len(data["customers"]) == 5
    assert data["currentPage"] == 2
    assert data["totalPages"] == 3
    assert data["total"] == 12
    assert all("password" not in c and "otp" not in c for c in data["customers"])


async def test_customer_listing_past_last_page(client, su_headers, make_customer):
    for _ in range(3):
        await make_customer()

    resp = await client.get(
        "/admin/get-all-customer", params={"page": 5, "limit": 5}, headers=su_headers
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "message": "No Customers Found", "data": []}


async def test_customer_listing_sort_order(client, su_headers, make_customer):
    for _ in range(3):
        await make_customer()

    asc = await client.get("/admin/get-all-customer", params={"sortOrder": "asc"}, headers=su_headers)
    desc = await client.get("/admin/get-all-customer", headers=su_headers)

    assert [c["name"] for c in asc.json()["data"]["customers"]] == [
        "Customer 1", "Customer 2", "Customer 3"
    ]
    assert [c["name"] for c in desc.json()["data"]["customers"]] == [
        "Customer 3", "Customer 2", "Customer 1"
    ]


async def test_get_customer_by_id(client, su_headers, make_customer):
    customer = await make_customer()

    found = await client.get(
        "/admin/get-customer-by-id", params={"customerId": str(customer.id)}, headers=su_headers
    )
    missing_id = await client.get("/admin/get-customer-by-id", headers=su_headers)
    unknown = await client.get(
        "/admin/get-customer-by-id", params={"customerId": str(OID())}, headers=su_headers
    )

    assert found.status_code == 200
    assert found.json()["data"]["id"] == str(customer.id)
    assert "password" not in found.json()["data"]
    assert missing_id.status_code == 400
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "Customer not found"


async def test_block_toggle_twice_restores_state(client, su_headers, make_customer):
    customer = await make_customer()
    body = {"customerId": str(customer.id)}

    first = await client.put("/admin/block-unblock-customer", json=body, headers=su_headers)
    second = await client.put("/admin/block-unblock-customer", json=body, headers=su_headers)

    assert first.json()["message"] == "Customer blocked successfully"
    assert first.json()["data"]["isBlocked"] is True
    assert second.json()["message"] == "Customer unblocked successfully"
    assert (await Customer.get(customer.id)).isBlocked is False


async def test_block_with_explicit_target_is_idempotent(client, su_headers, make_customer):
    customer = await make_customer()
    body = {"customerId": str(customer.id), "isBlocked": True}

    for _ in range(2):
        resp = await client.put("/admin/block-unblock-customer", json=body, headers=su_headers)
        assert resp.status_code == 200

    assert (await Customer.get(customer.id)).isBlocked is True


async def test_block_unknown_customer(client, su_headers, db):
    resp = await client.put(
        "/admin/block-unblock-customer", json={"customerId": str(OID())}, headers=su_headers
    )
    assert resp.status_code == 404
