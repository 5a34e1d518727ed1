from beanie import PydanticObjectId as OID

from healthhub.models import Admin, Pharmacy

from .factories import pathology_payload, pharmacy_payload


async def _create(client, headers, **overrides):
    resp = await client.post("/admin/create-pharmacy", json=pharmacy_payload(**overrides), headers=headers)
    assert resp.status_code == 201
    return resp.json()["data"]


async def test_create_pharmacy_links_admin(client, su_headers):
    data = await _create(client, su_headers)

    assert data["admin"]["role"] == "pharmacy"
    assert data["admin"]["pharmacyId"] == data["pharmacy"]["id"]
    assert data["pharmacy"]["adminId"] == data["admin"]["id"]
    assert "password" not in data["admin"]


async def test_pharmacy_email_taken_by_pathology_admin(client, su_headers):
    await client.post("/admin/create-pathology", json=pathology_payload(), headers=su_headers)

    resp = await client.post(
        "/admin/create-pharmacy", json=pharmacy_payload(email="a@x.com"), headers=su_headers
    )

    assert resp.status_code == 400
    assert await Pharmacy.count() == 0


async def test_pharmacy_admin_updates_only_own_pharmacy(client, su_headers, auth_headers):
    mine = await _create(client, su_headers)
    other = await _create(client, su_headers, email="other@shop.com", phoneNumber="999")
    owner = await Admin.get(OID(mine["admin"]["id"]))

    own = await client.put(
        "/admin/update-pharmacy",
        json={"pharmacyId": mine["pharmacy"]["id"], "address": "New address"},
        headers=auth_headers(owner),
    )
    foreign = await client.put(
        "/admin/update-pharmacy",
        json={"pharmacyId": other["pharmacy"]["id"], "address": "Hijack"},
        headers=auth_headers(owner),
    )
    by_superadmin = await client.put(
        "/admin/update-pharmacy",
        json={"pharmacyId": other["pharmacy"]["id"], "ownerName": "R. Patel"},
        headers=su_headers,
    )

    assert own.status_code == 200
    assert own.json()["data"]["address"] == "New address"
    assert foreign.status_code == 403
    assert by_superadmin.json()["data"]["ownerName"] == "R. Patel"


async def test_pharmacy_admin_cannot_create(client, su_headers, auth_headers):
    mine = await _create(client, su_headers)
    owner = await Admin.get(OID(mine["admin"]["id"]))

    resp = await client.post(
        "/admin/create-pharmacy",
        json=pharmacy_payload(email="new@shop.com", phoneNumber="777"),
        headers=auth_headers(owner),
    )

    assert resp.status_code == 403


async def test_list_search_get_and_delete(client, su_headers):
    first = await _create(client, su_headers)
    await _create(client, su_headers, pharmacyName="Blue Pill", email="hi@bluepill.com", phoneNumber="555")

    listing = await client.get("/admin/get-all-pharmacy", headers=su_headers)
    search = await client.get("/admin/search-pharmacy", params={"value": "green"}, headers=su_headers)
    by_id = await client.get(
        "/admin/get-pharmacy-by-id", params={"pharmacyId": first["pharmacy"]["id"]}, headers=su_headers
    )
    deleted = await client.delete(
        "/admin/delete-pharmacy", params={"pharmacyId": first["pharmacy"]["id"]}, headers=su_headers
    )

    assert listing.json()["data"]["total"] == 2
    assert [p["pharmacyName"] for p in search.json()["data"]["pharmacies"]] == ["Green Cross"]
    assert by_id.json()["data"]["pharmacy"]["admin"]["email"] == "store@greencross.com"
    assert deleted.status_code == 200
    assert await Admin.get(OID(first["admin"]["id"])) is None
    assert await Pharmacy.count() == 1
