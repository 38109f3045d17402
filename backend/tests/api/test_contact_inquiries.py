"""Contact Inquiries: public submission, admin read-tracking and deletion."""

from uuid import uuid4

BASE = "/api/admin/contact-inquiries"

INQUIRY = {
    "name": "Sam Prospect",
    "email": "sam@prospect.example.com",
    "message": "We need help with a clinic network rollout.",
    "company": "Prospect Health",
    "role_title": "COO",
}


async def test_submit_contact_stores_unread_inquiry(client):
    res = await client.post("/api/contact", json=INQUIRY)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["is_read"] is False
    assert data["email"] == "sam@prospect.example.com"


async def test_submit_contact_requires_body_fields(client):
    res = await client.post("/api/contact", json={"name": "Only name"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_submit_contact_rejects_is_read(client):
    res = await client.post("/api/contact", json={**INQUIRY, "is_read": True})
    assert res.status_code == 400


async def test_mark_read_then_delete(client, admin_headers):
    created = await client.post("/api/contact", json=INQUIRY)
    inquiry_id = created.json()["data"]["id"]

    marked = await client.patch(
        f"{BASE}/{inquiry_id}", json={"is_read": True}, headers=admin_headers,
    )
    assert marked.json()["data"]["is_read"] is True

    listed = await client.get(BASE, headers=admin_headers)
    assert [d["id"] for d in listed.json()["data"]] == [inquiry_id]

    deleted = await client.delete(f"{BASE}/{inquiry_id}", headers=admin_headers)
    assert deleted.json() == {"ok": True}
    again = await client.delete(f"{BASE}/{inquiry_id}", headers=admin_headers)
    assert again.json() == {"ok": True}


async def test_mark_read_missing_is_404(client, admin_headers):
    res = await client.patch(
        f"{BASE}/{uuid4()}", json={"is_read": True}, headers=admin_headers,
    )
    assert res.status_code == 404
