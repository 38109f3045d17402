"""Blog Posts: admin CRUD with publication stamping, public listing by category.

Invariants:
    - Creating a published post stamps published_at; drafts have none
    - Unpublishing clears published_at
    - Duplicate slug surfaces as 500 with the store's message
    - Public lists only published posts; GET by slug 404s for drafts
"""

BASE = "/api/admin/blog-posts"


def _post(slug, **overrides):
    return {
        "title": f"Post {slug}", "slug": slug, "content": "Body",
        **overrides,
    }


async def test_draft_has_no_published_at(client, admin_headers):
    res = await client.post(BASE, json=_post("draft"), headers=admin_headers)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["is_published"] is False
    assert data["published_at"] is None
    assert data["category"] == "blog"


async def test_publish_then_unpublish(client, admin_headers):
    created = await client.post(BASE, json=_post("cycle"), headers=admin_headers)
    post_id = created.json()["data"]["id"]

    published = await client.patch(
        f"{BASE}/{post_id}", json={"is_published": True}, headers=admin_headers,
    )
    assert published.json()["data"]["published_at"] is not None

    unpublished = await client.patch(
        f"{BASE}/{post_id}", json={"is_published": False}, headers=admin_headers,
    )
    assert unpublished.json()["data"]["published_at"] is None


async def test_editing_published_post_keeps_published_at(client, admin_headers):
    created = await client.post(
        BASE, json=_post("stable", is_published=True), headers=admin_headers,
    )
    data = created.json()["data"]
    assert data["published_at"] is not None
    listed = await client.get(BASE, headers=admin_headers)
    first_stamp = listed.json()["data"][0]["published_at"]

    edited = await client.patch(
        f"{BASE}/{data['id']}",
        json={"title": "Retitled", "is_published": True},
        headers=admin_headers,
    )
    assert edited.json()["data"]["published_at"] == first_stamp


async def test_duplicate_slug_is_store_error(client, admin_headers):
    await client.post(BASE, json=_post("same"), headers=admin_headers)
    res = await client.post(BASE, json=_post("same"), headers=admin_headers)
    assert res.status_code == 500
    assert "UNIQUE" in res.json()["error"]


async def test_invalid_slug_and_category_rejected(client, admin_headers):
    bad_slug = await client.post(
        BASE, json=_post("Not A Slug"), headers=admin_headers,
    )
    bad_category = await client.post(
        BASE, json=_post("ok", category="news"), headers=admin_headers,
    )
    assert bad_slug.status_code == 400
    assert bad_category.status_code == 400


async def test_public_listing_and_category_filter(client, admin_headers):
    await client.post(
        BASE, json=_post("a-blog", is_published=True), headers=admin_headers,
    )
    await client.post(
        BASE, json=_post("an-article", category="article", is_published=True),
        headers=admin_headers,
    )
    await client.post(BASE, json=_post("hidden"), headers=admin_headers)

    everything = await client.get("/api/blog-posts")
    assert {d["slug"] for d in everything.json()["data"]} == {"a-blog", "an-article"}

    articles = await client.get("/api/blog-posts", params={"category": "article"})
    assert [d["slug"] for d in articles.json()["data"]] == ["an-article"]


async def test_public_get_by_slug(client, admin_headers):
    await client.post(
        BASE, json=_post("visible", is_published=True), headers=admin_headers,
    )
    await client.post(BASE, json=_post("draft-only"), headers=admin_headers)

    found = await client.get("/api/blog-posts/visible")
    assert found.status_code == 200
    assert found.json()["data"]["slug"] == "visible"

    hidden = await client.get("/api/blog-posts/draft-only")
    assert hidden.status_code == 404
    assert hidden.json() == {"error": "Blog post 'draft-only' not found"}
