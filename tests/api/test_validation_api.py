"""Request Validation — malformed bodies become 400 VALIDATION_ERROR with field details.

Invariants:
    - Nothing is persisted when validation fails
    - details[].field is the dotted location of the offending input
"""

import pytest

from placeholder_api.core.errors import ErrorCategory


def _fields(res) -> list[str]:
    return [d["field"] for d in res.json()["error"]["details"]]


async def test_invalid_email_returns_400(client, user_payload):
    res = await client.post("/api/users", json=user_payload(email="not-an-email"))

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == ErrorCategory.VALIDATION.value
    assert "body.email" in _fields(res)
    assert (await client.get("/api/users")).json() == []


@pytest.mark.parametrize("username", ["has space", "dash-ed", ""])
async def test_username_pattern_enforced(client, user_payload, username):
    res = await client.post("/api/users", json=user_payload(username=username))
    assert res.status_code == 400


async def test_name_too_long_returns_400(client, user_payload):
    res = await client.post("/api/users", json=user_payload(name="x" * 101))

    assert res.status_code == 400
    assert "body.name" in _fields(res)


@pytest.mark.parametrize("phone", ["abc", "0123", "+1 770 736"])
async def test_bad_phone_returns_400(client, user_payload, phone):
    res = await client.post("/api/users", json=user_payload(phone=phone))
    assert res.status_code == 400


async def test_empty_phone_and_website_allowed(client, user_payload):
    res = await client.post("/api/users", json=user_payload(phone="", website=""))
    assert res.status_code == 201


async def test_relative_website_rejected(client, user_payload):
    res = await client.post("/api/users", json=user_payload(website="hildegard.org"))
    assert res.status_code == 400


async def test_missing_geo_reports_nested_field(client, user_payload):
    payload = user_payload()
    del payload["address"]["geo"]

    res = await client.post("/api/users", json=payload)

    assert res.status_code == 400
    assert "body.address.geo" in _fields(res)


async def test_blank_geo_lat_rejected(client, user_payload):
    payload = user_payload()
    payload["address"]["geo"]["lat"] = "   "

    res = await client.post("/api/users", json=payload)

    assert res.status_code == 400


async def test_post_title_too_long(client, make_user):
    user = await make_user()

    res = await client.post(
        "/api/posts", json={"userId": user.id, "title": "t" * 201, "body": "b"},
    )

    assert res.status_code == 400
    assert (await client.get("/api/posts")).json() == []


async def test_post_missing_body_field(client, make_user):
    user = await make_user()

    res = await client.post("/api/posts", json={"userId": user.id, "title": "t"})

    assert res.status_code == 400
    assert "body.body" in _fields(res)


async def test_update_applies_rules_to_supplied_fields(client, make_user, make_post):
    user = await make_user()
    post = await make_post(user.id)

    res = await client.put(f"/api/posts/{post.id}", json={"title": ""})

    assert res.status_code == 400


async def test_comment_email_validated(client, make_user, make_post):
    user = await make_user()
    post = await make_post(user.id)

    res = await client.post("/api/comments", json={
        "postId": post.id, "name": "n", "email": "nope", "body": "b",
    })

    assert res.status_code == 400


@pytest.mark.parametrize("url", ["not a url", "ftp://example.com/a.png", "/relative.png"])
async def test_photo_url_must_be_http(client, make_user, make_album, url):
    user = await make_user()
    album = await make_album(user.id)

    res = await client.post("/api/photos", json={
        "albumId": album.id, "title": "p",
        "url": url, "thumbnailUrl": "https://example.com/t.png",
    })

    assert res.status_code == 400


async def test_non_integer_path_id_returns_400(client):
    res = await client.get("/api/posts/abc")
    assert res.status_code == 400


TOO_LARGE_ID = 99999999999999999999


@pytest.mark.parametrize("path", [
    f"/api/users/{TOO_LARGE_ID}",
    f"/api/posts/{TOO_LARGE_ID}/comments",
    f"/api/todos/by-user/{TOO_LARGE_ID}",
    "/api/users/0",
    "/api/albums/-1",
])
async def test_out_of_range_path_id_returns_400(client, path):
    res = await client.get(path)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_out_of_range_reference_in_body_returns_400(client):
    res = await client.post("/api/posts", json={
        "userId": TOO_LARGE_ID, "title": "t", "body": "b",
    })

    assert res.status_code == 400
    assert "body.userId" in _fields(res)
    assert (await client.get("/api/posts")).json() == []


async def test_out_of_range_id_on_update_and_delete_returns_400(client):
    assert (await client.put(f"/api/todos/{TOO_LARGE_ID}", json={"title": "t"})).status_code == 400
    assert (await client.delete(f"/api/photos/{TOO_LARGE_ID}")).status_code == 400
