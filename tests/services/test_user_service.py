"""User Service — unique keys, nested field mapping and the full cascade.

Invariants:
    - Duplicate email or username -> DuplicateKeyError, first user untouched
    - Update may keep its own email/username but not take another user's
    - delete removes posts, comments on those posts, albums, photos and todos
"""

import pytest
from sqlalchemy import func, select

from placeholder_api.core.errors import DuplicateKeyError
from placeholder_api.models import Album, Comment, Photo, Post, Todo, User
from placeholder_api.schemas.user import UserCreate, UserUpdate


async def _count(db, model) -> int:
    return await db.scalar(select(func.count()).select_from(model))


async def test_create_assigns_id_and_flattens_nested_fields(user_service, user_payload):
    user = await user_service.create(UserCreate.model_validate(user_payload()))

    assert user.id is not None
    assert user.address_geo_lat == "-37.3159"
    assert user.company_catch_phrase == "Multi-layered client-server neural-net"
    fetched = await user_service.get_by_id(user.id)
    assert fetched.email == "leanne@april.biz"
    assert fetched.address_city == "Gwenborough"


async def test_duplicate_email_rejected_first_user_kept(user_service, user_payload, test_db):
    first = await user_service.create(UserCreate.model_validate(user_payload()))

    with pytest.raises(DuplicateKeyError) as exc:
        await user_service.create(
            UserCreate.model_validate(user_payload(username="Other")),
        )

    assert exc.value.fields == ["email"]
    assert exc.value.http_status == 409
    assert await _count(test_db, User) == 1
    assert (await user_service.get_by_id(first.id)).username == "Bret"


async def test_duplicate_username_rejected(user_service, user_payload):
    await user_service.create(UserCreate.model_validate(user_payload()))

    with pytest.raises(DuplicateKeyError) as exc:
        await user_service.create(
            UserCreate.model_validate(user_payload(email="other@april.biz")),
        )
    assert exc.value.fields == ["username"]


async def test_update_keeps_own_email(user_service, make_user):
    user = await make_user(email="same@example.com")

    updated = await user_service.update(
        user.id, UserUpdate(email="same@example.com", name="Renamed"),
    )

    assert updated.name == "Renamed"


async def test_update_to_another_users_username_rejected(user_service, make_user):
    await make_user(username="taken")
    user = await make_user()

    with pytest.raises(DuplicateKeyError):
        await user_service.update(user.id, UserUpdate(username="taken"))


async def test_partial_nested_update_touches_only_supplied_columns(user_service, make_user):
    user = await make_user(address_city="Old City", address_geo_lng="1.0")

    updated = await user_service.update(
        user.id, UserUpdate.model_validate({"address": {"geo": {"lat": "9.9"}}}),
    )

    assert updated.address_geo_lat == "9.9"
    assert updated.address_geo_lng == "1.0"
    assert updated.address_city == "Old City"


async def test_empty_update_leaves_user_unchanged(user_service, make_user):
    user = await make_user(name="Unchanged")

    updated = await user_service.update(user.id, UserUpdate())

    assert updated.name == "Unchanged"
    assert updated.email == user.email


async def test_update_missing_user_returns_none(user_service):
    assert await user_service.update(424242, UserUpdate(name="x")) is None


async def test_delete_cascades_to_posts_and_comments(
    user_service, make_user, make_post, make_comment, test_db,
):
    user = await make_user()
    other = await make_user()
    for _ in range(2):
        post = await make_post(user.id)
        await make_comment(post.id)
    kept_post = await make_post(other.id)
    await make_comment(kept_post.id)

    assert await user_service.delete(user.id) is True

    assert await _count(test_db, Post) == 1
    assert await _count(test_db, Comment) == 1
    assert await user_service.get_by_id(user.id) is None


async def test_delete_cascades_to_albums_photos_and_todos(
    user_service, make_user, make_album, make_photo, make_todo, test_db,
):
    user = await make_user()
    album = await make_album(user.id)
    await make_photo(album.id)
    await make_photo(album.id)
    await make_todo(user.id)

    await user_service.delete(user.id)

    assert await _count(test_db, Album) == 0
    assert await _count(test_db, Photo) == 0
    assert await _count(test_db, Todo) == 0


async def test_delete_missing_user_returns_false(user_service):
    assert await user_service.delete(424242) is False


async def test_relationship_lists_empty_for_unknown_user(user_service):
    assert await user_service.list_posts(424242) == []
    assert await user_service.list_albums(424242) == []
    assert await user_service.list_todos(424242) == []


async def test_list_posts_filters_by_owner(user_service, make_user, make_post):
    user = await make_user()
    other = await make_user()
    mine = await make_post(user.id, title="mine")
    await make_post(other.id, title="theirs")

    posts = await user_service.list_posts(user.id)

    assert [p.id for p in posts] == [mine.id]
