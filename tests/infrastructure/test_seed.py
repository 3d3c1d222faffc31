"""Seed Data — counts, distribution and idempotence.

Invariants:
    - 10 users, 20 posts, 50 comments, 10 albums, 50 photos, 20 todos
    - A second run is a no-op
"""

from sqlalchemy import func, select

from placeholder_api.infrastructure.seed import seed_database
from placeholder_api.models import Album, Comment, Photo, Post, Todo, User


async def _count(db, model) -> int:
    return await db.scalar(select(func.count()).select_from(model))


async def test_seed_populates_empty_database(test_db):
    assert await seed_database(test_db) is True

    assert await _count(test_db, User) == 10
    assert await _count(test_db, Post) == 20
    assert await _count(test_db, Comment) == 50
    assert await _count(test_db, Album) == 10
    assert await _count(test_db, Photo) == 50
    assert await _count(test_db, Todo) == 20


async def test_seed_distribution(test_db):
    await seed_database(test_db)

    users = (await test_db.execute(select(User).order_by(User.id))).scalars().all()
    posts = (await test_db.execute(select(Post).order_by(Post.id))).scalars().all()
    todos = (await test_db.execute(select(Todo).order_by(Todo.id))).scalars().all()

    assert users[0].username == "Bret"
    assert users[0].address_geo_lat == "-37.3159"
    assert posts[0].user_id == users[0].id
    assert posts[10].user_id == users[0].id
    assert posts[19].user_id == users[9].id
    assert [t.completed for t in todos[:4]] == [False, True, False, True]


async def test_seed_skips_when_users_exist(test_db, make_user):
    await make_user()

    assert await seed_database(test_db) is False
    assert await _count(test_db, Post) == 0
