"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Factory fixtures write rows straight through the ORM and commit,
      so API and service tests start from known state

Design Decisions:
    - Environment defaults set before the app is imported: no seed data,
      human-readable logs
"""

import os

# Tests never touch a real database or seed on import of the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from placeholder_api.db.base import Base  # noqa: E402
from placeholder_api.models import (  # noqa: E402
    Album, Comment, Photo, Post, Todo, User,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


# --- Payloads ------------------------------------------------------------------

@pytest.fixture
def user_payload():
    """Build a valid camelCase user body; keyword overrides replace top-level keys."""
    def build(**overrides):
        payload = {
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "leanne@april.biz",
            "address": {
                "street": "Kulas Light",
                "suite": "Apt. 556",
                "city": "Gwenborough",
                "zipcode": "92998-3874",
                "geo": {"lat": "-37.3159", "lng": "81.1496"},
            },
            "phone": "17707368031",
            "website": "https://hildegard.org",
            "company": {
                "name": "Romaguera-Crona",
                "catchPhrase": "Multi-layered client-server neural-net",
                "bs": "harness real-time e-markets",
            },
        }
        payload.update(overrides)
        return payload
    return build


# --- Row factories -------------------------------------------------------------

@pytest.fixture
def make_user(test_db):
    counter = {"n": 0}

    async def create(**overrides) -> User:
        counter["n"] += 1
        n = counter["n"]
        fields = dict(
            name=f"User {n}", username=f"user_{n}", email=f"user{n}@example.com",
            phone="", website="",
            address_street="Main St", address_suite="Apt. 1",
            address_city="Springfield", address_zipcode="12345",
            address_geo_lat="0.0", address_geo_lng="0.0",
            company_name="Acme", company_catch_phrase="", company_bs="",
        )
        fields.update(overrides)
        user = User(**fields)
        test_db.add(user)
        await test_db.commit()
        return user
    return create


@pytest.fixture
def make_post(test_db):
    async def create(user_id: int, title: str = "A post", body: str = "Body") -> Post:
        post = Post(user_id=user_id, title=title, body=body)
        test_db.add(post)
        await test_db.commit()
        return post
    return create


@pytest.fixture
def make_comment(test_db):
    async def create(post_id: int, name: str = "Commenter") -> Comment:
        comment = Comment(
            post_id=post_id, name=name, email="commenter@example.com", body="Nice",
        )
        test_db.add(comment)
        await test_db.commit()
        return comment
    return create


@pytest.fixture
def make_album(test_db):
    async def create(user_id: int, title: str = "An album") -> Album:
        album = Album(user_id=user_id, title=title)
        test_db.add(album)
        await test_db.commit()
        return album
    return create


@pytest.fixture
def make_photo(test_db):
    async def create(album_id: int, title: str = "A photo") -> Photo:
        photo = Photo(
            album_id=album_id, title=title,
            url="https://via.placeholder.com/600/92c952",
            thumbnail_url="https://via.placeholder.com/150/92c952",
        )
        test_db.add(photo)
        await test_db.commit()
        return photo
    return create


@pytest.fixture
def make_todo(test_db):
    async def create(user_id: int, title: str = "A todo", completed: bool = False) -> Todo:
        todo = Todo(user_id=user_id, title=title, completed=completed)
        test_db.add(todo)
        await test_db.commit()
        return todo
    return create
