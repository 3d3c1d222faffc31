"""Seed Data — JSONPlaceholder-style fixture rows for a fresh database.

Invariants:
    - Runs only when the users table is empty (idempotent across restarts)
    - Children reference the ids the database assigned to their parents,
      so sequences stay consistent on server databases
    - Distribution: post i -> user ((i-1)%10)+1, comment i -> post ((i-1)%20)+1,
      album i -> user i, photo i -> album ((i-1)%10)+1,
      todo i -> user ((i-1)%10)+1 with completed = (i even)

Design Decisions:
    - Rows written through the ORM, bypassing request validation: some of the
      canonical JSONPlaceholder phones and usernames would not pass it
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from placeholder_api.models import Album, Comment, Photo, Post, Todo, User

logger = logging.getLogger(__name__)

# (name, username, email, phone, website,
#  (street, suite, city, zipcode, lat, lng), (company, catch_phrase, bs))
SEED_USERS = [
    ("Leanne Graham", "Bret", "Sincere@april.biz", "1-770-736-8031 x56442", "hildegard.org",
     ("Kulas Light", "Apt. 556", "Gwenborough", "92998-3874", "-37.3159", "81.1496"),
     ("Romaguera-Crona", "Multi-layered client-server neural-net", "harness real-time e-markets")),
    ("Ervin Howell", "Antonette", "Shanna@melissa.tv", "010-692-6593 x09125", "anastasia.net",
     ("Victor Plains", "Suite 879", "Wisokyburgh", "90566-7771", "-43.9509", "-34.4618"),
     ("Deckow-Crist", "Proactive didactic contingency", "synergize scalable supply-chains")),
    ("Clementine Bauch", "Samantha", "Nathan@yesenia.net", "1-463-123-4447", "ramiro.info",
     ("Douglas Extension", "Suite 847", "McKenziehaven", "59590-4157", "-68.6102", "-47.0653"),
     ("Romaguera-Jacobson", "Face to face bifurcated interface", "e-enable strategic applications")),
    ("Patricia Lebsack", "Karianne", "Julianne.OConner@kory.org", "493-170-9623 x156", "kale.biz",
     ("Hoeger Mall", "Apt. 692", "South Elvis", "53919-4257", "29.4572", "-164.2990"),
     ("Robel-Corkery", "Multi-tiered zero tolerance productivity", "transition cutting-edge web services")),
    ("Chelsey Dietrich", "Kamren", "Lucio_Hettinger@annie.ca", "(254)954-1289", "demarco.info",
     ("Skiles Walks", "Suite 351", "Roscoeview", "33263", "-31.8129", "62.5342"),
     ("Keebler LLC", "User-centric fault-tolerant solution", "revolutionize end-to-end systems")),
    ("Mrs. Dennis Schulist", "Leopoldo_Corkery", "Karley_Dach@jasper.info", "1-477-935-8478 x6430", "ola.org",
     ("Norberto Crossing", "Apt. 950", "South Christy", "23505-1337", "-71.4197", "71.7478"),
     ("Considine-Lockman", "Synchronised bottom-line interface", "e-enable innovative applications")),
    ("Kurtis Weissnat", "Elwyn.Skiles", "Telly.Hoeger@billy.biz", "210.067.6132", "elvis.io",
     ("Rex Trail", "Suite 280", "Howemouth", "58804-1099", "24.8918", "21.8984"),
     ("Johns Group", "Configurable multimedia task-force", "generate enterprise e-tailers")),
    ("Nicholas Runolfsdottir V", "Maxime_Nienow", "Sherwood@rosamond.me", "586.493.6943 x140", "jacynthe.com",
     ("Ellsworth Summit", "Suite 729", "Aliyaview", "45169", "-14.3990", "-120.7677"),
     ("Abernathy Group", "Implemented secondary concept", "e-enable extensible e-tailers")),
    ("Glenna Reichert", "Delphine", "Chaim_McDermott@dana.io", "(775)976-6794 x41206", "conrad.com",
     ("Dayna Park", "Suite 449", "Bartholomebury", "76495-3109", "24.6463", "-168.8889"),
     ("Yost and Sons", "Switchable contextually-based project", "aggregate real-time technologies")),
    ("Clementina DuBuque", "Moriah.Stanton", "Rey.Padberg@karina.biz", "024-648-3804", "ambrose.net",
     ("Kattie Turnpike", "Suite 198", "Lebsackbury", "31428-2261", "-38.2386", "57.2232"),
     ("Hoeger LLC", "Centralized empowering task-force", "target end-to-end models")),
]

POST_COUNT = 20
COMMENT_COUNT = 50
PHOTO_COUNT = 50
TODO_COUNT = 20


def _build_user(row: tuple) -> User:
    name, username, email, phone, website, address, company = row
    street, suite, city, zipcode, lat, lng = address
    company_name, catch_phrase, bs = company
    return User(
        name=name, username=username, email=email, phone=phone, website=website,
        address_street=street, address_suite=suite, address_city=city,
        address_zipcode=zipcode, address_geo_lat=lat, address_geo_lng=lng,
        company_name=company_name, company_catch_phrase=catch_phrase,
        company_bs=bs,
    )


async def seed_database(db: AsyncSession) -> bool:
    """Populate an empty database. Returns False when users already exist."""
    existing = await db.scalar(select(func.count()).select_from(User))
    if existing:
        logger.info("Seed skipped: database already has users")
        return False

    users = [_build_user(row) for row in SEED_USERS]
    db.add_all(users)
    await db.flush()

    posts = [
        Post(
            user_id=users[(i - 1) % len(users)].id,
            title=f"Post Title {i}",
            body=(
                f"This is the body content for post {i}. It contains some "
                "sample text to demonstrate the API functionality."
            ),
        )
        for i in range(1, POST_COUNT + 1)
    ]
    albums = [
        Album(user_id=user.id, title=f"Album {i}")
        for i, user in enumerate(users, start=1)
    ]
    todos = [
        Todo(
            user_id=users[(i - 1) % len(users)].id,
            title=f"Todo {i}",
            completed=i % 2 == 0,
        )
        for i in range(1, TODO_COUNT + 1)
    ]
    db.add_all([*posts, *albums, *todos])
    await db.flush()

    comments = []
    for i in range(1, COMMENT_COUNT + 1):
        post = posts[(i - 1) % len(posts)]
        comments.append(Comment(
            post_id=post.id,
            name=f"Commenter {i}",
            email=f"commenter{i}@example.com",
            body=f"This is comment {i} on post {post.id}. Great post!",
        ))
    photos = [
        Photo(
            album_id=albums[(i - 1) % len(albums)].id,
            title=f"Photo {i}",
            url="https://via.placeholder.com/600/92c952",
            thumbnail_url="https://via.placeholder.com/150/92c952",
        )
        for i in range(1, PHOTO_COUNT + 1)
    ]
    db.add_all([*comments, *photos])
    await db.commit()

    logger.info(
        f"Seeded {len(users)} users, {len(posts)} posts, {len(comments)} comments, "
        f"{len(albums)} albums, {len(photos)} photos, {len(todos)} todos",
    )
    return True
