"""User ORM — the root owner of posts, albums and todos.

Invariants:
    - id is an auto-increment integer primary key
    - username and email are unique across all users
    - Address (with Geo) and Company are embedded columns, never separate rows

Design Decisions:
    - Flat address_*/company_* columns: value objects without identity need no
      table; core/user_fields.py maps them to and from the nested JSON shape
    - No ORM collections: cascade is enumerated explicitly by UserService.delete
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from placeholder_api.db.base import Base


class User(Base):
    """User entity with embedded Address, Geo and Company."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    website: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Address
    address_street: Mapped[str] = mapped_column(String(200), nullable=False)
    address_suite: Mapped[str] = mapped_column(String(100), nullable=False)
    address_city: Mapped[str] = mapped_column(String(100), nullable=False)
    address_zipcode: Mapped[str] = mapped_column(String(20), nullable=False)
    address_geo_lat: Mapped[str] = mapped_column(String(50), nullable=False)
    address_geo_lng: Mapped[str] = mapped_column(String(50), nullable=False)

    # Company
    company_name: Mapped[str] = mapped_column(String(100), nullable=False)
    company_catch_phrase: Mapped[str] = mapped_column(
        String(200), nullable=False, default="",
    )
    company_bs: Mapped[str] = mapped_column(String(100), nullable=False, default="")
