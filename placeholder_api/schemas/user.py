"""User Schemas — nested Address/Geo/Company validation and the user response shape.

Invariants:
    - UserCreate: name/username <= 100, username matches ^[a-zA-Z0-9_]+$, valid email
    - phone is empty or matches ^[+]?[1-9]\\d{0,15}$; website is empty or an absolute URL
    - UserUpdate applies the same rules to whichever fields are supplied
    - UserResponse is built from the flat ORM columns via core/user_fields.py
"""

from pydantic import EmailStr, Field

from placeholder_api.core.user_fields import nest_user_columns
from placeholder_api.schemas.base import (
    USERNAME_PATTERN, CamelModel, OptionalUrlStr, PhoneStr, RequiredStr,
)


class GeoSchema(CamelModel):
    lat: RequiredStr = Field(max_length=50)
    lng: RequiredStr = Field(max_length=50)


class AddressSchema(CamelModel):
    street: RequiredStr = Field(max_length=200)
    suite: RequiredStr = Field(max_length=100)
    city: RequiredStr = Field(max_length=100)
    zipcode: RequiredStr = Field(max_length=20)
    geo: GeoSchema


class CompanySchema(CamelModel):
    name: RequiredStr = Field(max_length=100)
    catch_phrase: str = Field("", max_length=200)
    bs: str = Field("", max_length=100)


class UserCreate(CamelModel):
    """User creation — all nested value objects required."""
    name: RequiredStr = Field(max_length=100)
    username: RequiredStr = Field(max_length=100, pattern=USERNAME_PATTERN)
    email: EmailStr
    address: AddressSchema
    phone: PhoneStr = Field("", max_length=50)
    website: OptionalUrlStr = Field("", max_length=255)
    company: CompanySchema


# --- Partial update -----------------------------------------------------------

class GeoUpdate(CamelModel):
    lat: RequiredStr | None = Field(None, max_length=50)
    lng: RequiredStr | None = Field(None, max_length=50)


class AddressUpdate(CamelModel):
    street: RequiredStr | None = Field(None, max_length=200)
    suite: RequiredStr | None = Field(None, max_length=100)
    city: RequiredStr | None = Field(None, max_length=100)
    zipcode: RequiredStr | None = Field(None, max_length=20)
    geo: GeoUpdate | None = None


class CompanyUpdate(CamelModel):
    name: RequiredStr | None = Field(None, max_length=100)
    catch_phrase: str | None = Field(None, max_length=200)
    bs: str | None = Field(None, max_length=100)


class UserUpdate(CamelModel):
    """User partial update — only supplied fields are written."""
    name: RequiredStr | None = Field(None, max_length=100)
    username: RequiredStr | None = Field(
        None, max_length=100, pattern=USERNAME_PATTERN,
    )
    email: EmailStr | None = None
    address: AddressUpdate | None = None
    phone: PhoneStr | None = Field(None, max_length=50)
    website: OptionalUrlStr | None = Field(None, max_length=255)
    company: CompanyUpdate | None = None


# --- Response -----------------------------------------------------------------

class UserResponse(CamelModel):
    """User response — nested shape identical to JSONPlaceholder."""
    id: int
    name: str
    username: str
    email: str
    address: AddressSchema
    phone: str
    website: str
    company: CompanySchema

    @classmethod
    def from_model(cls, user) -> "UserResponse":
        return cls.model_validate(nest_user_columns(user))
