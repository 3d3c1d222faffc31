"""Schema Base — camelCase model config and shared field validators.

Invariants:
    - RequiredStr rejects empty and whitespace-only strings
    - URL checks validate only; the client's original string is stored unchanged
    - Ids (RefId) are positive and fit a signed 64-bit column
"""

import re
from typing import Annotated, Any

from pydantic import (
    AfterValidator, AnyHttpUrl, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

# Largest id a signed 64-bit primary key can hold
MAX_ID = 2**63 - 1

PHONE_PATTERN = re.compile(r"^[+]?[1-9]\d{0,15}$")
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

_any_url = TypeAdapter(AnyUrl)
_http_url = TypeAdapter(AnyHttpUrl)


class CamelModel(BaseModel):
    """Base for all API schemas: camelCase aliases, ORM attribute loading."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def supplied_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, nested models included.

        Explicit nulls count as "not supplied".
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be empty or whitespace")
    return v


def check_phone(v: str) -> str:
    """Empty is allowed; otherwise digits with an optional leading '+'."""
    if v and not PHONE_PATTERN.match(v):
        raise ValueError("Phone must be a valid phone number")
    return v


def check_absolute_url(v: str) -> str:
    """Empty is allowed; otherwise an absolute URL with any scheme."""
    if v:
        try:
            _any_url.validate_python(v)
        except ValidationError:
            raise ValueError("must be a valid absolute URL") from None
    return v


def _check_http_url(v: str) -> str:
    try:
        _http_url.validate_python(v)
    except ValidationError:
        raise ValueError("must be a valid http(s) URL") from None
    return v


RequiredStr = Annotated[str, AfterValidator(_not_blank)]
RefId = Annotated[int, Field(ge=1, le=MAX_ID)]
HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]
PhoneStr = Annotated[str, AfterValidator(check_phone)]
OptionalUrlStr = Annotated[str, AfterValidator(check_absolute_url)]
