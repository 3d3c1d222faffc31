"""User Fields — nested <-> flat column mapping.

Tests:
    - Full nested dicts flatten to every column
    - Partial dicts flatten to exactly the supplied paths
    - nest_user_columns inverts flatten_user_fields
"""

from types import SimpleNamespace

from placeholder_api.core.user_fields import (
    USER_COLUMNS, flatten_user_fields, nest_user_columns,
)

NESTED = {
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "leanne@april.biz",
    "phone": "17707368031",
    "website": "https://hildegard.org",
    "address": {
        "street": "Kulas Light", "suite": "Apt. 556", "city": "Gwenborough",
        "zipcode": "92998-3874", "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "company": {
        "name": "Romaguera-Crona", "catch_phrase": "neural-net", "bs": "e-markets",
    },
}


def test_columns_are_unique():
    assert len(set(USER_COLUMNS.values())) == len(USER_COLUMNS)


def test_flatten_full_user():
    flat = flatten_user_fields(NESTED)

    assert len(flat) == len(USER_COLUMNS)
    assert flat["address_geo_lng"] == "81.1496"
    assert flat["company_catch_phrase"] == "neural-net"


def test_flatten_partial_user_only_supplied_paths():
    flat = flatten_user_fields({"address": {"geo": {"lat": "1"}}, "name": "N"})

    assert flat == {"address_geo_lat": "1", "name": "N"}


def test_flatten_empty_dict():
    assert flatten_user_fields({}) == {}


def test_nest_inverts_flatten():
    row = SimpleNamespace(id=7, **flatten_user_fields(NESTED))

    assert nest_user_columns(row) == {"id": 7, **NESTED}
