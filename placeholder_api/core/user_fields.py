"""User Fields — mapping between the nested User shape and its flat columns.

Invariants:
    - Address, Geo and Company have no identity: they live as columns on users
    - USER_COLUMNS covers every writable user attribute exactly once
    - Pure functions, no IO

Design Decisions:
    - Path tuples over nested ORM composites: Geo sits inside Address, and
      composites do not nest
"""

from typing import Any

USER_COLUMNS: dict[tuple[str, ...], str] = {
    ("name",): "name",
    ("username",): "username",
    ("email",): "email",
    ("phone",): "phone",
    ("website",): "website",
    ("address", "street"): "address_street",
    ("address", "suite"): "address_suite",
    ("address", "city"): "address_city",
    ("address", "zipcode"): "address_zipcode",
    ("address", "geo", "lat"): "address_geo_lat",
    ("address", "geo", "lng"): "address_geo_lng",
    ("company", "name"): "company_name",
    ("company", "catch_phrase"): "company_catch_phrase",
    ("company", "bs"): "company_bs",
}


def flatten_user_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Flatten a nested user dict into {column: value}.

    Only paths present in `data` appear in the result, so a partial dict
    yields a partial column set.
    """
    columns: dict[str, Any] = {}
    for path, column in USER_COLUMNS.items():
        node: Any = data
        for key in path:
            if not isinstance(node, dict) or key not in node:
                break
            node = node[key]
        else:
            columns[column] = node
    return columns


def nest_user_columns(user: Any) -> dict[str, Any]:
    """Build the nested user dict from an object exposing the flat columns."""
    nested: dict[str, Any] = {"id": user.id}
    for path, column in USER_COLUMNS.items():
        node = nested
        for key in path[:-1]:
            node = node.setdefault(key, {})
        node[path[-1]] = getattr(user, column)
    return nested
