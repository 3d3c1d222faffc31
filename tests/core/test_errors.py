"""Error Hierarchy — codes, HTTP status and the response envelope."""

from placeholder_api.core.errors import (
    DatabaseError, DuplicateKeyError, ErrorCategory, ErrorContext, ErrorSeverity,
    PlaceholderError, ReferenceNotFoundError, ResourceNotFoundError,
)


def test_reference_not_found_is_400():
    err = ReferenceNotFoundError("User", 99999, "userId", ErrorContext(resource="posts"))

    assert err.http_status == 400
    assert err.code == "REFERENCE_NOT_FOUND"
    assert err.message == "User not found"
    assert err.context.resource == "posts"
    assert err.context.field == "userId"


def test_duplicate_key_is_409_and_names_fields():
    err = DuplicateKeyError("User", ["email", "username"])

    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.message == "User with this email or username already exists"


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Post", 5)

    assert err.http_status == 404
    assert err.message == "Post with ID 5 not found"
    assert err.severity == ErrorSeverity.INFO


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")

    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL


def test_all_errors_share_base():
    for err in (
        ReferenceNotFoundError("User", 1, "userId"),
        DuplicateKeyError("User", ["email"]),
        ResourceNotFoundError("User", 1),
        DatabaseError("x", "commit"),
    ):
        assert isinstance(err, PlaceholderError)


def test_to_response_envelope():
    body = ResourceNotFoundError("Todo", 3).to_response()

    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "info"
    assert error["context"] == {"resource": "Todo", "resource_id": 3, "field": None}
    assert "timestamp" in error
