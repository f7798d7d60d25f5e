"""Error hierarchy: status codes and REST envelope."""

from orders_api.core.errors import (
    DatabaseError, ErrorCategory, InvalidIdentifierError, ResourceNotFoundError,
)


def test_not_found_envelope():
    body = ResourceNotFoundError("user", 9).to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "user not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"] == {"resource": "user", "resource_id": "9"}
    assert body["timestamp"]


def test_status_codes():
    assert InvalidIdentifierError("user", "x").http_status == 400
    assert ResourceNotFoundError("order", 1).http_status == 404
    assert DatabaseError("failed to create user", "insert").http_status == 500


def test_database_error_keeps_operation_and_message():
    err = DatabaseError("failed to delete order", "delete")
    assert err.operation == "delete"
    assert str(err) == "failed to delete order"
    assert err.to_response()["error"]["severity"] == "critical"
