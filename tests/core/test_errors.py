"""Error Hierarchy: codes, statuses and the REST envelope."""

from products_api.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    ProductsApiError,
    ResourceNotFoundError,
)


def test_not_found_maps_to_404():
    err = ResourceNotFoundError("Product", 3)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "Product '3' not found"


def test_database_error_maps_to_500_and_records_operation():
    err = DatabaseError("Database driver error", "update")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database update failed: Database driver error"
    assert err.context.operation == "update"


def test_database_error_keeps_explicit_context_operation():
    ctx = ErrorContext(product_id=1, operation="get")
    err = DatabaseError("boom", "query", ctx)
    assert err.context.operation == "get"
    assert err.operation == "query"


def test_invalid_parameter_is_validation_error():
    err = InvalidParameterError("Fields are not writable: id", field="id")
    assert err.http_status == 400
    assert err.field == "id"
    assert err.category is ErrorCategory.VALIDATION


def test_all_errors_share_base_class():
    for err in (
        ResourceNotFoundError("Product", 1),
        DatabaseError("x", "list"),
        InvalidParameterError("x", field="f"),
    ):
        assert isinstance(err, ProductsApiError)


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Product", 8, ErrorContext(product_id=8, operation="delete"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"] == {"product_id": 8, "operation": "delete"}
    assert body["timestamp"].endswith("+00:00")
