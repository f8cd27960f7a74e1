"""Error Codes & Hierarchy — stable numbering and REST envelope shape.

Tests:
    - Every error code keeps its published integer value
    - kind renders the CamelCase error name
    - RouteRejectedError maps codes to HTTP status by category
    - Only ERROR and CRITICAL severities exist; context carries route_id and caller only
    - Result success/failure and unwrap
"""

import pytest

from route_registry.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    RouteErrorCode,
    RouteRejectedError,
    StorageError,
)
from route_registry.core.result import Result


def test_error_codes_are_stable():
    assert {code.kind: int(code) for code in RouteErrorCode} == {
        "NotAuthorized": 100,
        "InvalidHash": 101,
        "InvalidDescription": 102,
        "InvalidSafetyLevel": 103,
        "InvalidGeolocation": 104,
        "RouteAlreadyExists": 105,
        "RouteNotFound": 107,
        "InvalidBoundaries": 111,
        "InvalidUpdateHash": 113,
        "MaxRoutesExceeded": 114,
        "InvalidRouteType": 115,
        "InvalidDistance": 116,
        "InvalidElevation": 117,
        "InvalidWeatherCondition": 118,
        "InvalidTrafficStatus": 119,
    }


@pytest.mark.parametrize(
    "code,status,category",
    [
        (RouteErrorCode.NOT_AUTHORIZED, 403, ErrorCategory.AUTHORIZATION),
        (RouteErrorCode.ROUTE_NOT_FOUND, 404, ErrorCategory.RESOURCE_NOT_FOUND),
        (RouteErrorCode.ROUTE_ALREADY_EXISTS, 409, ErrorCategory.CONFLICT),
        (RouteErrorCode.MAX_ROUTES_EXCEEDED, 409, ErrorCategory.CONFLICT),
        (RouteErrorCode.INVALID_HASH, 400, ErrorCategory.VALIDATION),
        (RouteErrorCode.INVALID_TRAFFIC_STATUS, 400, ErrorCategory.VALIDATION),
    ],
)
def test_rejection_maps_to_http_status(code, status, category):
    exc = RouteRejectedError(code)
    assert exc.http_status == status
    assert exc.category == category


def test_rejection_response_envelope():
    exc = RouteRejectedError(
        RouteErrorCode.ROUTE_NOT_FOUND, ErrorContext(route_id=9, caller="ST1TEST"),
    )
    body = exc.to_response()["error"]
    assert body["code"] == "RouteNotFound"
    assert body["numeric_code"] == 107
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"route_id": 9, "caller": "ST1TEST"}


def test_storage_error_is_critical_503():
    exc = StorageError("boom", "commit")
    assert exc.http_status == 503
    assert exc.to_response()["error"]["code"] == "STORAGE_ERROR"


def test_severities_and_context_fields_are_the_ones_emitted():
    assert set(ErrorSeverity) == {ErrorSeverity.ERROR, ErrorSeverity.CRITICAL}
    assert RouteRejectedError(RouteErrorCode.INVALID_HASH).severity == ErrorSeverity.ERROR
    assert StorageError("boom", "commit").severity == ErrorSeverity.CRITICAL
    assert set(vars(ErrorContext())) == {"timestamp", "route_id", "caller"}


def test_result_success_and_failure():
    ok = Result.success(3)
    assert ok.ok and ok.unwrap() == 3 and ok.error is None

    failed = Result.failure(RouteErrorCode.INVALID_HASH)
    assert not failed.ok and failed.error == RouteErrorCode.INVALID_HASH
    with pytest.raises(ValueError):
        failed.unwrap()
