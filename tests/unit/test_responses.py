"""
Unit tests for response helpers.
"""

import json
from datetime import UTC, datetime
from uuid import UUID

import pytest
from fastapi import HTTPException

from seedgate.core.responses import (
    describe_error,
    error_response,
    error_response_dict,
    forbidden_response,
    success_response,
    unauthorized_response,
)


class DiskFullError(Exception):
    pass


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (RuntimeError("disk full"), "RuntimeError: disk full"),
        (DiskFullError("volume /data at 100%"), "DiskFullError: volume /data at 100%"),
        (ValueError(), "ValueError"),
        (KeyError("modules"), "KeyError: 'modules'"),
    ],
)
def test_describe_error(exc, expected):
    assert describe_error(exc) == expected


def test_success_response_shape():
    body = success_response(data={"count": 5}, message="Database seeded successfully")

    assert list(body) == ["success", "message", "data"]
    assert body == {
        "success": True,
        "message": "Database seeded successfully",
        "data": {"count": 5},
    }


def test_error_response_raises_with_error_body():
    with pytest.raises(HTTPException) as exc_info:
        error_response("Failed to seed database", status_code=500, details="RuntimeError: boom")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == {
        "error": "Failed to seed database",
        "details": "RuntimeError: boom",
    }


def test_unauthorized_and_forbidden_helpers():
    with pytest.raises(HTTPException) as unauthorized:
        unauthorized_response()
    with pytest.raises(HTTPException) as forbidden:
        forbidden_response("Seeding only allowed in development")

    assert unauthorized.value.status_code == 401
    assert unauthorized.value.detail == {"error": "Unauthorized"}
    assert forbidden.value.status_code == 403
    assert forbidden.value.detail == {"error": "Seeding only allowed in development"}


def test_error_response_dict_encodes_uuid_and_datetime():
    response = error_response_dict(
        {
            "error": "Health check failed",
            "details": {
                "id": UUID("0b7e9a52-3f0c-4e0c-8d9b-8a8f4b8f3a11"),
                "at": datetime(2026, 1, 5, 12, 0, tzinfo=UTC),
            },
        },
        503,
    )

    assert response.status_code == 503
    body = json.loads(response.body)
    assert body["details"]["id"] == "0b7e9a52-3f0c-4e0c-8d9b-8a8f4b8f3a11"
    assert body["details"]["at"] == "2026-01-05T12:00:00+00:00"
