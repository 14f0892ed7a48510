"""Standardized API response utilities."""

import json
from datetime import date, datetime
from typing import Any, NoReturn
from uuid import UUID

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse


class CustomJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles UUID, datetime, and other types."""

    def default(self, obj):
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, bytes):
            return obj.decode("utf-8")
        return super().default(obj)


def success_response(data: Any = None, message: str | None = None) -> dict[str, Any]:
    """Create a successful API response."""
    return {"success": True, "message": message, "data": data}


def error_response(
    error: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Any = None,
) -> NoReturn:
    """Raise an HTTPException carrying an ``{"error": ...}`` body."""
    detail: dict[str, Any] = {"error": error}
    if details is not None:
        detail["details"] = details
    raise HTTPException(status_code=status_code, detail=detail)


def error_response_dict(
    error_dict: dict[str, Any], status_code: int = status.HTTP_400_BAD_REQUEST
) -> JSONResponse:
    """Create an error response as a JSONResponse (for handlers and routes)."""
    # Serialize with custom encoder to handle UUID, datetime, etc.
    content = json.loads(json.dumps(error_dict, cls=CustomJSONEncoder))
    return JSONResponse(status_code=status_code, content=content)


def describe_error(exc: BaseException) -> str:
    """
    Render an exception as ``"<ExceptionClass>: <message>"``.

    The traceback and any structured attributes are dropped; only the class
    name and message reach the client.
    """
    name = type(exc).__name__
    message = str(exc)
    return f"{name}: {message}" if message else name


def unauthorized_response(error: str = "Unauthorized") -> NoReturn:
    """Raise a 401 error response."""
    error_response(error, status_code=status.HTTP_401_UNAUTHORIZED)


def forbidden_response(error: str = "Access denied") -> NoReturn:
    """Raise a 403 error response."""
    error_response(error, status_code=status.HTTP_403_FORBIDDEN)
