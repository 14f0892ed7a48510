"""Database seed routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from seedgate.api.deps import get_seeder, require_caller, require_development
from seedgate.core.logging_config import get_logger, security_logger
from seedgate.core.responses import (
    describe_error,
    error_response_dict,
    success_response,
)
from seedgate.services.seeding import Seeder

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Seed"])

ADMIN_SEED_MESSAGE = "Database seeded successfully!"
PUBLIC_SEED_MESSAGE = "Database seeded successfully"


async def invoke_seed(seeder: Seeder, message: str) -> dict[str, Any] | JSONResponse:
    """
    Run the seeder once and shape its outcome.

    A result is passed through as ``data``. Any exception is logged and turned
    into a 500 with the rendered error in ``details``; nothing is retried.
    """
    try:
        result = await seeder()
    except Exception as e:
        logger.error(f"Seed error: {e}", exc_info=True)
        return error_response_dict(
            {"error": "Failed to seed database", "details": describe_error(e)},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return success_response(data=result, message=message)


@router.post("/admin/seed", response_model=dict)
async def admin_seed(
    request: Request,
    caller: Annotated[str, Depends(require_caller)],
    seeder: Annotated[Seeder, Depends(get_seeder)],
):
    """
    Seed the database (authenticated callers).

    **Response:**
    ```json
    {
        "success": true,
        "message": "Database seeded successfully!",
        "data": {"modules": 5, "sections": 25, "pages": 3, "resources": 6}
    }
    ```
    """
    # TODO: restrict to the admin role once callers are provisioned as platform users.
    security_logger.log_seed_requested(request.url.path, user_id=caller)
    return await invoke_seed(seeder, ADMIN_SEED_MESSAGE)


@router.post(
    "/seed", response_model=dict, dependencies=[Depends(require_development)]
)
async def public_seed(
    request: Request,
    seeder: Annotated[Seeder, Depends(get_seeder)],
):
    """Seed the database (development environment only)."""
    security_logger.log_seed_requested(request.url.path)
    return await invoke_seed(seeder, PUBLIC_SEED_MESSAGE)
