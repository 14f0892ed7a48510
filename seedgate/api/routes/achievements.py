"""Achievement seeding routes."""

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, status

from seedgate.api.deps import require_admin, require_caller
from seedgate.core.database import get_db
from seedgate.core.logging_config import get_logger
from seedgate.core.responses import error_response_dict
from seedgate.services.achievements import (
    DEFAULT_ACHIEVEMENTS,
    list_achievements,
    seed_default_achievements,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Achievements"])


@router.post("/seed-achievements", response_model=dict)
async def seed_achievements(
    admin_user: Annotated[dict, Depends(require_admin)],
    conn: Annotated[asyncpg.Connection, Depends(get_db)],
):
    """
    Insert default achievements that do not exist yet (admin only).

    **Response:**
    ```json
    {
        "success": true,
        "message": "Seeded 2 new achievements",
        "total": 15,
        "new_achievements": ["streak_30", "comments_10"]
    }
    ```
    """
    try:
        result = await seed_default_achievements(conn)
    except Exception as e:
        logger.error(f"Error seeding achievements: {e}", exc_info=True)
        return error_response_dict(
            {"error": "Failed to seed achievements"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    inserted = result["inserted"]
    return {
        "success": True,
        "message": f"Seeded {len(inserted)} new achievements",
        "total": result["total"],
        "new_achievements": inserted,
    }


@router.get("/seed-achievements", response_model=dict)
async def get_achievements(
    caller: Annotated[str, Depends(require_caller)],
    conn: Annotated[asyncpg.Connection, Depends(get_db)],
):
    """List stored achievements next to the size of the default catalog."""
    try:
        achievements = await list_achievements(conn)
    except Exception as e:
        logger.error(f"Error fetching achievements: {e}", exc_info=True)
        return error_response_dict(
            {"error": "Failed to fetch achievements"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return {
        "achievements": achievements,
        "count": len(achievements),
        "default_count": len(DEFAULT_ACHIEVEMENTS),
    }
