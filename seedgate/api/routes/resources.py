"""Library resource seeding route."""

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, status

from seedgate.api.deps import require_admin
from seedgate.core.database import get_db
from seedgate.core.logging_config import get_logger
from seedgate.core.responses import error_response_dict
from seedgate.services.resources import seed_sample_resources

logger = get_logger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Resources"])


@router.post("/seed-resources", response_model=dict)
async def seed_resources(
    admin_user: Annotated[dict, Depends(require_admin)],
    conn: Annotated[asyncpg.Connection, Depends(get_db)],
):
    """
    Insert sample library resources that do not exist yet (admin only).

    **Response:**
    ```json
    {
        "success": true,
        "message": "Seeded 12 new resources",
        "total": 12,
        "new_resources": ["Introduction to Petroleum Engineering", "..."]
    }
    ```
    """
    try:
        result = await seed_sample_resources(conn)
    except Exception as e:
        logger.error(f"Error seeding resources: {e}", exc_info=True)
        return error_response_dict(
            {"error": "Failed to seed resources"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    inserted = result["inserted"]
    return {
        "success": True,
        "message": f"Seeded {len(inserted)} new resources",
        "total": result["total"],
        "new_resources": inserted,
    }
