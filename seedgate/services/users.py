"""User lookup service functions."""

from typing import Any

import asyncpg


async def get_user_by_external_id(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection, external_id: str
) -> dict[str, Any] | None:
    """Get the platform user linked to an identity provider subject."""
    result = await conn.fetchrow(
        """
        SELECT id, external_id, email, role, created_at
        FROM users
        WHERE external_id = $1
        """,
        external_id,
    )
    return dict(result) if result else None
