"""Achievement catalog and its idempotent seed."""

from typing import Any

import asyncpg

from seedgate.core.logging_config import get_logger

logger = get_logger(__name__)


def _achievement(
    code: str, name: str, description: str, icon: str, category: str, points: int
) -> dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "description": description,
        "icon": icon,
        "category": category,
        "points": points,
    }


DEFAULT_ACHIEVEMENTS: list[dict[str, Any]] = [
    # Completion
    _achievement("first_lesson", "First Steps", "Complete your first lesson", "🎯", "completion", 10),
    _achievement("lessons_5", "Getting Started", "Complete 5 lessons", "📚", "completion", 25),
    _achievement("lessons_10", "Dedicated Learner", "Complete 10 lessons", "🌟", "completion", 50),
    _achievement("lessons_25", "Knowledge Seeker", "Complete 25 lessons", "🏆", "completion", 100),
    _achievement("lessons_50", "Scholar", "Complete 50 lessons", "🎓", "completion", 200),
    _achievement("lessons_100", "Master Learner", "Complete 100 lessons", "👑", "completion", 500),
    # Streak
    _achievement("streak_3", "On a Roll", "Maintain a 3-day learning streak", "🔥", "streak", 25),
    _achievement("streak_7", "Week Warrior", "Maintain a 7-day learning streak", "💪", "streak", 50),
    _achievement("streak_14", "Two Week Champion", "Maintain a 14-day learning streak", "⚡", "streak", 100),
    _achievement("streak_30", "Monthly Master", "Maintain a 30-day learning streak", "🌙", "streak", 250),
    # Certificates
    _achievement("first_certificate", "Certified", "Earn your first certificate", "📜", "certificate", 100),
    _achievement("certificates_3", "Triple Certified", "Earn 3 certificates", "🏅", "certificate", 300),
    _achievement("certificates_5", "Expert", "Earn 5 certificates", "🌟", "certificate", 500),
    # Engagement
    _achievement("first_comment", "Voice Heard", "Post your first comment", "💬", "engagement", 10),
    _achievement("comments_10", "Active Participant", "Post 10 comments", "🗣️", "engagement", 50),
]


async def list_achievements(conn: asyncpg.Connection) -> list[dict[str, Any]]:  # type: ignore[no-any-unimported]
    """List all achievements ordered by category and points."""
    results = await conn.fetch(
        """
        SELECT id, code, name, description, icon, category, points, created_at
        FROM achievements
        ORDER BY category ASC, points ASC
        """
    )
    return [dict(row) for row in results]


async def seed_default_achievements(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection,
    catalog: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Insert catalog achievements whose code is not stored yet.

    Safe to repeat: existing codes are never touched.

    Returns:
        ``inserted`` codes and the ``total`` number of achievements afterwards.
    """
    catalog = DEFAULT_ACHIEVEMENTS if catalog is None else catalog

    rows = await conn.fetch("SELECT code FROM achievements")
    existing_codes = {row["code"] for row in rows}
    new_achievements = [a for a in catalog if a["code"] not in existing_codes]

    if new_achievements:
        await conn.executemany(
            """
            INSERT INTO achievements (code, name, description, icon, category, points)
            VALUES ($1, $2, $3, $4, $5, $6)
            ON CONFLICT (code) DO NOTHING
            """,
            [
                (
                    a["code"],
                    a["name"],
                    a["description"],
                    a["icon"],
                    a["category"],
                    a["points"],
                )
                for a in new_achievements
            ],
        )

    logger.info(f"Seeded {len(new_achievements)} new achievements")
    return {
        "inserted": [a["code"] for a in new_achievements],
        "total": len(existing_codes) + len(new_achievements),
    }
