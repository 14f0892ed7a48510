"""
Unit tests for the achievement catalog and seed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from seedgate.services.achievements import (
    DEFAULT_ACHIEVEMENTS,
    list_achievements,
    seed_default_achievements,
)


@pytest.fixture
def conn():
    mock_conn = MagicMock()
    mock_conn.fetch = AsyncMock(return_value=[])
    mock_conn.executemany = AsyncMock(return_value=None)
    return mock_conn


def test_catalog_codes_are_unique():
    codes = [a["code"] for a in DEFAULT_ACHIEVEMENTS]
    assert len(codes) == len(set(codes))


@pytest.mark.asyncio
async def test_seed_into_empty_table(conn):
    result = await seed_default_achievements(conn)

    assert result["inserted"] == [a["code"] for a in DEFAULT_ACHIEVEMENTS]
    assert result["total"] == len(DEFAULT_ACHIEVEMENTS)
    rows = conn.executemany.await_args.args[1]
    assert len(rows) == len(DEFAULT_ACHIEVEMENTS)
    assert rows[0] == ("first_lesson", "First Steps", "Complete your first lesson", "🎯", "completion", 10)


@pytest.mark.asyncio
async def test_existing_codes_are_skipped(conn):
    conn.fetch.return_value = [{"code": "streak_3"}, {"code": "legacy_badge"}]

    result = await seed_default_achievements(conn)

    assert "streak_3" not in result["inserted"]
    assert len(result["inserted"]) == len(DEFAULT_ACHIEVEMENTS) - 1
    # Codes outside the catalog still count towards the total
    assert result["total"] == len(DEFAULT_ACHIEVEMENTS) + 1


@pytest.mark.asyncio
async def test_second_run_inserts_nothing(conn):
    conn.fetch.return_value = [{"code": a["code"]} for a in DEFAULT_ACHIEVEMENTS]

    result = await seed_default_achievements(conn)

    assert result == {"inserted": [], "total": len(DEFAULT_ACHIEVEMENTS)}
    conn.executemany.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_achievements_returns_dicts(conn):
    conn.fetch.return_value = [{"code": "first_lesson", "points": 10}]

    result = await list_achievements(conn)

    assert result == [{"code": "first_lesson", "points": 10}]
    assert "ORDER BY category ASC, points ASC" in conn.fetch.await_args.args[0]
