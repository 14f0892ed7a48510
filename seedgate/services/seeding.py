"""Content seeding: learning modules, sections, pages and resources."""

from typing import Any, Awaitable, Callable
from uuid import UUID

import asyncpg

from seedgate.core.database import get_db_connection
from seedgate.core.logging_config import get_logger
from seedgate.services.seed_data import MODULES, PAGES, RESOURCES, SECTIONS

logger = get_logger(__name__)

# A zero-argument coroutine function that performs a seed and returns its result.
Seeder = Callable[[], Awaitable[Any]]


async def _insert_modules(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection, modules: list[dict[str, Any]]
) -> dict[str, UUID]:
    """Insert modules and map their readable module_id to the new row id."""
    module_ids: dict[str, UUID] = {}
    for module in modules:
        module_ids[module["module_id"]] = await conn.fetchval(
            """
            INSERT INTO learning_modules (
                module_id, title, description, duration, discipline,
                difficulty_level, learning_objectives, status, order_index,
                thumbnail_url
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            RETURNING id
            """,
            module["module_id"],
            module["title"],
            module["description"],
            module["duration"],
            module["discipline"],
            module["difficulty_level"],
            module["learning_objectives"],
            module["status"],
            module["order_index"],
            module["thumbnail_url"],
        )
    return module_ids


async def _insert_sections(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection,
    sections: dict[str, list[dict[str, Any]]],
    module_ids: dict[str, UUID],
) -> tuple[dict[str, UUID], int]:
    """Insert sections under their module and map section title to row id."""
    section_ids: dict[str, UUID] = {}
    total = 0
    for module_key, module_sections in sections.items():
        module_uuid = module_ids.get(module_key)
        if module_uuid is None:
            logger.warning(f"Skipping sections for unknown module: {module_key}")
            continue

        for section in module_sections:
            section_ids[section["title"]] = await conn.fetchval(
                """
                INSERT INTO module_sections (
                    module_id, title, description, sequence, estimated_duration
                )
                VALUES ($1, $2, $3, $4, $5)
                RETURNING id
                """,
                module_uuid,
                section["title"],
                section["description"],
                section["sequence"],
                section["estimated_duration"],
            )
            total += 1
    return section_ids, total


async def _insert_pages(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection,
    pages: dict[str, list[dict[str, Any]]],
    section_ids: dict[str, UUID],
) -> int:
    total = 0
    for section_title, section_pages in pages.items():
        section_uuid = section_ids.get(section_title)
        if section_uuid is None:
            logger.warning(f"Skipping pages for unknown section: {section_title}")
            continue

        await conn.executemany(
            """
            INSERT INTO section_pages (
                section_id, title, content, page_type, sequence, estimated_duration
            )
            VALUES ($1, $2, $3, $4, $5, $6)
            """,
            [
                (
                    section_uuid,
                    page["title"],
                    page["content"],
                    page["page_type"],
                    page["sequence"],
                    page["estimated_duration"],
                )
                for page in section_pages
            ],
        )
        total += len(section_pages)
    return total


async def _insert_resources(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection, resources: list[dict[str, Any]]
) -> int:
    if not resources:
        return 0
    await conn.executemany(
        """
        INSERT INTO resources (
            title, description, type, category, url, content,
            is_premium, is_published
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        """,
        [
            (
                resource["title"],
                resource["description"],
                resource["type"],
                resource["category"],
                resource["url"],
                resource["content"],
                resource["is_premium"],
                resource["is_published"],
            )
            for resource in resources
        ],
    )
    return len(resources)


async def seed_database(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection,
    modules: list[dict[str, Any]] | None = None,
    sections: dict[str, list[dict[str, Any]]] | None = None,
    pages: dict[str, list[dict[str, Any]]] | None = None,
    resources: list[dict[str, Any]] | None = None,
) -> dict[str, int]:
    """
    Insert the bundled curriculum in a single transaction.

    Not idempotent: every call inserts a fresh copy, so a second run fails on
    the unique ``learning_modules.module_id`` constraint and rolls back.

    Returns:
        Counts of inserted modules, sections, pages and resources.
    """
    modules = MODULES if modules is None else modules
    sections = SECTIONS if sections is None else sections
    pages = PAGES if pages is None else pages
    resources = RESOURCES if resources is None else resources

    logger.info("Starting database seed...")
    async with conn.transaction():
        module_ids = await _insert_modules(conn, modules)
        logger.info(f"Inserted {len(module_ids)} modules")

        section_ids, section_count = await _insert_sections(
            conn, sections, module_ids
        )
        logger.info(f"Inserted {section_count} sections")

        page_count = await _insert_pages(conn, pages, section_ids)
        logger.info(f"Inserted {page_count} pages")

        resource_count = await _insert_resources(conn, resources)
        logger.info(f"Inserted {resource_count} resources")

    logger.info("Database seed complete")
    return {
        "modules": len(module_ids),
        "sections": section_count,
        "pages": page_count,
        "resources": resource_count,
    }


async def run_seed() -> dict[str, int]:
    """Default seeder: run the content seed on a pooled connection."""
    async with get_db_connection() as conn:
        return await seed_database(conn)
