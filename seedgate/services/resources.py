"""Sample library resources and their idempotent seed."""

from typing import Any

import asyncpg

from seedgate.core.logging_config import get_logger

logger = get_logger(__name__)


def _resource(
    title: str,
    description: str,
    type_: str,
    category: str,
    url: str | None = None,
    content: str | None = None,
    is_premium: bool = False,
) -> dict[str, Any]:
    return {
        "title": title,
        "description": description,
        "type": type_,
        "category": category,
        "url": url,
        "content": content.strip() if content else None,
        "is_premium": is_premium,
        "is_published": True,
    }


PETROLEUM_ENGINEERING_INTRO = """
# Introduction to Petroleum Engineering

Petroleum engineering is concerned with the production of hydrocarbons, either crude oil or natural gas.

## Key Areas

### 1. Exploration
Engineers work with geologists to understand subsurface geology and identify potential reservoirs.

### 2. Drilling
Once a reservoir is identified, a wellbore is drilled to access the hydrocarbons.

### 3. Production
Production engineers optimize the extraction of oil and gas from the reservoir.

### 4. Reservoir Engineering
Reservoir engineers analyze oil, gas and water flow in the reservoir to maximize recovery.

## Career Opportunities

- Drilling Engineer
- Production Engineer
- Reservoir Engineer
- Completion Engineer
- Facilities Engineer
"""

SEISMIC_INTERPRETATION = """
# Understanding Seismic Data Interpretation

Seismic interpretation extracts subsurface geological information from seismic data.

## How Seismic Surveys Work

1. **Energy Source**: vibroseis or explosives generate seismic waves
2. **Wave Propagation**: waves reflect off rock boundaries
3. **Recording**: geophones record the reflected waves
4. **Processing**: data is processed into images of subsurface structures

## Applications

- Structural traps (anticlines, faults)
- Stratigraphic traps
- Reservoir extent and thickness
- Fluid contacts
"""

RESERVOIR_SIMULATION = """
# Advanced Reservoir Simulation Techniques

## Types of Simulators

1. **Black Oil Simulators**: conventional oil reservoirs
2. **Compositional Simulators**: gas condensate and volatile oil reservoirs
3. **Thermal Simulators**: heavy oil and steam injection

## Building a Simulation Model

- Geological model input
- Fluid property initialization
- Well placement and completion design
- History matching
- Production forecasting
"""

NIGERIA_INDUSTRY_OVERVIEW = """
# Nigerian Oil & Gas Industry Overview 2024

## Production Statistics
- Daily oil production: ~1.5 million barrels
- Natural gas production: 1.5 billion cubic feet per day
- Proven reserves: 37 billion barrels of oil

## Key Developments
- Petroleum Industry Act implementation
- Deepwater exploration expansion
- Gas monetization projects
- Local content development initiatives
"""

LIBRARY_RESOURCES: list[dict[str, Any]] = [
    # Articles
    _resource(
        "Introduction to Petroleum Engineering",
        "A comprehensive guide to understanding the fundamentals of petroleum engineering, "
        "including exploration, drilling, and production processes.",
        "article",
        "Petroleum Engineering",
        content=PETROLEUM_ENGINEERING_INTRO,
    ),
    _resource(
        "Understanding Seismic Data Interpretation",
        "Learn how geophysicists use seismic data to map underground rock formations "
        "and identify potential oil and gas deposits.",
        "article",
        "Geophysics",
        content=SEISMIC_INTERPRETATION,
    ),
    _resource(
        "Advanced Reservoir Simulation Techniques",
        "Deep dive into modern reservoir simulation methods and software used in the oil and gas industry.",
        "article",
        "Reservoir Engineering",
        content=RESERVOIR_SIMULATION,
        is_premium=True,
    ),
    # Videos
    _resource(
        "Offshore Drilling Operations Explained",
        "Visual guide to understanding how offshore drilling platforms operate in deep water environments.",
        "video",
        "Drilling",
        url="https://www.youtube.com/watch?v=example1",
    ),
    _resource(
        "Well Completion Best Practices",
        "Expert walkthrough of modern well completion techniques and equipment selection.",
        "video",
        "Completions",
        url="https://www.youtube.com/watch?v=example2",
    ),
    _resource(
        "Production Optimization Masterclass",
        "Advanced techniques for maximizing well productivity and reducing operational costs.",
        "video",
        "Production",
        url="https://www.youtube.com/watch?v=example3",
        is_premium=True,
    ),
    # Documents
    _resource(
        "SPE Technical Paper: Enhanced Oil Recovery Methods",
        "Society of Petroleum Engineers technical paper on modern EOR techniques and field applications.",
        "document",
        "Research Papers",
        url="https://www.spe.org/example-paper",
        is_premium=True,
    ),
    _resource(
        "Nigerian Oil & Gas Industry Overview 2024",
        "Comprehensive report on the current state of Nigeria's oil and gas sector, "
        "including production statistics and future outlook.",
        "document",
        "Industry Reports",
        content=NIGERIA_INDUSTRY_OVERVIEW,
    ),
    # Links
    _resource(
        "Society of Petroleum Engineers (SPE)",
        "Official website of SPE - the largest organization for oil and gas professionals worldwide.",
        "link",
        "Professional Organizations",
        url="https://www.spe.org",
    ),
    _resource(
        "Schlumberger Oilfield Glossary",
        "Comprehensive dictionary of oilfield terms and definitions - "
        "essential reference for students and professionals.",
        "link",
        "Reference",
        url="https://glossary.slb.com",
    ),
    _resource(
        "PetroWiki - Petroleum Engineering Knowledge Base",
        "Free online resource covering all aspects of petroleum engineering, maintained by SPE.",
        "link",
        "Reference",
        url="https://petrowiki.spe.org",
    ),
    _resource(
        "Department of Petroleum Resources Nigeria",
        "Official regulatory body for Nigeria's upstream oil and gas sector.",
        "link",
        "Regulatory",
        url="https://www.nuprc.gov.ng",
    ),
]


async def seed_sample_resources(  # type: ignore[no-any-unimported]
    conn: asyncpg.Connection,
    catalog: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Insert library resources whose title is not stored yet.

    Returns:
        ``inserted`` titles and the ``total`` number of resources afterwards.
    """
    catalog = LIBRARY_RESOURCES if catalog is None else catalog

    rows = await conn.fetch("SELECT title FROM resources")
    existing_titles = {row["title"] for row in rows}
    new_resources = [r for r in catalog if r["title"] not in existing_titles]

    if new_resources:
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
                    r["title"],
                    r["description"],
                    r["type"],
                    r["category"],
                    r["url"],
                    r["content"],
                    r["is_premium"],
                    r["is_published"],
                )
                for r in new_resources
            ],
        )

    logger.info(f"Seeded {len(new_resources)} new resources")
    return {
        "inserted": [r["title"] for r in new_resources],
        "total": len(existing_titles) + len(new_resources),
    }
