"""Bundled petroleum-engineering curriculum used by the content seed."""

from typing import Any

MODULES: list[dict[str, Any]] = [
    {
        "module_id": "intro-petroleum",
        "title": "Introduction to Petroleum Engineering",
        "description": "Learn the fundamentals of petroleum engineering, including reservoir basics, drilling concepts, and industry overview.",
        "duration": "4 hours",
        "discipline": "petroleum",
        "difficulty_level": "beginner",
        "learning_objectives": [
            "Understand the oil and gas value chain",
            "Learn basic reservoir concepts",
            "Identify key drilling equipment and processes",
            "Recognize career paths in petroleum engineering",
        ],
        "status": "published",
        "order_index": 1,
        "thumbnail_url": "https://images.unsplash.com/photo-1518709766631-a6a7f45921c3?w=800",
    },
    {
        "module_id": "reservoir-fundamentals",
        "title": "Reservoir Engineering Fundamentals",
        "description": "Deep dive into reservoir characterization, fluid properties, and production mechanisms.",
        "duration": "6 hours",
        "discipline": "petroleum",
        "difficulty_level": "intermediate",
        "learning_objectives": [
            "Analyze reservoir rock and fluid properties",
            "Calculate original oil/gas in place",
            "Understand drive mechanisms",
            "Apply material balance equations",
        ],
        "status": "published",
        "order_index": 2,
        "thumbnail_url": "https://images.unsplash.com/photo-1581093458791-9d42e3c2fd45?w=800",
    },
    {
        "module_id": "drilling-operations",
        "title": "Drilling Operations & Well Control",
        "description": "Master drilling techniques, equipment, and well control procedures for safe operations.",
        "duration": "8 hours",
        "discipline": "drilling",
        "difficulty_level": "intermediate",
        "learning_objectives": [
            "Design a drilling program",
            "Select appropriate drilling fluids",
            "Implement well control procedures",
            "Troubleshoot common drilling problems",
        ],
        "status": "published",
        "order_index": 3,
        "thumbnail_url": "https://images.unsplash.com/photo-1513828583688-c52646db42da?w=800",
    },
    {
        "module_id": "production-optimization",
        "title": "Production Engineering & Optimization",
        "description": "Learn production systems, artificial lift methods, and optimization techniques.",
        "duration": "5 hours",
        "discipline": "production",
        "difficulty_level": "advanced",
        "learning_objectives": [
            "Design production systems",
            "Select artificial lift methods",
            "Optimize well performance",
            "Troubleshoot production problems",
        ],
        "status": "published",
        "order_index": 4,
        "thumbnail_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
    },
    {
        "module_id": "geology-basics",
        "title": "Petroleum Geology Essentials",
        "description": "Understand geological concepts critical to finding and developing oil and gas reserves.",
        "duration": "5 hours",
        "discipline": "geology",
        "difficulty_level": "beginner",
        "learning_objectives": [
            "Identify sedimentary rock types",
            "Understand petroleum system elements",
            "Interpret well logs",
            "Recognize trap types and seal mechanisms",
        ],
        "status": "published",
        "order_index": 5,
        "thumbnail_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=800",
    },
]


def _section(title: str, description: str, sequence: int, duration: str) -> dict[str, Any]:
    return {
        "title": title,
        "description": description,
        "sequence": sequence,
        "estimated_duration": duration,
    }


# Keyed by module_id
SECTIONS: dict[str, list[dict[str, Any]]] = {
    "intro-petroleum": [
        _section("The Oil & Gas Industry Overview", "History, current state, and future of the petroleum industry", 1, "45 min"),
        _section("Upstream, Midstream, Downstream", "Understanding the value chain segments", 2, "30 min"),
        _section("Basic Reservoir Concepts", "Introduction to porosity, permeability, and saturation", 3, "1 hour"),
        _section("Drilling Fundamentals", "Overview of drilling rigs and operations", 4, "45 min"),
        _section("Career Paths in Energy", "Explore various roles and progression opportunities", 5, "30 min"),
    ],
    "reservoir-fundamentals": [
        _section("Rock Properties", "Porosity, permeability, and rock mechanics", 1, "1 hour"),
        _section("Fluid Properties", "Oil, gas, and water characteristics", 2, "1 hour"),
        _section("Reservoir Drive Mechanisms", "Natural energy sources for production", 3, "1.5 hours"),
        _section("Volumetric Calculations", "Estimating OOIP and OGIP", 4, "1.5 hours"),
        _section("Material Balance", "Reservoir performance prediction", 5, "1 hour"),
    ],
    "drilling-operations": [
        _section("Drilling Rig Components", "Understanding the rig and its systems", 1, "1.5 hours"),
        _section("Drilling Fluids", "Mud systems and their functions", 2, "1.5 hours"),
        _section("Drill Bit Selection", "Choosing the right bit for the formation", 3, "1 hour"),
        _section("Well Control Principles", "Kick detection and well control methods", 4, "2 hours"),
        _section("Casing & Cementing", "Wellbore isolation and integrity", 5, "2 hours"),
    ],
    "production-optimization": [
        _section("Production Systems", "From reservoir to surface facilities", 1, "1 hour"),
        _section("Artificial Lift Methods", "ESP, rod pump, gas lift, and more", 2, "1.5 hours"),
        _section("Well Testing", "Pressure transient analysis", 3, "1 hour"),
        _section("Production Optimization", "Maximizing recovery and efficiency", 4, "1 hour"),
        _section("Troubleshooting", "Common production problems and solutions", 5, "30 min"),
    ],
    "geology-basics": [
        _section("Sedimentary Rocks", "Formation and classification", 1, "1 hour"),
        _section("Petroleum System Elements", "Source, reservoir, seal, and trap", 2, "1.5 hours"),
        _section("Structural Geology", "Faults, folds, and traps", 3, "1 hour"),
        _section("Well Log Interpretation", "Basic log reading skills", 4, "1 hour"),
        _section("Seismic Basics", "Introduction to seismic data", 5, "30 min"),
    ],
}

# Keyed by section title
PAGES: dict[str, list[dict[str, Any]]] = {
    "The Oil & Gas Industry Overview": [
        {
            "title": "History of the Petroleum Industry",
            "content": """# History of the Petroleum Industry

From the first commercial oil well drilled by Edwin Drake in Titusville,
Pennsylvania in 1859 to today's global energy complex, the petroleum industry
has shaped the modern world.

## Key Milestones

- **1859**: Drake's Well marks the birth of the modern oil industry
- **1901**: Spindletop gusher in Texas transforms the industry
- **1960**: OPEC founded
- **2000s**: Shale revolution transforms North America
- **2020s**: Energy transition and sustainability focus
""",
            "page_type": "lesson",
            "sequence": 1,
            "estimated_duration": "15 min",
        },
        {
            "title": "Understanding Energy Markets",
            "content": """# Understanding Energy Markets

Energy markets are where buyers and sellers trade crude oil, natural gas, and
refined products.

## Key Benchmarks

- **WTI (West Texas Intermediate)**: US benchmark
- **Brent Crude**: International benchmark
- **Henry Hub**: US natural gas benchmark

## Price Drivers

1. Supply and demand
2. Geopolitical events
3. OPEC decisions
4. Weather
5. Economic growth
""",
            "page_type": "lesson",
            "sequence": 2,
            "estimated_duration": "15 min",
        },
        {
            "title": "Industry Overview Quiz",
            "content": """# Test Your Knowledge

Complete this quiz to check your understanding of the petroleum industry overview.
""",
            "page_type": "quiz",
            "sequence": 3,
            "estimated_duration": "10 min",
        },
    ],
}

RESOURCES: list[dict[str, Any]] = [
    {
        "title": "SPE Technical Papers Collection",
        "description": "Access to Society of Petroleum Engineers technical papers on various topics.",
        "type": "document",
        "category": "Technical",
        "url": "https://www.spe.org/en/publications/",
        "content": None,
        "is_premium": False,
        "is_published": True,
    },
    {
        "title": "Drilling Engineering Handbook",
        "description": "Comprehensive guide to drilling operations, equipment, and best practices.",
        "type": "document",
        "category": "Drilling",
        "url": "#",
        "content": None,
        "is_premium": False,
        "is_published": True,
    },
    {
        "title": "Reservoir Simulation Basics",
        "description": "Video tutorial series on reservoir simulation fundamentals.",
        "type": "video",
        "category": "Reservoir",
        "url": "https://www.youtube.com/watch?v=example",
        "content": None,
        "is_premium": False,
        "is_published": True,
    },
    {
        "title": "Career Guide: Breaking into Oil & Gas",
        "description": "Step-by-step guide for students and career changers entering the industry.",
        "type": "article",
        "category": "Career",
        "url": None,
        "content": """# Breaking into Oil & Gas: A Complete Guide

## Introduction
The oil and gas industry offers rewarding careers with competitive salaries and global opportunities.
""",
        "is_premium": False,
        "is_published": True,
    },
    {
        "title": "Well Control Certification Prep",
        "description": "Preparation materials for IWCF and IADC well control certifications.",
        "type": "document",
        "category": "Certifications",
        "url": "#",
        "content": None,
        "is_premium": True,
        "is_published": True,
    },
    {
        "title": "Production Optimization Techniques",
        "description": "Advanced techniques for maximizing well and field production.",
        "type": "video",
        "category": "Production",
        "url": "https://www.youtube.com/watch?v=example2",
        "content": None,
        "is_premium": True,
        "is_published": True,
    },
]
