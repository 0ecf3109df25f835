"""Populate an empty database with sample listings.

    python -m homebid.db.seed
"""
import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from loguru import logger
from tortoise.transactions import in_transaction

from homebid.core.database import DatabaseManager
from homebid.models.property import Property

UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&q=80"


def _image(photo_id: str, width: int = 1200) -> str:
    return UNSPLASH.format(photo_id, width)


def sample_properties(now: datetime) -> list[dict]:
    return [
        {
            "title": "Modern Lakefront Villa",
            "address": "123 Lake View Dr",
            "city": "Seattle",
            "state": "WA",
            "zip_code": "98101",
            "description": (
                "Renovated lakefront villa with an open floor plan, gourmet kitchen "
                "and floor-to-ceiling windows. Private dock and smart home technology."
            ),
            "asking_price": Decimal("1250000"),
            "beds": 4,
            "baths": Decimal("3"),
            "square_feet": 2800,
            "garage_spaces": 2,
            "featured_image": _image("1580587771525-78b9dba3b914", 800),
            "images": [
                _image("1580587771525-78b9dba3b914"),
                _image("1502005229762-cf1b2da7c5d6", 600),
                _image("1484154218962-a197022b5858", 600),
            ],
            "features": ["Central Air", "Fireplace", "Hardwood Floors", "Private Dock", "Smart Home"],
            "is_new_listing": True,
            "end_date": now + timedelta(days=14),
        },
        {
            "title": "Downtown Luxury Condo",
            "address": "456 Urban Ave",
            "city": "Portland",
            "state": "OR",
            "zip_code": "97204",
            "description": (
                "Downtown condo with skyline views, high ceilings and a chef's kitchen. "
                "Walking distance to restaurants, shopping and nightlife."
            ),
            "asking_price": Decimal("750000"),
            "beds": 2,
            "baths": Decimal("2"),
            "square_feet": 1450,
            "garage_spaces": 1,
            "featured_image": _image("1512917774080-9991f1c4c750", 800),
            "images": [
                _image("1512917774080-9991f1c4c750"),
                _image("1505691938895-1758d7feb511", 600),
            ],
            "features": ["Building Security", "Concierge", "Fitness Center", "Rooftop Deck"],
            "is_hot_property": True,
            "end_date": now + timedelta(days=7),
        },
        {
            "title": "Family-Friendly Suburban Home",
            "address": "789 Oak St",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
            "description": (
                "Well kept suburban home near top-rated schools. Updated kitchen, "
                "covered patio, swimming pool and landscaped garden."
            ),
            "asking_price": Decimal("875000"),
            "beds": 4,
            "baths": Decimal("3"),
            "square_feet": 2500,
            "garage_spaces": 2,
            "featured_image": _image("1600585154340-be6161a56a0c", 800),
            "images": [_image("1600585154340-be6161a56a0c")],
            "features": ["Swimming Pool", "Home Office", "Finished Basement", "Fenced Yard"],
            "is_new_listing": True,
            "end_date": now + timedelta(days=21),
        },
        {
            "title": "Modern Townhouse",
            "address": "101 Park Ave",
            "city": "Denver",
            "state": "CO",
            "zip_code": "80202",
            "description": (
                "Low-maintenance townhouse with quartz countertops, a spa-like primary "
                "bathroom and a rooftop deck with mountain views."
            ),
            "asking_price": Decimal("625000"),
            "beds": 3,
            "baths": Decimal("2.5"),
            "square_feet": 1850,
            "garage_spaces": 2,
            "featured_image": _image("1564013799919-ab600027ffc6", 800),
            "images": [_image("1564013799919-ab600027ffc6")],
            "features": ["Rooftop Deck", "Mountain Views", "Energy Efficient", "Gas Fireplace"],
            "is_featured": True,
            "end_date": now + timedelta(days=30),
        },
    ]


async def seed(now: datetime | None = None) -> int:
    """Insert the sample listings unless some listing already exists"""
    if await Property.exists():
        logger.info("Database already has properties. Skipping seed.")
        return 0

    listings = sample_properties(now or datetime.now(timezone.utc))
    async with in_transaction() as connection:
        for data in listings:
            await Property.create(**data, using_db=connection)

    logger.info(f"Seeded {len(listings)} properties")
    return len(listings)


async def main():
    await DatabaseManager.init()
    try:
        await seed()
    finally:
        await DatabaseManager.close()

if __name__ == "__main__":
    asyncio.run(main())
