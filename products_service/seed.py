"""Seed the database with a fixed demo catalog.

Idempotent: rows are only inserted while the `products` table is empty, so
running it against a populated database changes nothing.

Usage:
    python -m products_service.seed

The target database comes from DATABASE_URL, same as the service.
"""
import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .database import Base, async_session_maker, engine
from .models import Product

logger = logging.getLogger(__name__)

FIXED_PRODUCTS = [
    {"name": "Air filter", "price": 19.90},
    {"name": "Front brake pads", "price": 54.99},
    {"name": "Spark plug (platinum)", "price": 12.50},
    {"name": "Timing belt kit", "price": 129.00},
    {"name": "Front shock absorber", "price": 89.99},
    {"name": "Radiator", "price": 199.50},
    {"name": "Thermostat", "price": 29.90},
    {"name": "Oil filter", "price": 9.99},
]


async def seed_products(session: AsyncSession) -> int:
    existing = await session.scalar(select(func.count()).select_from(Product))
    if existing:
        logger.info("products table already has %s rows, skipping seed", existing)
        return 0

    session.add_all([Product(**item) for item in FIXED_PRODUCTS])
    await session.commit()
    logger.info("Seeded %s demo products", len(FIXED_PRODUCTS))
    return len(FIXED_PRODUCTS)


async def main() -> int:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_session_maker() as session:
        return await seed_products(session)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
