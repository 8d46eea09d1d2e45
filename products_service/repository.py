# products_service/repository.py
"""Persistence collaborators used by the products router.

`ProductRepository` is both the lookup side (`find_all`, `find`) and the unit
of work for one request (`persist`, `remove`, `flush`). Nothing is written to
the database until `flush()` commits the session.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product

# products.id is a 32-bit INTEGER; ids outside it cannot exist
MAX_ID = 2**31 - 1


class ProductRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Product]:
        result = await self.session.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def find(self, product_id: int) -> Optional[Product]:
        if not 1 <= product_id <= MAX_ID:
            return None
        return await self.session.get(Product, product_id)

    def persist(self, product: Product) -> None:
        self.session.add(product)

    async def remove(self, product: Product) -> None:
        await self.session.delete(product)

    async def flush(self) -> None:
        """Commit pending changes; ids of persisted products are set afterwards."""
        await self.session.commit()
