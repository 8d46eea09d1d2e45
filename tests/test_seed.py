import pytest

from products_service.repository import ProductRepository
from products_service.seed import FIXED_PRODUCTS, seed_products

pytestmark = pytest.mark.anyio


async def test_seed_inserts_catalog_once(db_session):
    assert await seed_products(db_session) == len(FIXED_PRODUCTS)
    assert await seed_products(db_session) == 0

    names = [p.name for p in await ProductRepository(db_session).find_all()]
    assert names == [item["name"] for item in FIXED_PRODUCTS]
