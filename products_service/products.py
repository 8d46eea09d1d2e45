# products_service/products.py
import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .models import Product
from .repository import ProductRepository
from .schemas import ProductIn, ProductOut, Violation

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(prefix="/api/products", tags=["products"])

VALIDATION_RESPONSES = {400: {"model": List[Violation], "description": "Validation failed"}}
NOT_FOUND_RESPONSES = {404: {"description": "Product not found"}}


def get_repository(session: AsyncSession = Depends(get_session)) -> ProductRepository:
    return ProductRepository(session)


async def find_or_404(products: ProductRepository, product_id: int) -> Product:
    product = await products.find(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# must be registered before /{product_id}
@router.get("/view", response_class=HTMLResponse, summary="Products page")
async def products_view(request: Request):
    return templates.TemplateResponse(request, "products/index.html", {"api_url": router.prefix + "/"})


@router.get("/", response_model=List[ProductOut], summary="List products")
async def list_products(products: ProductRepository = Depends(get_repository)):
    return await products.find_all()


@router.get("/{product_id}", response_model=ProductOut, responses=NOT_FOUND_RESPONSES, summary="Get product by id")
async def get_product(product_id: int, products: ProductRepository = Depends(get_repository)):
    return await find_or_404(products, product_id)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=VALIDATION_RESPONSES,
    summary="Create product",
)
async def create_product(payload: ProductIn, products: ProductRepository = Depends(get_repository)):
    product = Product(name=payload.name, price=payload.price)
    products.persist(product)
    await products.flush()
    logger.info("Created product %s", product.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{router.prefix}/{product.id}"},
    )


# The body is validated before the handler runs, so an invalid payload answers
# 400 even when the id does not exist.
@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**VALIDATION_RESPONSES, **NOT_FOUND_RESPONSES},
    summary="Replace product name and price",
)
async def update_product(
    product_id: int,
    payload: ProductIn,
    products: ProductRepository = Depends(get_repository),
):
    product = await find_or_404(products, product_id)
    product.name = payload.name
    product.price = payload.price
    await products.flush()
    logger.info("Updated product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete product",
)
async def delete_product(product_id: int, products: ProductRepository = Depends(get_repository)):
    product = await find_or_404(products, product_id)
    await products.remove(product)
    await products.flush()
    logger.info("Deleted product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
