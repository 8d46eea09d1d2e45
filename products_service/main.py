# products_service/main.py
import asyncio
import logging
import os

import uvicorn
from fastapi import FastAPI

from . import products
from .database import Base, engine, ensure_database_exists
from .errors import install_exception_handlers

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="products-service",
    description="CRUD API over the product catalog",
    version="1.0.0",
)

install_exception_handlers(app)
app.include_router(products.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def on_startup():
    # psycopg2 is blocking; keep it off the event loop
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, ensure_database_exists)

    # Development convenience; deployed databases are managed with alembic.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("products-service ready")


def run():
    uvicorn.run("products_service.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
