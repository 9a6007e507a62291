import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import brands, categories, products
from config import settings
from services.errors import CatalogHttpError, CatalogNetworkError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    logger.info(f"Using catalog backend: {settings.catalog_api_base_url}")
    logger.info(f"Brand sort strategy: {settings.brand_sort_strategy}")
    yield


async def catalog_http_error_handler(request: Request, exc: CatalogHttpError) -> JSONResponse:
    content = exc.data if isinstance(exc.data, (dict, list)) else {}
    return JSONResponse(status_code=exc.status, content=content)


async def catalog_network_error_handler(request: Request, exc: CatalogNetworkError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={"message": "Failed to fetch catalog data", "error": exc.message},
    )


def register_routes(app: FastAPI) -> None:
    app.add_exception_handler(CatalogHttpError, catalog_http_error_handler)
    app.add_exception_handler(CatalogNetworkError, catalog_network_error_handler)

    app.include_router(brands.router, prefix="/api/brands", tags=["brands"])
    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(categories.router, prefix="/api/categories", tags=["categories"])

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": VERSION,
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}


app = FastAPI(
    title=settings.app_name,
    description="Bilingual product catalog for brands, products and categories",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app)
