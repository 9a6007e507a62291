"""Repositories over the catalog backend.

Each repository fetches one collection and maps it to domain entities. Lookups
by id are served from the fetched collection because the backend exposes no
detail endpoints for reads.
"""

import logging
from dataclasses import asdict
from typing import Any, List, Optional

from models.domain import Brand, Category, Product
from models.schemas import RawApiBrand, RawApiProduct
from services.catalog_client import (
    BRANDS_ENDPOINT,
    CATEGORIES_ENDPOINT,
    PRODUCTS_ENDPOINT,
    CatalogApiClient,
)
from services.errors import CatalogNotFoundError
from services.mappers import flatten_products_payload, map_brand, map_brands, map_categories, map_product

logger = logging.getLogger(__name__)


def _detail_endpoint(collection: str, entity_id: str) -> str:
    return f"{collection}/{entity_id}"


def _as_list(payload: Any) -> list:
    return payload if isinstance(payload, list) else []


def _create_payload(entity: Any) -> dict:
    # The backend assigns ids on create.
    return {k: v for k, v in asdict(entity).items() if v is not None and k != "id"}


class BrandRepository:
    def __init__(self, client: CatalogApiClient):
        self.client = client

    async def get_all(self) -> List[Brand]:
        try:
            payload = await self.client.get(BRANDS_ENDPOINT)
        except Exception as e:
            logger.error(f"Error fetching brands: {e}")
            raise
        return map_brands(_as_list(payload))

    async def get_by_id(self, brand_id: str) -> Brand:
        brand_id = str(brand_id)
        brands = await self.get_all()
        for brand in brands:
            if brand.id == brand_id:
                return brand
        raise CatalogNotFoundError("brand", brand_id)

    async def create(self, brand: Brand) -> Brand:
        payload = await self.client.post(BRANDS_ENDPOINT, _create_payload(brand))
        return map_brand(RawApiBrand.model_validate(payload))

    async def update(self, brand_id: str, changes: dict) -> Brand:
        payload = await self.client.put(_detail_endpoint(BRANDS_ENDPOINT, brand_id), changes)
        return map_brand(RawApiBrand.model_validate(payload))

    async def delete(self, brand_id: str) -> None:
        await self.client.delete(_detail_endpoint(BRANDS_ENDPOINT, brand_id))


class ProductRepository:
    def __init__(self, client: CatalogApiClient):
        self.client = client

    async def _fetch(self, params: Optional[dict] = None) -> List[Product]:
        try:
            payload = await self.client.get(PRODUCTS_ENDPOINT, params=params)
        except Exception as e:
            logger.error(f"Error fetching products: {e}")
            raise
        return flatten_products_payload(_as_list(payload))

    async def get_all(self) -> List[Product]:
        return await self._fetch()

    async def get_by_id(self, product_id: str) -> Product:
        product_id = str(product_id)
        for product in await self.get_all():
            if product.id == product_id:
                return product
        raise CatalogNotFoundError("product", product_id)

    async def get_by_brand_id(self, brand_id: str) -> List[Product]:
        brand_id = str(brand_id)
        products = await self._fetch(params={"brandId": brand_id})
        # Some backends ignore the query parameter and return everything.
        return [p for p in products if p.brand_id == brand_id]

    async def create(self, product: Product) -> Product:
        payload = await self.client.post(PRODUCTS_ENDPOINT, _create_payload(product))
        return map_product(RawApiProduct.model_validate(payload), product.brand_id)

    async def update(self, product_id: str, changes: dict) -> Product:
        payload = await self.client.put(_detail_endpoint(PRODUCTS_ENDPOINT, product_id), changes)
        return map_product(RawApiProduct.model_validate(payload), changes.get("brand_id"))

    async def delete(self, product_id: str) -> None:
        await self.client.delete(_detail_endpoint(PRODUCTS_ENDPOINT, product_id))


class CategoryRepository:
    def __init__(self, client: CatalogApiClient):
        self.client = client

    async def get_all(self) -> List[Category]:
        try:
            payload = await self.client.get(CATEGORIES_ENDPOINT)
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            raise
        return map_categories(_as_list(payload))
