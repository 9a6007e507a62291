"""Conversion from backend payloads to catalog domain entities.

Brand ids become strings and category ids stay integers here, so the rest of
the catalog code never has to guess which representation it is holding.
"""

import logging
from typing import Any, Iterable, List, Optional

from models.domain import Brand, Category, Product
from models.schemas import RawApiBrand, RawApiCategory, RawApiProduct
from services.product_types import map_product_type

logger = logging.getLogger(__name__)


def describe_product(raw: RawApiProduct) -> str:
    return f"Quantity: {raw.quantity}, Packaging: {raw.packaging}, Unit: {raw.unit}"


def map_product(raw: RawApiProduct, brand_id_override: Optional[str] = None) -> Product:
    if brand_id_override:
        brand_id = str(brand_id_override)
    elif raw.brand_id is not None:
        brand_id = str(raw.brand_id)
    else:
        brand_id = ""

    return Product(
        id=str(raw.id),
        name=raw.name,
        brand_id=brand_id,
        description=describe_product(raw),
        type=map_product_type(raw.unit, raw.packaging),
        category_id=raw.category_id,
        category_name=raw.category_name,
        product_order=raw.product_order,
        is_new=raw.is_new,
        is_hidden=raw.is_hidden,
    )


def map_brand(raw: RawApiBrand) -> Brand:
    brand_id = str(raw.id)
    products = None
    if raw.products is not None:
        products = [map_product(p, brand_id) for p in raw.products]

    return Brand(
        id=brand_id,
        name=raw.name,
        name_english=raw.name_english,
        logo=raw.image_url or "",
        description="",
        products=products,
    )


def map_category(raw: RawApiCategory) -> Category:
    return Category(id=str(raw.id), name=raw.name)


def map_brands(payload: Iterable[Any]) -> List[Brand]:
    return [map_brand(RawApiBrand.model_validate(item)) for item in payload]


def map_categories(payload: Iterable[Any]) -> List[Category]:
    return [map_category(RawApiCategory.model_validate(item)) for item in payload]


def flatten_products_payload(payload: Iterable[Any]) -> List[Product]:
    """Map a product list payload into a flat list of products.

    Args:
        payload: Either product records, or brand records carrying their
            products under ``products`` (older backend shape)

    Returns:
        Products in payload order
    """
    products: List[Product] = []
    for item in payload:
        if isinstance(item, dict) and "products" in item:
            brand = map_brand(RawApiBrand.model_validate(item))
            products.extend(brand.products or [])
        else:
            products.append(map_product(RawApiProduct.model_validate(item)))

    logger.debug(f"Mapped {len(products)} products from payload")
    return products
