from typing import Optional

from constants.product_units import UNIT_TO_PRODUCT_TYPE
from models.domain import ProductType


def map_product_type(unit: Optional[str], packaging: Optional[str]) -> ProductType:
    """Resolve the canonical product type, trying the unit before the packaging."""
    for token in (_clean(unit), _clean(packaging)):
        product_type = UNIT_TO_PRODUCT_TYPE.get(token)
        if product_type is not None:
            return product_type
    return ProductType.UNKNOWN


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()
