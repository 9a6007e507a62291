from constants.brand_order import (
    BRAND_PRIORITY_RANKS,
    MISSING_BRAND_NAME,
    OTHERS_BRAND_NAMES,
    OTHERS_BRAND_NAMES_EN,
    UNRANKED_BRAND_OFFSET,
)
from constants.product_units import UNIT_TO_PRODUCT_TYPE

__all__ = [
    "BRAND_PRIORITY_RANKS",
    "MISSING_BRAND_NAME",
    "OTHERS_BRAND_NAMES",
    "OTHERS_BRAND_NAMES_EN",
    "UNRANKED_BRAND_OFFSET",
    "UNIT_TO_PRODUCT_TYPE",
]
