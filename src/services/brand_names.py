from typing import Optional, Union

from constants.brand_order import MISSING_BRAND_NAME
from models.domain import Brand, Language


def resolve_brand_name(brand: Optional[Brand], language: Union[Language, str]) -> str:
    if brand is None:
        return MISSING_BRAND_NAME
    if language == Language.EN:
        return brand.name_english or brand.name or MISSING_BRAND_NAME
    return brand.name or MISSING_BRAND_NAME
