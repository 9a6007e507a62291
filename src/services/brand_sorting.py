"""Display ordering for brand listings.

Two orderings are in use on the site and both are kept behind
``BrandSortStrategy``:

* ``PRIORITY_LIST`` ranks brands through a hand-tuned table keyed by backend id;
  ids without an entry follow the table in id order.
* ``OTHERS_LAST`` keeps id order but pushes the catch-all "others" brand to the
  end of the list. The brand is recognised by its name as displayed in the
  requested language, or by the English name "Others".

Both are stable and return a new list.
"""

import re
from typing import Callable, Iterable, List, Optional, Union

from constants.brand_order import (
    BRAND_PRIORITY_RANKS,
    OTHERS_BRAND_NAMES,
    OTHERS_BRAND_NAMES_EN,
    UNRANKED_BRAND_OFFSET,
)
from models.domain import Brand, BrandSortStrategy, Language
from services.brand_names import resolve_brand_name

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_brand_id(brand_id: Union[str, int, None]) -> int:
    if brand_id is None or isinstance(brand_id, bool):
        return 0
    if isinstance(brand_id, int):
        return brand_id
    match = _LEADING_INT.match(str(brand_id))
    return int(match.group(1)) if match else 0


def priority_rank(brand_id: Union[str, int, None]) -> int:
    numeric_id = parse_brand_id(brand_id)
    return BRAND_PRIORITY_RANKS.get(numeric_id, UNRANKED_BRAND_OFFSET + numeric_id)


def is_others_brand(brand: Brand, language: Union[Language, str] = Language.AR) -> bool:
    return (
        resolve_brand_name(brand, language) in OTHERS_BRAND_NAMES
        or brand.name_english in OTHERS_BRAND_NAMES_EN
    )


def _priority_key(brand: Brand, language: Union[Language, str]) -> int:
    return priority_rank(brand.id)


def _others_last_key(brand: Brand, language: Union[Language, str]) -> tuple[bool, int]:
    return is_others_brand(brand, language), parse_brand_id(brand.id)


SORT_KEYS: dict[BrandSortStrategy, Callable[[Brand, Union[Language, str]], object]] = {
    BrandSortStrategy.PRIORITY_LIST: _priority_key,
    BrandSortStrategy.OTHERS_LAST: _others_last_key,
}


def sort_brands(
    brands: Iterable[Brand],
    strategy: Optional[Union[BrandSortStrategy, str]] = None,
    language: Union[Language, str] = Language.AR,
) -> List[Brand]:
    strategy = BrandSortStrategy(strategy or BrandSortStrategy.PRIORITY_LIST)
    key = SORT_KEYS[strategy]
    return sorted(brands, key=lambda brand: key(brand, language))
