"""Catalog listing pipeline.

Everything here is a pure function over already-mapped domain entities. The
input sequences are never mutated; callers own the ``FilterState`` and decide
when to recompute.
"""

import unicodedata
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from models.domain import Brand, Category, FilterState, Product, ProductListing


def collation_key(text: Optional[str]) -> Tuple[str, str, str]:
    """Sort key approximating locale-aware name ordering.

    Compares letters first, ignoring accents and case, then accents, then case
    with lowercase before uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", text or "")
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


def product_sort_key(product: Product) -> tuple:
    # Products with an explicit order come first, in that order; the rest by name.
    if product.product_order is not None:
        return (0, product.product_order, ())
    return (1, 0, collation_key(product.name))


def sort_products(products: Iterable[Product]) -> List[Product]:
    return sorted(products, key=product_sort_key)


def matches_filters(product: Product, filter_state: FilterState) -> bool:
    if not product.is_visible:
        return False

    if filter_state.selected_brand_ids and product.brand_id not in filter_state.selected_brand_ids:
        return False

    if filter_state.selected_category_ids and (
        product.category_id is None or product.category_id not in filter_state.selected_category_ids
    ):
        return False

    query = filter_state.normalized_query
    if not query:
        return True
    name = (product.name or "").casefold()
    description = (product.description or "").casefold()
    return query in name or query in description


def filter_and_sort(
    products: Sequence[Product],
    filter_state: Optional[FilterState] = None,
    group_new_products: bool = True,
) -> ProductListing:
    """Apply the catalog filters and return the ordered listing.

    Args:
        products: Mapped products, in backend order
        filter_state: Active filters; ``None`` or empty sets match everything
        group_new_products: Split products flagged as new into their own group

    Returns:
        ProductListing with each group sorted by product order, then name
    """
    filter_state = filter_state or FilterState()
    survivors = [p for p in products if matches_filters(p, filter_state)]

    if not group_new_products:
        return ProductListing(new_products=[], regular_products=sort_products(survivors))

    new_products = [p for p in survivors if p.is_new is True]
    regular_products = [p for p in survivors if p.is_new is not True]
    return ProductListing(
        new_products=sort_products(new_products),
        regular_products=sort_products(regular_products),
    )


def count_visible_products_by_brand(products: Iterable[Product]) -> Dict[str, int]:
    return dict(Counter(p.brand_id for p in products if p.is_visible))


def visible_brands(brands: Iterable[Brand], counts: Dict[str, int]) -> List[Brand]:
    return [b for b in brands if counts.get(b.id, 0) > 0]


def sort_categories(categories: Iterable[Category]) -> List[Category]:
    return sorted(categories, key=lambda c: collation_key(c.name))
