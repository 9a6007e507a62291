from models.domain import (
    Brand,
    BrandDetail,
    BrandDirectoryEntry,
    BrandSortStrategy,
    CatalogPage,
    Category,
    FilterState,
    Language,
    Product,
    ProductListing,
    ProductType,
)
from models.schemas import RawApiBrand, RawApiCategory, RawApiProduct

__all__ = [
    "Brand",
    "BrandDetail",
    "BrandDirectoryEntry",
    "BrandSortStrategy",
    "CatalogPage",
    "Category",
    "FilterState",
    "Language",
    "Product",
    "ProductListing",
    "ProductType",
    "RawApiBrand",
    "RawApiCategory",
    "RawApiProduct",
]
