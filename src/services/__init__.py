from .brand_names import resolve_brand_name
from .brand_sorting import sort_brands
from .catalog_client import CatalogApiClient
from .catalog_service import CatalogService, get_catalog_service
from .errors import CatalogApiError, CatalogHttpError, CatalogNetworkError, CatalogNotFoundError
from .mappers import flatten_products_payload, map_brand, map_category, map_product
from .product_filtering import count_visible_products_by_brand, filter_and_sort
from .product_types import map_product_type

__all__ = [
    "CatalogApiClient",
    "CatalogApiError",
    "CatalogHttpError",
    "CatalogNetworkError",
    "CatalogNotFoundError",
    "CatalogService",
    "count_visible_products_by_brand",
    "filter_and_sort",
    "flatten_products_payload",
    "get_catalog_service",
    "map_brand",
    "map_category",
    "map_product",
    "map_product_type",
    "resolve_brand_name",
    "sort_brands",
]
