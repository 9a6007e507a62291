"""API router for the product grid."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from models.domain import FilterState
from models.schemas import ProductListingResponse, ProductResponse
from services.catalog_service import CatalogService, get_catalog_service

router = APIRouter()


@router.get("", response_model=ProductListingResponse)
async def list_products(
    brand_ids: List[str] = Query(default=[], alias="brandId"),
    category_ids: List[int] = Query(default=[], alias="categoryId"),
    q: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductListingResponse:
    """
    List visible products matching the given filters.

    Args:
        brand_ids: Brands to include (all when empty)
        category_ids: Categories to include (all when empty)
        q: Case-insensitive text matched against name and description
        service: Catalog service

    Returns:
        New and regular products, the matching count and the catalog total
    """
    filter_state = FilterState.build(brand_ids=brand_ids, category_ids=category_ids, search_query=q)
    page = await service.product_listing(filter_state)
    return ProductListingResponse(
        total=page.total_count,
        **ProductResponse.from_listing(page.listing),
    )
