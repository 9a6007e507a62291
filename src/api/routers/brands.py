"""API router for brand listings."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from config import settings
from models.domain import FilterState, Language
from models.schemas import (
    BrandDetailResponse,
    BrandDirectoryEntryResponse,
    BrandResponse,
    ProductResponse,
)
from services.brand_names import resolve_brand_name
from services.catalog_service import CatalogService, get_catalog_service
from services.errors import CatalogNotFoundError

router = APIRouter()


def _brand_response(brand, lang: Language) -> BrandResponse:
    return BrandResponse.from_brand(brand, resolve_brand_name(brand, lang))


@router.get("", response_model=List[BrandResponse])
async def list_brands(
    lang: Language = Query(default=Language(settings.default_language)),
    service: CatalogService = Depends(get_catalog_service),
) -> List[BrandResponse]:
    """
    List all brands in display order.

    Args:
        lang: Language used for ``display_name``
        service: Catalog service

    Returns:
        Brands sorted by the configured strategy
    """
    brands = await service.list_brands(lang)
    return [_brand_response(b, lang) for b in brands]


@router.get("/directory", response_model=List[BrandDirectoryEntryResponse])
async def brand_directory(
    lang: Language = Query(default=Language(settings.default_language)),
    service: CatalogService = Depends(get_catalog_service),
) -> List[BrandDirectoryEntryResponse]:
    """
    List brands that have at least one visible product, with their counts.
    """
    entries = await service.brand_directory(lang)
    return [
        BrandDirectoryEntryResponse(
            brand=_brand_response(entry.brand, lang),
            product_count=entry.product_count,
        )
        for entry in entries
    ]


@router.get("/{brand_id}", response_model=BrandDetailResponse)
async def get_brand(
    brand_id: str,
    lang: Language = Query(default=Language(settings.default_language)),
    category_ids: List[int] = Query(default=[], alias="categoryId"),
    q: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
) -> BrandDetailResponse:
    """
    Get a brand with its visible products.

    Args:
        brand_id: Backend brand id
        lang: Language used for ``display_name``
        category_ids: Optional category filter
        q: Optional search text
        service: Catalog service

    Returns:
        Brand details and its grouped product listing

    Raises:
        HTTPException: If the brand does not exist
    """
    filter_state = FilterState.build(category_ids=category_ids, search_query=q)
    try:
        detail = await service.brand_detail(brand_id, filter_state)
    except CatalogNotFoundError:
        raise HTTPException(
            status_code=404,
            detail={
                "error": {
                    "code": "BRAND_NOT_FOUND",
                    "message": f"No brand found with ID '{brand_id}'",
                }
            },
        )

    return BrandDetailResponse(
        brand=_brand_response(detail.brand, lang),
        **ProductResponse.from_listing(detail.listing),
    )
