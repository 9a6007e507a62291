"""API router for category filter options."""

from typing import List

from fastapi import APIRouter, Depends

from models.schemas import CategoryResponse
from services.catalog_service import CatalogService, get_catalog_service

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> List[CategoryResponse]:
    categories = await service.category_options()
    return [CategoryResponse(id=c.numeric_id, name=c.name) for c in categories]
