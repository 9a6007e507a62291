import asyncio
import logging
from typing import AsyncGenerator, List, Optional, Union

from config import settings
from models.domain import (
    Brand,
    BrandDetail,
    BrandDirectoryEntry,
    BrandSortStrategy,
    CatalogPage,
    Category,
    FilterState,
    Language,
)
from services.brand_sorting import sort_brands
from services.catalog_client import CatalogApiClient
from services.catalog_repository import BrandRepository, CategoryRepository, ProductRepository
from services.product_filtering import (
    count_visible_products_by_brand,
    filter_and_sort,
    sort_categories,
    visible_brands,
)

logger = logging.getLogger(__name__)


async def _gather_or_cancel(*coros):
    """Run fetches concurrently; if one fails, cancel and await the rest."""
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class CatalogService:
    """Assembles the catalog views from the backend collections.

    Responsibilities:
    - Brand ordering according to the configured strategy
    - Brand directory with visible product counts
    - Brand detail and product grid listings through the shared pipeline
    - Category filter options
    """

    def __init__(
        self,
        brand_repo: BrandRepository,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        brand_sort_strategy: Optional[Union[BrandSortStrategy, str]] = None,
        group_new_products: Optional[bool] = None,
    ):
        self.brand_repo = brand_repo
        self.product_repo = product_repo
        self.category_repo = category_repo
        self.brand_sort_strategy = BrandSortStrategy(
            brand_sort_strategy or settings.brand_sort_strategy
        )
        self.group_new_products = (
            settings.group_new_products if group_new_products is None else group_new_products
        )

    @classmethod
    def from_client(cls, client: CatalogApiClient, **kwargs) -> "CatalogService":
        return cls(
            BrandRepository(client),
            ProductRepository(client),
            CategoryRepository(client),
            **kwargs,
        )

    def _language(self, language: Optional[Union[Language, str]]) -> Language:
        return Language(language or settings.default_language)

    async def list_brands(self, language: Optional[Union[Language, str]] = None) -> List[Brand]:
        brands = await self.brand_repo.get_all()
        return sort_brands(brands, self.brand_sort_strategy, self._language(language))

    async def brand_directory(
        self,
        language: Optional[Union[Language, str]] = None,
    ) -> List[BrandDirectoryEntry]:
        brands, products = await _gather_or_cancel(
            self.brand_repo.get_all(),
            self.product_repo.get_all(),
        )
        counts = count_visible_products_by_brand(products)
        ordered = sort_brands(brands, self.brand_sort_strategy, self._language(language))
        listed = visible_brands(ordered, counts)
        logger.debug(f"Brand directory: {len(listed)} of {len(brands)} brands have visible products")
        return [BrandDirectoryEntry(brand=b, product_count=counts[b.id]) for b in listed]

    async def brand_detail(
        self,
        brand_id: str,
        filter_state: Optional[FilterState] = None,
    ) -> BrandDetail:
        brand_id = str(brand_id)
        # Products are only fetched once the brand is known to exist.
        brand = await self.brand_repo.get_by_id(brand_id)
        products = await self.product_repo.get_all()
        filter_state = filter_state or FilterState()
        scoped = FilterState(
            selected_brand_ids=frozenset({brand_id}),
            selected_category_ids=filter_state.selected_category_ids,
            search_query=filter_state.search_query,
        )
        listing = filter_and_sort(products, scoped, self.group_new_products)
        return BrandDetail(brand=brand, listing=listing)

    async def product_listing(self, filter_state: Optional[FilterState] = None) -> CatalogPage:
        products = await self.product_repo.get_all()
        listing = filter_and_sort(products, filter_state, self.group_new_products)
        logger.debug(f"Product listing: {len(listing)} of {len(products)} products match")
        return CatalogPage(listing=listing, total_count=len(products))

    async def category_options(self) -> List[Category]:
        categories = await self.category_repo.get_all()
        return sort_categories(categories)


async def get_catalog_service() -> AsyncGenerator[CatalogService, None]:
    client = CatalogApiClient()
    try:
        yield CatalogService.from_client(client)
    finally:
        await client.aclose()
