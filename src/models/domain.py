import enum
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional


class Language(str, enum.Enum):
    EN = "en"
    AR = "ar"


class ProductType(str, enum.Enum):
    CARTON = "كرتونة"
    DOZEN = "دزينة"
    CAN = "علبة"
    TANK = "تنكة"
    PACKET = "بكيت"
    KILOGRAM = "كغم"
    GALLON = "غلن"
    KILO = "كيلو"
    SACK = "شوال"
    BAG = "كيس"
    BUCKET = "سطل"
    BUNDLE = "ربطة"
    UNKNOWN = ""


class BrandSortStrategy(str, enum.Enum):
    PRIORITY_LIST = "priority_list"
    OTHERS_LAST = "others_last"


@dataclass
class Product:
    id: str
    name: str
    brand_id: str
    type: ProductType = ProductType.UNKNOWN
    image: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    product_order: Optional[int] = None
    is_new: Optional[bool] = None
    is_hidden: Optional[bool] = None

    @property
    def is_visible(self) -> bool:
        return self.is_hidden is not True


@dataclass
class Brand:
    id: str
    name: str
    name_english: Optional[str] = None
    logo: str = ""
    description: str = ""
    products: Optional[List[Product]] = None


@dataclass
class Category:
    id: str
    name: str

    @property
    def numeric_id(self) -> int:
        return int(self.id)


@dataclass(frozen=True)
class FilterState:
    """User-selected catalog filters.

    Instances are immutable; the toggle helpers return a new state so the
    caller decides when to recompute a listing.
    """
    selected_brand_ids: FrozenSet[str] = frozenset()
    selected_category_ids: FrozenSet[int] = frozenset()
    search_query: str = ""

    @classmethod
    def build(
        cls,
        brand_ids: Optional[Iterable] = None,
        category_ids: Optional[Iterable] = None,
        search_query: Optional[str] = None,
    ) -> "FilterState":
        """Normalize loosely typed ids (str for brands, int for categories)."""
        return cls(
            selected_brand_ids=frozenset(str(b) for b in brand_ids or ()),
            selected_category_ids=frozenset(int(c) for c in category_ids or ()),
            search_query=search_query or "",
        )

    @property
    def normalized_query(self) -> str:
        return self.search_query.strip().casefold()

    @property
    def is_active(self) -> bool:
        return bool(self.selected_brand_ids or self.selected_category_ids or self.normalized_query)

    def toggle_brand(self, brand_id: str) -> "FilterState":
        brand_id = str(brand_id)
        return replace(self, selected_brand_ids=self.selected_brand_ids ^ {brand_id})

    def toggle_category(self, category_id: int) -> "FilterState":
        category_id = int(category_id)
        return replace(self, selected_category_ids=self.selected_category_ids ^ {category_id})

    def with_search(self, search_query: str) -> "FilterState":
        return replace(self, search_query=search_query or "")

    def cleared(self) -> "FilterState":
        return FilterState()


@dataclass
class ProductListing:
    """Result of the catalog pipeline: promoted products first, then the rest."""
    new_products: List[Product] = field(default_factory=list)
    regular_products: List[Product] = field(default_factory=list)

    @property
    def products(self) -> List[Product]:
        return self.new_products + self.regular_products

    def __len__(self) -> int:
        return len(self.new_products) + len(self.regular_products)


@dataclass
class BrandDirectoryEntry:
    brand: Brand
    product_count: int


@dataclass
class BrandDetail:
    brand: Brand
    listing: ProductListing


@dataclass
class CatalogPage:
    listing: ProductListing
    total_count: int
