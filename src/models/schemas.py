from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.domain import Brand, Product, ProductListing


class RawApiProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    brand_id: Optional[int] = Field(default=None, alias="brandId")
    brand_name: Optional[str] = Field(default=None, alias="brandName")
    name: str = ""
    quantity: str = ""
    packaging: str = ""
    unit: str = ""
    category_id: Optional[int] = Field(default=None, alias="categoryId")
    category_name: Optional[str] = Field(default=None, alias="categoryName")
    product_order: Optional[int] = Field(default=None, alias="productOrder")
    is_new: Optional[bool] = Field(default=None, alias="isNew")
    is_hidden: Optional[bool] = Field(default=None, alias="isHidden")


class RawApiBrand(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str = ""
    name_english: Optional[str] = Field(default=None, alias="nameEnglish")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    products: Optional[List[RawApiProduct]] = None


class RawApiCategory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = ""


class ProductResponse(BaseModel):
    id: str
    name: str
    brand_id: str
    type: str
    image: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    product_order: Optional[int] = None
    is_new: bool = False

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            brand_id=product.brand_id,
            type=product.type.value,
            image=product.image,
            description=product.description,
            price=product.price,
            category_id=product.category_id,
            category_name=product.category_name,
            product_order=product.product_order,
            is_new=product.is_new is True,
        )

    @classmethod
    def from_listing(cls, listing: ProductListing) -> dict:
        return {
            "new_products": [cls.from_product(p) for p in listing.new_products],
            "regular_products": [cls.from_product(p) for p in listing.regular_products],
            "visible_count": len(listing),
        }


class BrandResponse(BaseModel):
    id: str
    name: str
    name_english: Optional[str]
    display_name: str
    logo: str
    description: str

    @classmethod
    def from_brand(cls, brand: Brand, display_name: str) -> "BrandResponse":
        return cls(
            id=brand.id,
            name=brand.name,
            name_english=brand.name_english,
            display_name=display_name,
            logo=brand.logo,
            description=brand.description,
        )


class BrandDirectoryEntryResponse(BaseModel):
    brand: BrandResponse
    product_count: int


class ProductListingResponse(BaseModel):
    new_products: List[ProductResponse]
    regular_products: List[ProductResponse]
    visible_count: int
    total: int


class BrandDetailResponse(BaseModel):
    brand: BrandResponse
    new_products: List[ProductResponse]
    regular_products: List[ProductResponse]
    visible_count: int


class CategoryResponse(BaseModel):
    id: int
    name: str
