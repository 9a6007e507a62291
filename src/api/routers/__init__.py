"""API routers."""

from api.routers import brands, categories, products

__all__ = ["brands", "categories", "products"]
