"""Test fixtures for the catalog API and services."""

import copy
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
import sys
from pathlib import Path


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from api.app import register_routes
from services.catalog_client import CatalogApiClient
from services.catalog_service import CatalogService, get_catalog_service

BACKEND_URL = "http://catalog.test"

BRANDS_PAYLOAD = [
    {"id": 1, "name": "الريان", "nameEnglish": "Al Rayyan", "imageUrl": "https://cdn.test/1.png"},
    {"id": 2, "name": "الصفا", "nameEnglish": "Al Safa", "imageUrl": "https://cdn.test/2.png"},
    {"id": 3, "name": "النخلة", "nameEnglish": None, "imageUrl": None},
    {"id": 14, "name": "اخرى", "nameEnglish": "Others", "imageUrl": ""},
    {"id": 7, "name": "الوادي", "nameEnglish": "Al Wadi", "imageUrl": "https://cdn.test/7.png"},
]

PRODUCTS_PAYLOAD = [
    {
        "id": 10, "brandId": 2, "brandName": "الصفا", "name": "Milk",
        "quantity": "12", "packaging": "كرتونة", "unit": "علبة",
        "categoryId": 9, "categoryName": "Dairy", "productOrder": 2,
        "isNew": False, "isHidden": False,
    },
    {
        "id": 11, "brandId": 2, "brandName": "الصفا", "name": "Juice",
        "quantity": "24", "packaging": "كرتونة", "unit": "",
        "categoryId": 9, "categoryName": "Dairy", "productOrder": 1,
        "isNew": False, "isHidden": False,
    },
    {
        "id": 12, "brandId": 3, "brandName": "النخلة", "name": "Soap",
        "quantity": "6", "packaging": "دزينة", "unit": "",
        "categoryId": 5, "categoryName": "Cleaning", "isHidden": True,
    },
    {
        "id": 13, "brandId": 1, "brandName": "الريان", "name": "Rice",
        "quantity": "25", "packaging": "", "unit": "كيس",
        "categoryId": 4, "categoryName": "Grains", "productOrder": 1,
        "isNew": True,
    },
    {
        "id": 14, "brandId": 1, "brandName": "الريان", "name": "Flour",
        "quantity": "50", "packaging": "شوال", "unit": "",
        "categoryId": 4, "categoryName": "Grains",
    },
    {
        "id": 15, "brandId": 14, "brandName": "اخرى", "name": "Tea",
        "quantity": "100", "packaging": "بكيت", "unit": "",
        "categoryId": 6, "categoryName": "Beverages",
    },
]

CATEGORIES_PAYLOAD = [
    {"id": 9, "name": "Dairy"},
    {"id": 4, "name": "Grains"},
    {"id": 5, "name": "Cleaning"},
    {"id": 6, "name": "Beverages"},
]


class FakeCatalogBackend:
    """In-memory stand-in for the catalog backend, served through httpx.MockTransport."""

    def __init__(self):
        self.brands = copy.deepcopy(BRANDS_PAYLOAD)
        self.products = copy.deepcopy(PRODUCTS_PAYLOAD)
        self.categories = copy.deepcopy(CATEGORIES_PAYLOAD)
        self.requests: list[httpx.Request] = []
        self.overrides: dict[str, tuple] = {}
        self.errors: dict[str, Exception] = {}

    def respond(self, path: str, status_code: int, json=None, content: bytes = b"") -> None:
        self.overrides[path] = (status_code, json, content)

    def raise_on(self, path: str, error: Exception) -> None:
        self.errors[path] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.errors:
            raise self.errors[path]
        if path in self.overrides:
            status_code, body, content = self.overrides[path]
            if body is not None:
                return httpx.Response(status_code, json=body)
            return httpx.Response(status_code, content=content)
        if path == "/api/brands":
            return httpx.Response(200, json=self.brands)
        if path == "/api/products":
            return httpx.Response(200, json=self.products)
        if path == "/api/categories":
            return httpx.Response(200, json=self.categories)
        return httpx.Response(404, json={"message": f"Unknown endpoint {path}"})

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def backend() -> FakeCatalogBackend:
    return FakeCatalogBackend()


@pytest.fixture
def catalog_client(backend: FakeCatalogBackend) -> CatalogApiClient:
    return CatalogApiClient(base_url=BACKEND_URL, timeout=5.0, http_client=backend.http_client())


@pytest.fixture
def catalog_service(catalog_client: CatalogApiClient) -> CatalogService:
    return CatalogService.from_client(
        catalog_client,
        brand_sort_strategy="priority_list",
        group_new_products=True,
    )


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="Ajjawe Catalog Test",
        description="Bilingual product catalog for brands, products and categories",
        version="0.1.0",
        lifespan=test_lifespan,
    )
    register_routes(app)
    return app


def make_service_override(backend: FakeCatalogBackend):
    async def override_get_catalog_service():
        catalog_client = CatalogApiClient(base_url=BACKEND_URL, http_client=backend.http_client())
        try:
            yield CatalogService.from_client(
                catalog_client,
                brand_sort_strategy="priority_list",
                group_new_products=True,
            )
        finally:
            await catalog_client.aclose()

    return override_get_catalog_service


@pytest.fixture
def service_override():
    return make_service_override


@pytest.fixture
def nested_backend() -> FakeCatalogBackend:
    """Backend answering /api/products with brands that nest their products."""
    backend = FakeCatalogBackend()
    nested = []
    for brand in backend.brands:
        products = [
            {k: v for k, v in p.items() if k != "brandId"}
            for p in backend.products
            if p["brandId"] == brand["id"]
        ]
        nested.append({**brand, "products": products})
    backend.products = nested
    return backend


@pytest.fixture(scope="function")
def client(backend: FakeCatalogBackend, test_app: FastAPI):
    test_app.dependency_overrides[get_catalog_service] = make_service_override(backend)
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
