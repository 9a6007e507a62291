import logging
from typing import Any, Optional

import httpx

from config import settings
from services.errors import CatalogApiError, CatalogHttpError, CatalogNetworkError

logger = logging.getLogger(__name__)

BRANDS_ENDPOINT = "/api/brands"
PRODUCTS_ENDPOINT = "/api/products"
CATEGORIES_ENDPOINT = "/api/categories"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class CatalogApiClient:
    """Thin async JSON client for the catalog backend.

    Every failure is raised as a ``CatalogApiError`` subclass carrying an HTTP
    status (0 when no response arrived, 408 on timeout).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.catalog_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.catalog_api_timeout
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=DEFAULT_HEADERS,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json: Optional[Any] = None,
    ) -> Any:
        client = self._get_client()
        try:
            response = await client.request(
                method,
                f"{self.base_url}{endpoint}",
                params=params,
                json=json,
                headers=DEFAULT_HEADERS,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Catalog API timeout on {method} {endpoint}: {e}")
            raise CatalogNetworkError("Request timeout", 408) from e
        except httpx.TransportError as e:
            logger.error(f"Catalog API unreachable on {method} {endpoint}: {e}")
            raise CatalogNetworkError("Network error: Unable to connect to server", 0) from e

        if not response.is_success:
            error_data = _parse_error_body(response)
            message = error_data.get("message") if isinstance(error_data, dict) else None
            logger.warning(f"Catalog API {method} {endpoint} returned {response.status_code}")
            raise CatalogHttpError(
                message or f"HTTP error! status: {response.status_code}",
                response.status_code,
                error_data,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise CatalogApiError(f"Invalid JSON in response from {endpoint}", 0) from e

    async def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self.request("POST", endpoint, json=data)

    async def put(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self.request("PUT", endpoint, json=data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)


def _parse_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}
