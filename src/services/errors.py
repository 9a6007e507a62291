from typing import Any, Optional


class CatalogApiError(Exception):
    """Failure talking to the catalog backend."""

    def __init__(self, message: str, status: int, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data


class CatalogNetworkError(CatalogApiError):
    """The request never produced a response (timeout, refused connection)."""


class CatalogHttpError(CatalogApiError):
    """The backend answered with a non-2xx status."""


class CatalogNotFoundError(LookupError):
    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity.capitalize()} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
