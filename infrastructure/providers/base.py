import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions.currency import NetworkError, ParseError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class BaseJSONProvider(ABC):
    """A base class for pricing APIs, handling the common HTTP and decoding logic."""

    BASE_URL: str

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    async def _request(self, endpoint: str, params: dict | None = None) -> Any:
        """Issue a single GET and return the decoded JSON body. No retries."""
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"{self.name}: GET {url} params={params}")

        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{self.name} HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(f"{self.name} request failed: {e.__class__.__name__}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"{self.name} response parsing error: {str(e)}") from e

    def _parse(self, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(
                f"{self.name} unexpected response shape: {e.error_count()} validation error(s)"
            ) from e

    async def close(self) -> None:
        await self._client.aclose()
