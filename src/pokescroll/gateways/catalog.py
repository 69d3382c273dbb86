import httpx
from loguru import logger

from pokescroll.exceptions import DecodeError, FetchError
from pokescroll.models import Item

POKEMONS_PATH = "/api/pokemons"


class CatalogClient:
    """Client for the proxy endpoint that serves catalog pages.

    The endpoint returns a bare JSON array per page with no pagination
    metadata, so callers only learn that data ran out from an empty page.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_page(self, page: int, limit: int) -> list[Item]:
        """Fetch one page of items.

        Raises:
            FetchError: on transport failure or a non-success status.
            DecodeError: when the body is not a JSON array of items.
        """
        if page < 1 or limit < 1:
            raise ValueError(f"page and limit must be positive, got page={page} limit={limit}")

        url = f"{self.base_url}{POKEMONS_PATH}"
        logger.info(f"Fetching catalog page {page} (limit {limit}) from {url}")
        try:
            response = await self._client.get(url, params={"page": page, "limit": limit})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Catalog returned status {e.response.status_code} for page {page}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Could not reach catalog for page {page}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Catalog page {page} is not valid JSON") from e

        if not isinstance(payload, list):
            raise DecodeError(f"Catalog page {page} must be a JSON array, got {type(payload).__name__}")

        return [Item.from_dict(entry) for entry in payload]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
