import asyncio

import httpx
from loguru import logger

from pokescroll.exceptions import DecodeError, FetchError
from pokescroll.models import decode_item_payload

DEFAULT_UPSTREAM_URL = "https://pokeapi.co/api/v2"


def reshape_pokemon(detail: dict) -> dict:
    """Reduce a PokéAPI pokemon document to the catalog item shape.

    Raises:
        DecodeError: if a required field is missing or has the wrong type.
    """
    try:
        artwork = detail["sprites"]["other"]["official-artwork"]["front_default"]
        # Types come back tagged with a slot; keep slot order
        slots = sorted(detail["types"], key=lambda t: t.get("slot", 0))
        reshaped = {
            "name": detail["name"],
            "image": artwork,
            "types": [slot["type"]["name"] for slot in slots],
            "height": detail["height"],
            "weight": detail["weight"],
        }
    except (KeyError, TypeError, AttributeError) as e:
        raise DecodeError(f"Unexpected pokemon document shape: missing {e}") from e
    return decode_item_payload(reshaped).model_dump()


class PokeAPI:
    """Upstream PokéAPI access used by the proxy service."""

    def __init__(
        self,
        base_url: str = DEFAULT_UPSTREAM_URL,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def _get_json(self, url: str, params: dict | None = None):
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Upstream returned status {e.response.status_code} for {url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Could not reach upstream at {url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Upstream response from {url} is not valid JSON") from e

    async def list_pokemon(self, *, offset: int, limit: int) -> list[dict]:
        """Return the listing entries (``name`` and detail ``url``) for a window."""
        logger.info(f"Listing upstream pokemon offset={offset} limit={limit}")
        data = await self._get_json(f"{self.base_url}/pokemon", params={"offset": offset, "limit": limit})
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise DecodeError("Upstream listing has no 'results' array")
        return results

    async def get_pokemon(self, url: str) -> dict:
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise DecodeError(f"Upstream detail at {url} is not an object")
        return data

    async def fetch_page(self, page: int, limit: int) -> list[dict]:
        """Fetch a page of reshaped catalog items.

        Detail lookups run concurrently; the result keeps listing order.
        """
        offset = (page - 1) * limit
        listing = await self.list_pokemon(offset=offset, limit=limit)

        urls = []
        for entry in listing:
            if not isinstance(entry, dict) or not isinstance(entry.get("url"), str):
                raise DecodeError(f"Upstream listing entry has no detail url: {entry!r}")
            urls.append(entry["url"])

        details = await asyncio.gather(*(self.get_pokemon(url) for url in urls))
        logger.info(f"Resolved {len(details)} pokemon details for page {page}")
        return [reshape_pokemon(detail) for detail in details]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
