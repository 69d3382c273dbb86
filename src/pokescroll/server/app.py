"""
Route definitions and application factory for the proxy service.

Endpoints:
- GET  /              : health check
- GET  /api/pokemons  : one page of reshaped catalog items
"""

from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from pokescroll.exceptions import CatalogError
from pokescroll.gateways.pokeapi import DEFAULT_UPSTREAM_URL, PokeAPI

from .schemas import HealthOut, PokemonOut

router = APIRouter(prefix="/api", tags=["pokemons"])


def get_pokeapi(request: Request) -> PokeAPI:
    return request.app.state.pokeapi


@router.get("/pokemons", response_model=List[PokemonOut])
async def list_pokemons(
    page: int = Query(default=1, ge=1, description="Current page (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    pokeapi: PokeAPI = Depends(get_pokeapi),
) -> List[PokemonOut]:
    """Return one page of pokemon in listing order.

    There is no pagination metadata; an empty array means the listing
    has no entries at this offset.
    """
    try:
        items = await pokeapi.fetch_page(page, limit)
    except CatalogError as e:
        logger.warning(f"Upstream failure for page={page} limit={limit}: {e}")
        raise HTTPException(status_code=502, detail=f"Upstream catalog error: {e}")
    return [PokemonOut(**item) for item in items]


def create_app(upstream_url: str = DEFAULT_UPSTREAM_URL, pokeapi: Optional[PokeAPI] = None, timeout: float = 10.0) -> FastAPI:
    """Build the proxy application.

    Args:
        upstream_url: PokéAPI base URL, used when ``pokeapi`` is omitted.
        pokeapi: Pre-built upstream client (tests pass one backed by a mock
            transport). A client created here is closed on shutdown.
        timeout: Upstream request timeout in seconds.
    """
    upstream = pokeapi or PokeAPI(upstream_url, timeout=timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Proxy starting, upstream {upstream.base_url}")
        yield
        await upstream.aclose()

    app = FastAPI(
        title="Pokescroll catalog proxy",
        description="Serves paginated, reshaped PokéAPI data for the Pokescroll browser.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.pokeapi = upstream
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"], allow_headers=["*"])

    @app.get("/", response_model=HealthOut)
    def health_check() -> HealthOut:
        return HealthOut()

    app.include_router(router)
    return app
