"""
Proxy service for the catalog.

Exposes ``GET /api/pokemons`` which reads one window of the PokéAPI
listing, resolves each entry's detail document and returns the reduced
item shape the terminal browser consumes.
"""

from .app import create_app  # noqa: F401
