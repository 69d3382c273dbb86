from .catalog import CatalogClient
from .pokeapi import PokeAPI

__all__ = ["CatalogClient", "PokeAPI"]
