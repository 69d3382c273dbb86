"""Pokescroll - browse the Pokémon catalog from the terminal."""

__version__ = "0.1.0"
