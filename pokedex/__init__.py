"""
Pokédex package entry point.

Expose the query facade and the snapshot loader so application code can
import `pokedex.load_pokedex` without reaching into the internals.
"""

from .core.resolver import Pokedex
from .data.loader import load_pokedex

__all__ = ["Pokedex", "load_pokedex"]
