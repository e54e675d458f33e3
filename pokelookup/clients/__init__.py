"""Client modules for external API communication."""
from .pokeapi_client import APIClientError, PokeAPIClient, PokemonNotFoundError

__all__ = [
    'PokeAPIClient',
    'APIClientError',
    'PokemonNotFoundError',
]
