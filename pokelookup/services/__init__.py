"""Service layer: the search widget's fetch controller and its lookup capability."""
from .search_controller import (
    LookupFailedError,
    LookupUnavailableError,
    PokemonLookup,
    PokemonLookupError,
    SearchController,
    describe_error,
)

__all__ = [
    'LookupFailedError',
    'LookupUnavailableError',
    'PokemonLookup',
    'PokemonLookupError',
    'SearchController',
    'describe_error',
]
