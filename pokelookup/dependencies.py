from pokelookup.clients import PokeAPIClient
from pokelookup.services import SearchController
from fastapi import Depends

_poke_client = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

async def close_poke_client() -> None:
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None

def get_search_controller(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> SearchController:
    # One controller per page view; the HTTP client is shared
    return SearchController(lookup=poke_client)
