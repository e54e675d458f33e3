import os
import httpx
import logging
from urllib.parse import quote
from fastapi import HTTPException
from pydantic import ValidationError
from pokelookup.models import (
    NOT_FOUND_MESSAGE,
    PokemonAbility,
    PokemonRecord,
    PokemonStat,
    PokemonType,
)
from pokelookup.services.search_controller import (
    LookupFailedError,
    LookupUnavailableError,
    describe_error,
)

logger = logging.getLogger(__name__)


# Transport failures and unreadable bodies (mapped to 503 Service Unavailable)
class APIClientError(HTTPException, LookupUnavailableError):
    def __init__(self, detail: str, status_code: int = 503):
        # detail keeps the underlying failure's own description, unprefixed
        super().__init__(status_code=status_code, detail=detail)

    @property
    def description(self) -> str:
        return self.detail


# Any non-success status from PokeAPI, 404 or otherwise
class PokemonNotFoundError(HTTPException, LookupFailedError):
    def __init__(self, query: str, upstream_status: int | None = None):
        super().__init__(status_code=404, detail=NOT_FOUND_MESSAGE)
        self.query = query
        self.upstream_status = upstream_status


def _path_segment(key: str) -> str:
    segment = quote(key, safe='')
    # "." and ".." would otherwise be resolved as dot segments by httpx
    if segment in ('.', '..'):
        segment = segment.replace('.', '%2E')
    return segment


class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"
    TIMEOUT = 5.0

    def __init__(self, base_url: str = None, timeout: float = None):
        # Use environment variables if not provided
        if base_url is None:
            base_url = os.getenv("POKEAPI_BASE_URL", self.BASE_URL)
        if timeout is None:
            timeout = float(os.getenv("POKEAPI_TIMEOUT", self.TIMEOUT))
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def _fetch_pokemon_data(self, key: str) -> dict:
        """Internal method to fetch the raw /pokemon payload with error handling."""
        # Path parameter must stay a single segment, whatever the user typed
        url = f"/pokemon/{_path_segment(key)}"
        logger.info(f"Looking up Pokemon: {key}")

        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for '{key}': {describe_error(e)}")
            raise APIClientError(detail=describe_error(e))

        if not response.is_success:
            # Every non-success status collapses to "not found"
            logger.warning(f"PokeAPI returned status {response.status_code} for '{key}'")
            raise PokemonNotFoundError(key, upstream_status=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"PokeAPI returned an undecodable body for '{key}'")
            raise APIClientError(detail=describe_error(e))

    async def lookup(self, query: str) -> PokemonRecord:
        """Fetches, processes, and validates the Pokemon record for a name or ID."""
        key = query.strip().lower()
        data = await self._fetch_pokemon_data(key)

        try:
            return PokemonRecord(
                name=data['name'],
                sprite_url=(data.get('sprites') or {}).get('front_default'),
                types=[
                    PokemonType(slot=entry['slot'], name=entry['type']['name'])
                    for entry in data['types']
                ],
                abilities=_unique_abilities(data['abilities']),
                stats=[
                    PokemonStat(name=entry['stat']['name'], value=entry['base_stat'])
                    for entry in data['stats']
                ],
                height=data['height'],
                weight=data['weight'],
            )
        except KeyError as e:
            logger.error(f"PokeAPI response for '{key}' is missing field {e}")
            raise APIClientError(detail=f"PokeAPI response is missing field {e}")
        except (TypeError, AttributeError, ValidationError) as e:
            logger.error(f"PokeAPI response parsing error for '{key}'.")
            raise APIClientError(detail=describe_error(e))

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()


def _unique_abilities(entries: list) -> list[PokemonAbility]:
    # Hidden and regular slots can repeat the same ability; first one wins
    seen = set()
    abilities = []
    for entry in entries:
        name = entry['ability']['name']
        if name not in seen:
            seen.add(name)
            abilities.append(PokemonAbility(name=name))
    return abilities
