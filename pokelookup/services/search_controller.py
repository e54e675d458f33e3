import logging
from typing import Protocol

from pokelookup.models import (
    EMPTY_QUERY_MESSAGE,
    NOT_FOUND_MESSAGE,
    DisplayState,
    ErrorKind,
    ErrorState,
    IdleState,
    LoadingState,
    PokemonRecord,
    SuccessState,
)

logger = logging.getLogger(__name__)


def describe_error(exc: BaseException) -> str:
    """Human readable description of a failure, falling back to its class name."""
    return str(exc) or exc.__class__.__name__


# Failures a lookup capability may raise
class PokemonLookupError(Exception):
    @property
    def description(self) -> str:
        return describe_error(self)


class LookupFailedError(PokemonLookupError):
    """The lookup service answered, but not with a record (any non-success status)."""


class LookupUnavailableError(PokemonLookupError):
    """The lookup could not complete, or its answer could not be read."""


class PokemonLookup(Protocol):
    """Anything that turns a lookup key into a record or raises a PokemonLookupError."""

    async def lookup(self, query: str) -> PokemonRecord: ...


class SearchController:
    """
    Drives one search widget: validate the query, look it up, settle on a display state.

    Each submission takes a new request token. A lookup that resolves after a
    newer submission has started is discarded, so the latest submission always
    owns the displayed state.
    """

    def __init__(self, lookup: PokemonLookup):
        self._lookup = lookup
        self._latest_request = 0
        self.query = ""
        self.state: DisplayState = IdleState()

    @property
    def loading(self) -> bool:
        return isinstance(self.state, LoadingState)

    @property
    def record(self) -> PokemonRecord | None:
        if isinstance(self.state, SuccessState):
            return self.state.record
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.state, ErrorState):
            return self.state.message
        return None

    def set_query(self, text: str) -> None:
        self.query = text

    async def key_pressed(self, key: str) -> DisplayState | None:
        if key != "Enter":
            return None
        return await self.submit()

    async def submit(self) -> DisplayState:
        self._latest_request += 1
        request_id = self._latest_request

        key = self.query.strip().lower()
        if not key:
            # No loading state and no network call for a blank query
            self.state = ErrorState(reason=ErrorKind.EMPTY_QUERY, message=EMPTY_QUERY_MESSAGE)
            return self.state

        self.state = LoadingState(query=key)
        outcome: DisplayState = IdleState()
        try:
            record = await self._lookup.lookup(key)
            outcome = SuccessState(record=record)
        except LookupFailedError:
            outcome = ErrorState(reason=ErrorKind.LOOKUP_FAILED, message=NOT_FOUND_MESSAGE)
        except PokemonLookupError as e:
            outcome = ErrorState(reason=ErrorKind.TRANSPORT_OR_PARSE, message=e.description)
        except Exception as e:
            logger.exception(f"Lookup for '{key}' failed unexpectedly")
            outcome = ErrorState(reason=ErrorKind.TRANSPORT_OR_PARSE, message=describe_error(e))
        finally:
            # Loading always ends here; a cancelled lookup falls back to idle
            if request_id == self._latest_request:
                self.state = outcome
            else:
                logger.info(f"Discarding stale response for '{key}' (request {request_id})")

        return self.state
