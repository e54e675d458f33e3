from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

EMPTY_QUERY_MESSAGE = "Please enter a Pokemon name or ID"
NOT_FOUND_MESSAGE = "Pokemon not found"


# Models for the Pokemon record fetched from PokeAPI (Internal Contract)
class PokemonType(BaseModel):
    model_config = ConfigDict(frozen=True)

    slot: int
    name: str


class PokemonAbility(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class PokemonStat(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class PokemonRecord(BaseModel):
    # Snapshot of one lookup; replaced wholesale by the next one, never patched
    model_config = ConfigDict(frozen=True)

    name: str
    sprite_url: str | None
    types: tuple[PokemonType, ...]
    abilities: tuple[PokemonAbility, ...]
    stats: tuple[PokemonStat, ...]
    height: int
    weight: int


# Display states of the search widget. Exactly one is active at a time.
class ErrorKind(str, Enum):
    EMPTY_QUERY = "empty_query"
    LOOKUP_FAILED = "lookup_failed"
    TRANSPORT_OR_PARSE = "transport_or_parse"


class IdleState(BaseModel):
    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    kind: Literal["loading"] = "loading"
    query: str


class SuccessState(BaseModel):
    kind: Literal["success"] = "success"
    record: PokemonRecord


class ErrorState(BaseModel):
    kind: Literal["error"] = "error"
    reason: ErrorKind
    message: str


DisplayState = Annotated[
    IdleState | LoadingState | SuccessState | ErrorState,
    Field(discriminator="kind"),
]


# Models for the rendered widget (Public Contract, served as HTML and JSON)
class TypeBadge(BaseModel):
    slot: int
    label: str


class StatView(BaseModel):
    label: str
    value: int


class ResultView(BaseModel):
    title: str
    image_url: str | None
    image_alt: str
    types: list[TypeBadge]
    abilities: list[str]
    stats: list[StatView]
    height: int
    weight: int


class WidgetView(BaseModel):
    query: str
    loading: bool
    error: str | None
    result: ResultView | None
