import pytest
from pokelookup.models import (
    ErrorKind,
    ErrorState,
    IdleState,
    LoadingState,
    PokemonAbility,
    PokemonRecord,
    PokemonStat,
    PokemonType,
    SuccessState,
)
from pokelookup.renderer import label, render_result, render_widget

MOCK_RECORD = PokemonRecord(
    name="mr-mime",
    sprite_url="https://example.test/122.png",
    types=[PokemonType(slot=1, name="psychic"), PokemonType(slot=2, name="fairy")],
    abilities=[PokemonAbility(name="soundproof"), PokemonAbility(name="filter")],
    stats=[PokemonStat(name="special-attack", value=100), PokemonStat(name="hp", value=40)],
    height=13,
    weight=545,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("pikachu", "Pikachu"),
        ("special-attack", "Special-attack"),
        ("mr mime", "Mr Mime"),
        ("", ""),
    ],
)
def test_label_capitalizes_each_word(name, expected):
    assert label(name) == expected


def test_render_result_projects_six_sub_views():
    view = render_result(MOCK_RECORD)

    assert view.title == "Mr-mime"
    assert view.image_url == "https://example.test/122.png"
    assert view.image_alt == "mr-mime"
    assert [(b.slot, b.label) for b in view.types] == [(1, "Psychic"), (2, "Fairy")]
    assert view.abilities == ["Soundproof", "Filter"]
    assert [(s.label, s.value) for s in view.stats] == [("Special-attack", 100), ("Hp", 40)]
    assert view.height == 13
    assert view.weight == 545


def test_idle_renders_nothing():
    view = render_widget("", IdleState())

    assert view.loading is False
    assert view.error is None
    assert view.result is None


def test_loading_renders_only_the_indicator():
    view = render_widget("pikachu", LoadingState(query="pikachu"))

    assert view.loading is True
    assert view.error is None
    assert view.result is None


def test_error_renders_only_the_message():
    state = ErrorState(reason=ErrorKind.LOOKUP_FAILED, message="Pokemon not found")

    view = render_widget("zzzz", state)

    assert view.loading is False
    assert view.error == "Pokemon not found"
    assert view.result is None


def test_success_renders_only_the_result():
    view = render_widget("Mr-Mime", SuccessState(record=MOCK_RECORD))

    assert view.query == "Mr-Mime"
    assert view.loading is False
    assert view.error is None
    assert view.result == render_result(MOCK_RECORD)
