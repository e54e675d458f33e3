from pokelookup.models import (
    DisplayState,
    ErrorState,
    LoadingState,
    PokemonRecord,
    ResultView,
    StatView,
    SuccessState,
    TypeBadge,
    WidgetView,
)


def label(name: str) -> str:
    """Capitalizes the first letter of each word, leaving the rest untouched."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def render_result(record: PokemonRecord) -> ResultView:
    return ResultView(
        title=label(record.name),
        image_url=record.sprite_url,
        image_alt=record.name,
        types=[TypeBadge(slot=t.slot, label=label(t.name)) for t in record.types],
        abilities=[label(a.name) for a in record.abilities],
        stats=[StatView(label=label(s.name), value=s.value) for s in record.stats],
        height=record.height,
        weight=record.weight,
    )


def render_widget(query: str, state: DisplayState) -> WidgetView:
    """
    Projects the controller state into the widget's view.

    Only the active state's payload is rendered: a loading indicator, an error
    message, or the six result sub-views. Idle renders none of them.
    """
    return WidgetView(
        query=query,
        loading=isinstance(state, LoadingState),
        error=state.message if isinstance(state, ErrorState) else None,
        result=render_result(state.record) if isinstance(state, SuccessState) else None,
    )
