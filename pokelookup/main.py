import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from pokelookup.clients import PokeAPIClient
from pokelookup.dependencies import close_poke_client, get_poke_client, get_search_controller
from pokelookup.models import EMPTY_QUERY_MESSAGE, PokemonRecord, WidgetView
from pokelookup.renderer import render_widget
from pokelookup.services import SearchController

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_poke_client()


app = FastAPI(
    title="Pokemon Information App",
    description="Look up a Pokemon by name or ID and display its sprite, types, abilities and stats.",
    lifespan=lifespan,
)


async def _search(controller: SearchController, query: str) -> WidgetView:
    # Responses are built after the lookup settles, so `loading` is always False here
    # and the page template has no loading indicator.
    controller.set_query(query)
    await controller.submit()
    return render_widget(controller.query, controller.state)


# Page: the search widget itself
@app.get("/", response_class=HTMLResponse, summary="Renders the search widget")
async def widget_page(
    request: Request,
    q: str | None = None,
    controller: SearchController = Depends(get_search_controller),
):
    """Renders the widget; when `q` is present (even blank) it is submitted first."""
    if q is None:
        view = render_widget("", controller.state)
    else:
        view = await _search(controller, q)
    return templates.TemplateResponse(request, "widget.html", {"view": view})


# JSON projection of the same widget
@app.get(
    "/search",
    response_model=WidgetView,
    summary="Submits a query and returns the settled widget view",
)
async def search(
    q: str = "",
    controller: SearchController = Depends(get_search_controller),
):
    # Lookup failures are part of the view (error message), not HTTP errors
    return await _search(controller, q)


# Raw record for API consumers
@app.get(
    "/pokemon/{query}",
    response_model=PokemonRecord,
    summary="Returns the Pokemon record for a name or ID",
)
async def get_pokemon(
    query: str,
    poke_client: PokeAPIClient = Depends(get_poke_client),
):
    """Fetches the record (name, sprite, types, abilities, stats, height, weight)."""
    key = query.strip().lower()
    if not key:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_QUERY_MESSAGE)
    # Errors (404, 503) are raised by the PokeAPIClient as FastAPI HTTPExceptions
    return await poke_client.lookup(key)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
