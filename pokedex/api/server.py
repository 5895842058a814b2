"""HTTP interface around the Pokédex query engine."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from pokedex.config import ServiceConfig
from pokedex.core import formatter
from pokedex.core.resolver import Pokedex
from pokedex.core.sorting import InvalidSortKeyError
from pokedex.data.loader import load_pokedex

logger = logging.getLogger(__name__)

NOT_FOUND = "404 Not Found"
SORTING_TYPES = "number, weight, height, baseattack, basedefence, basestamina"


def _text(body: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(body, status_code=status_code)


def _get_pokedex(request: Request) -> Pokedex:
    return request.app.state.pokedex


def create_app(pokedex: Optional[Pokedex] = None, config: Optional[ServiceConfig] = None) -> FastAPI:
    """
    Build the application.

    When no Pokedex is injected, the snapshot at ``config.data_path`` is read
    once on startup and shared read-only by every request.
    """
    config = config or ServiceConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "pokedex", None) is None:
            app.state.pokedex = load_pokedex(config.data_path)
        yield

    app = FastAPI(title="PokéDex API", version="0.1.0", lifespan=lifespan)
    app.state.pokedex = pokedex
    app.state.config = config

    @app.get("/list", response_class=PlainTextResponse)
    def list_endpoint(request: Request):
        dex = _get_pokedex(request)
        params = request.query_params

        if "type" in params:
            pokemon_type = params.getlist("type")[0]
            if not pokemon_type:
                logger.warning("400 Error: Client left Pokemon type value empty.")
                return _text("You need to provide the pokemon type value!\n", 400)
            logger.info("Client requested to list pokemons by type %s", pokemon_type)
            return _list_by_type(dex, request, pokemon_type)

        if "pokemons" in params:
            logger.info("Served all pokemons.")
            return _text(formatter.format_pokemons(dex.pokemons))

        if "types" in params:
            logger.info("Served all pokemon types.")
            return _text(formatter.format_types(dex))

        if "moves" in params:
            logger.info("Served all pokemon moves.")
            return _text(formatter.format_moves(dex))

        if not request.url.query:
            logger.info("Served all pokemons, moves and types.")
            return _text(formatter.format_everything(dex))

        logger.warning("404 Error: Client's request is not found.")
        return _text(NOT_FOUND + "\n", 404)

    @app.get("/", response_class=PlainTextResponse)
    @app.get("/help", response_class=PlainTextResponse)
    def help_endpoint():
        logger.info("Served help text.")
        return _text(formatter.HELP_TEXT)

    @app.get("/{resource:path}", response_class=PlainTextResponse)
    def resource_endpoint(request: Request, resource: str):
        dex = _get_pokedex(request)
        query = resource.lower()
        logger.info("Client requested resource %s", query)

        pokemons = dex.resolve_pokemon(query)
        if pokemons:
            logger.info("Served pokemon with the name %s", query)
            return _text(dex.render(pokemons))

        typ = dex.resolve_type(query)
        if typ is not None:
            logger.info("Served type with the name %s", query)
            return _text(dex.render(typ) + "\n")

        move = dex.resolve_move(query)
        if move is not None:
            logger.info("Served move with the name %s", query)
            return _text(dex.render(move) + "\n")

        logger.warning("404 Error: Client's request is not found.")
        return _text(NOT_FOUND + "\n", 404)

    return app


def _list_by_type(dex: Pokedex, request: Request, pokemon_type: str) -> PlainTextResponse:
    pokemons = dex.pokemons_of_type(pokemon_type)
    if not pokemons:
        logger.warning("Client provided invalid pokemon type %s", pokemon_type)
        return _text(f"Could not find any pokemons for the type {pokemon_type}\n", 404)

    params = request.query_params
    if "sortby" in params:
        sort_key = params.getlist("sortby")[0]
        if not sort_key:
            logger.info("Client requested sorting types.")
            return _text(f"Available sorting types: {SORTING_TYPES}\n")
        try:
            pokemons = dex.sort_pokemons(pokemons, sort_key)
        except InvalidSortKeyError:
            logger.warning("Client provided wrong sorting type %s", sort_key)
            return _text(
                f"Wrong sorting type {sort_key}! Use one of the following: "
                "number, weight, height, baseattack, basedefense, basestamina\n",
                404,
            )
        if "reversed" in params:
            pokemons = dex.reverse(pokemons)
            logger.info("Reversed sorted pokemons.")

    return _text(dex.render(pokemons))


app = create_app()
