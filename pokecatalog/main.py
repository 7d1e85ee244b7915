"""FastAPI application entrypoint."""

import uvicorn
from fastapi import FastAPI

from .catalog import catalog_router, pages_router
from .config import settings
from .logging import get_logger, setup_logging


setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

app = FastAPI(
    title="Pokémon catalog",
    description=(
        "Browser catalog over the public PokeAPI: the full list of Pokémon, "
        "one card per entry with its sprite and types, and a single-type filter."
    ),
    version="1.0.0",
)

app.include_router(pages_router)
app.include_router(catalog_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "upstream": settings.POKEAPI_BASE_URL}


def run() -> None:
    logger.info("Starting catalog viewer on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run("pokecatalog.main:app", host=settings.HOST, port=settings.PORT)
