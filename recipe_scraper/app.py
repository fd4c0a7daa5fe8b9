import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, HttpUrl

from recipe_scraper.config import LOG_LEVEL
from recipe_scraper.errors import (
    MalformedRecipe,
    NoBlocksError,
    NoRecipeFound,
    RecipeScrapeError,
    TransportError,
)
from recipe_scraper.main import recipe_from_html, scrape_recipe

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Recipe Scraper", version="1.0")

STATUS_BY_ERROR = {
    TransportError: 502,
    NoBlocksError: 404,
    NoRecipeFound: 404,
    MalformedRecipe: 422,
}


class ScrapeRequest(BaseModel):
    url: HttpUrl


class ParseRequest(BaseModel):
    html: str


def _to_http(e: RecipeScrapeError) -> HTTPException:
    status = STATUS_BY_ERROR.get(type(e), 500)
    detail = {"error": e.kind, "message": str(e)}
    if isinstance(e, MalformedRecipe):
        detail["errors"] = e.errors
    return HTTPException(status_code=status, detail=detail)


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.post("/api/scrape")
def scrape(req: ScrapeRequest):
    try:
        recipe = scrape_recipe(str(req.url))
    except RecipeScrapeError as e:
        logger.warning("Scrape of %s failed: %s", req.url, e)
        raise _to_http(e) from e
    return recipe.model_dump()


@app.post("/api/parse")
def parse(req: ParseRequest):
    try:
        recipe = recipe_from_html(req.html)
    except RecipeScrapeError as e:
        logger.warning("Parse of supplied page failed: %s", e)
        raise _to_http(e) from e
    return recipe.model_dump()
