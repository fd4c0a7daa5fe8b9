import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from recipe_scraper.config import SCRAPER_TIMEOUT, SCRAPER_USER_AGENT
from recipe_scraper.errors import (
    JsonSyntaxError,
    MalformedRecipe,
    NoBlocksError,
    NoRecipeFound,
    TransportError,
)
from recipe_scraper.models import Recipe

logger = logging.getLogger(__name__)

LD_JSON_SELECTOR = 'script[type="application/ld+json"]'
RECIPE_TYPE = "Recipe"


class BlockStatus(str, Enum):
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    DECODED = "decoded"


@dataclass
class BlockResult:
    status: BlockStatus
    recipe: Optional[Recipe] = None
    error: Optional[Exception] = None


def fetch_page(url: str, timeout: float = SCRAPER_TIMEOUT) -> str:
    headers = {"User-Agent": SCRAPER_USER_AGENT}
    try:
        r = requests.get(url, headers=headers, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        status = e.response.status_code if e.response is not None else None
        raise TransportError(url, str(e), status_code=status) from e
    return r.text


def extract_ld_blocks(html: str) -> List[str]:
    """Return the text of every JSON-LD script element, in document order."""
    soup = BeautifulSoup(html, "lxml")
    blocks = [sc.get_text() for sc in soup.select(LD_JSON_SELECTOR)]
    if not blocks:
        raise NoBlocksError()
    logger.debug("Found %d JSON-LD blocks", len(blocks))
    return blocks


def parse_block(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(str(e), line=e.lineno, column=e.colno) from e


def locate(doc: Any) -> Optional[Dict[str, Any]]:
    """Find the Recipe record in a parsed JSON-LD document.

    A top-level ``@graph`` array is scanned in order and the first node typed
    ``Recipe`` wins. Without a graph, the document itself must be the Recipe.
    """
    if not isinstance(doc, dict):
        return None
    graph = doc.get("@graph")
    if isinstance(graph, list):
        for node in graph:
            if isinstance(node, dict) and node.get("@type") == RECIPE_TYPE:
                return node
        return None
    if doc.get("@type") == RECIPE_TYPE:
        return doc
    return None


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<record>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def decode_recipe(record: Dict[str, Any]) -> Recipe:
    try:
        return Recipe.model_validate(record)
    except ValidationError as e:
        raise MalformedRecipe(
            f"Recipe record failed to decode: {_describe(e)}",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def decode_block(raw: str, index: int = 0) -> BlockResult:
    try:
        doc = parse_block(raw)
    except JsonSyntaxError as e:
        logger.warning("JSON-LD block %d is not valid JSON, skipping: %s", index, e)
        return BlockResult(BlockStatus.NOT_FOUND, error=e)

    record = locate(doc)
    if record is None:
        logger.debug("JSON-LD block %d has no Recipe record", index)
        return BlockResult(BlockStatus.NOT_FOUND)

    try:
        recipe = decode_recipe(record)
    except MalformedRecipe as e:
        return BlockResult(BlockStatus.MALFORMED, error=e)
    return BlockResult(BlockStatus.DECODED, recipe=recipe)


def find_recipe(blocks: Iterable[str]) -> Recipe:
    """Return the first Recipe decoded from ``blocks``.

    Blocks without a Recipe record (or that are not JSON at all) are skipped.
    A Recipe record that fails to decode stops the scan.
    """
    for index, raw in enumerate(blocks):
        result = decode_block(raw, index)
        if result.status is BlockStatus.DECODED:
            logger.info("Decoded recipe %r from JSON-LD block %d", result.recipe.name, index)
            return result.recipe
        if result.status is BlockStatus.MALFORMED:
            raise result.error
    raise NoRecipeFound()


def recipe_from_html(html: str) -> Recipe:
    return find_recipe(extract_ld_blocks(html))


def scrape_recipe(url: str, timeout: float = SCRAPER_TIMEOUT) -> Recipe:
    html = fetch_page(url, timeout=timeout)
    return recipe_from_html(html)
