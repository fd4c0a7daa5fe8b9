import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from recipe_scraper.config import LOG_LEVEL, SCRAPER_TIMEOUT
from recipe_scraper.errors import (
    MalformedRecipe,
    NoBlocksError,
    NoRecipeFound,
    RecipeScrapeError,
    TransportError,
)
from recipe_scraper.main import recipe_from_html, scrape_recipe

EXIT_CODES = {
    TransportError: 2,
    NoBlocksError: 3,
    NoRecipeFound: 4,
    MalformedRecipe: 5,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-scraper",
        description="Extract the schema.org Recipe embedded as JSON-LD in a web page",
    )
    parser.add_argument("url", nargs="?", help="Recipe page to fetch")
    parser.add_argument("--file", type=Path, help="Read a saved HTML page instead of fetching a URL")
    parser.add_argument("--jsonld", action="store_true", help="Print JSON-LD property names")
    parser.add_argument("--timeout", type=float, default=SCRAPER_TIMEOUT, help="Fetch timeout in seconds")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.url and not args.file:
        parser.error("a URL or --file is required")

    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)

    try:
        if args.file:
            recipe = recipe_from_html(args.file.read_text(encoding="utf-8"))
        else:
            recipe = scrape_recipe(args.url, timeout=args.timeout)
    except RecipeScrapeError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        return EXIT_CODES.get(type(e), 1)

    payload = recipe.to_jsonld() if args.jsonld else recipe.model_dump()
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
