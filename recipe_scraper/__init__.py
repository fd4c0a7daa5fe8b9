from recipe_scraper.errors import (
    JsonSyntaxError,
    MalformedRecipe,
    NoBlocksError,
    NoRecipeFound,
    RecipeScrapeError,
    TransportError,
)
from recipe_scraper.main import (
    decode_recipe,
    extract_ld_blocks,
    fetch_page,
    find_recipe,
    locate,
    recipe_from_html,
    scrape_recipe,
)
from recipe_scraper.models import Author, Instruction, Nutrition, Recipe, Video

__all__ = [
    "Author",
    "Instruction",
    "JsonSyntaxError",
    "MalformedRecipe",
    "NoBlocksError",
    "NoRecipeFound",
    "Nutrition",
    "Recipe",
    "RecipeScrapeError",
    "TransportError",
    "Video",
    "decode_recipe",
    "extract_ld_blocks",
    "fetch_page",
    "find_recipe",
    "locate",
    "recipe_from_html",
    "scrape_recipe",
]
