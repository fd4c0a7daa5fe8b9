from typing import Any, List, Optional


class RecipeScrapeError(Exception):
    kind = "scrape_error"


class TransportError(RecipeScrapeError):
    kind = "transport"

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url}: {message}")


class NoBlocksError(RecipeScrapeError):
    kind = "no_jsonld"

    def __init__(self, message: str = "page contains no JSON-LD script blocks"):
        super().__init__(message)


class JsonSyntaxError(RecipeScrapeError):
    """A single JSON-LD block was not valid JSON. Never fatal for a page."""

    kind = "json_syntax"

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(message)


class NoRecipeFound(RecipeScrapeError):
    kind = "no_recipe"

    def __init__(self, message: str = "no Recipe record found in any JSON-LD block"):
        super().__init__(message)


class MalformedRecipe(RecipeScrapeError):
    kind = "malformed_recipe"

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        self.errors = errors or []
        super().__init__(message)
