import os

from dotenv import load_dotenv

load_dotenv()

SCRAPER_USER_AGENT = os.getenv(
    "SCRAPER_USER_AGENT", "Mozilla/5.0 (compatible; RecipeScraper/1.0)"
)
SCRAPER_TIMEOUT = float(os.getenv("SCRAPER_TIMEOUT", "20"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
