import copy
import json

import pytest
import requests

BREAD = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "@id": "https://example.com/bread/#recipe",
    "name": "Easy Yeast Bread",
    "description": "A no-knead loaf.",
    "image": [
        "https://example.com/bread-1x1.jpg",
        "https://example.com/bread-4x3.jpg",
    ],
    "author": {"@type": "Person", "name": "Jane Baker", "url": "https://example.com/jane"},
    "prepTime": "PT10M",
    "cookTime": "PT45M",
    "totalTime": "PT55M",
    "recipeYield": ["1", "1 loaf"],
    "recipeCategory": "Bread",
    "keywords": "bread, yeast, no knead",
    "nutrition": {
        "@type": "NutritionInformation",
        "calories": "164 kcal",
        "servingSize": "1 slice",
        "fatContent": "1 g",
    },
    "recipeIngredient": ["3 cups flour", "2 tsp yeast", "1.5 cups warm water", "1 tsp salt"],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Mix everything.", "name": "Mix", "url": "https://example.com/bread/#step1"},
        {"@type": "HowToStep", "text": "Rest overnight.", "image": "https://example.com/rest.jpg"},
        "Bake at 220C.",
    ],
    "video": {"@type": "VideoObject", "name": "How to make bread", "duration": "PT2M"},
}

ORGANIZATION = {
    "@context": "https://schema.org",
    "@type": "Organization",
    "name": "Example Kitchen",
}


@pytest.fixture
def bread():
    return copy.deepcopy(BREAD)


@pytest.fixture
def organization():
    return copy.deepcopy(ORGANIZATION)


def page(*blocks):
    """Build an HTML page holding one JSON-LD script per block."""
    scripts = []
    for block in blocks:
        text = block if isinstance(block, str) else json.dumps(block)
        scripts.append(f'<script type="application/ld+json">{text}</script>')
    return (
        "<html><head><title>Recipe</title>"
        '<script type="text/javascript">var x = 1;</script>'
        + "".join(scripts)
        + "</head><body><h1>Recipe</h1></body></html>"
    )


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)
