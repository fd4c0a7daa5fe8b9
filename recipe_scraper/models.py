from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from recipe_scraper.decoders import (
    decode_author,
    decode_image,
    decode_instructions,
    decode_list_or_scalar,
)


class Nutrition(BaseModel):
    calories: Optional[str] = None
    serving_size: Optional[str] = Field(default=None, alias="servingSize")


class Video(BaseModel):
    name: Optional[str] = None


class Instruction(BaseModel):
    text: str
    image: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    video: Optional[str] = None


class Author(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None
    id: Optional[str] = Field(default=None, alias="@id")


class Recipe(BaseModel):
    """Canonical form of a schema.org Recipe read from JSON-LD.

    Attribute names are snake_case. Input is read by JSON-LD property name
    only, so ``Recipe.model_validate(record)`` reads a raw record and
    ``to_jsonld()`` writes one back.
    """

    name: str
    id: Optional[str] = Field(default=None, alias="@id")
    description: Optional[str] = None
    image: Optional[List[str]] = None
    cook_time: Optional[str] = Field(default=None, alias="cookTime")
    prep_time: Optional[str] = Field(default=None, alias="prepTime")
    total_time: Optional[str] = Field(default=None, alias="totalTime")
    nutrition: Optional[Nutrition] = None
    recipe_yield: Optional[List[str]] = Field(default=None, alias="recipeYield")
    instructions: List[Instruction] = Field(alias="recipeInstructions")
    ingredients: List[str] = Field(alias="recipeIngredient")
    category: Optional[List[str]] = Field(default=None, alias="recipeCategory")
    author: Optional[Author] = None
    keywords: Optional[str] = None
    video: Optional[Video] = None

    @field_validator("image", mode="before")
    @classmethod
    def normalize_image(cls, v: Any) -> List[str]:
        return decode_image(v)

    @field_validator("recipe_yield", "category", mode="before")
    @classmethod
    def normalize_list_or_scalar(cls, v: Any) -> Optional[List[str]]:
        return decode_list_or_scalar(v)

    @field_validator("author", mode="before")
    @classmethod
    def normalize_author(cls, v: Any) -> Dict[str, str]:
        return decode_author(v)

    @field_validator("instructions", mode="before")
    @classmethod
    def normalize_instructions(cls, v: Any) -> List[Dict[str, str]]:
        return decode_instructions(v)

    def to_jsonld(self) -> Dict[str, Any]:
        """Encode back to a JSON-LD Recipe record with every list field normalized."""
        return {"@type": "Recipe", **self.model_dump(by_alias=True, exclude_none=True)}
