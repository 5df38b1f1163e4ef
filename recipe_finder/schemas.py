from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class Recipe(BaseModel):
    """Receta tal y como la devuelve ``filter.php``; la identidad es solo ``id``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="idMeal")
    name: str = Field(alias="strMeal")
    thumbnail: str = Field(default="", alias="strMealThumb")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any):
        # La API a veces serializa ids numéricos
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("thumbnail", mode="before")
    @classmethod
    def _thumbnail_or_empty(cls, v: Any):
        return "" if v is None else v

class FilterResponse(BaseModel):
    # {"meals": null} significa "sin resultados"
    meals: Optional[List[Recipe]] = None

class SearchSummary(BaseModel):
    ingredients: List[str]
    ingredient_count: int
    recipe_count: int
    total_name_chars: int
    used_many_ingredients: bool
    has_results: bool
