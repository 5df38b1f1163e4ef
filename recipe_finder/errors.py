from __future__ import annotations
from typing import Optional


class RecipeFinderError(Exception):
    """Error base de la búsqueda; ``code`` es estable, ``detail`` es para el usuario."""

    code: str = "error"
    default_detail: str = "Something went wrong."

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidInput(RecipeFinderError):
    code = "invalid_input"
    default_detail = "Ingredients must be a list."


class EmptyIngredientList(RecipeFinderError):
    code = "empty_ingredient_list"
    default_detail = "Please enter at least one ingredient (example: chicken, rice)."


class TooManyIngredients(RecipeFinderError):
    code = "too_many_ingredients"

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Please enter {limit} ingredients or fewer (to keep results fast).")


class IngredientTooShort(RecipeFinderError):
    code = "ingredient_too_short"

    def __init__(self, ingredient: str):
        self.ingredient = ingredient
        super().__init__(f'Ingredient "{ingredient}" is too short. Type a real ingredient name.')


class LookupFailure(RecipeFinderError):
    code = "lookup_failure"

    def __init__(self, ingredient: str, cause: BaseException):
        self.ingredient = ingredient
        self.cause = cause
        reason = str(cause) or type(cause).__name__
        super().__init__(f'Could not fetch recipes for "{ingredient}": {reason}')
