from typing import List, Sequence
from ..errors import EmptyIngredientList, IngredientTooShort, InvalidInput, TooManyIngredients

MAX_INGREDIENTS = 6
MIN_INGREDIENT_LENGTH = 2

def _norm(s: str) -> str:
    return s.strip().lower()

def parse_ingredients(raw: str) -> List[str]:
    """
    Separa por comas, normaliza (strip + lower) y descarta vacíos.
    Conserva el orden de entrada y no desduplica.
    """
    tokens: List[str] = []
    for piece in raw.split(","):
        n = _norm(piece)
        if n:
            tokens.append(n)
    return tokens

def validate_ingredients(
    ingredients: Sequence[str],
    max_ingredients: int = MAX_INGREDIENTS,
    min_length: int = MIN_INGREDIENT_LENGTH,
) -> None:
    """Lanza la primera regla incumplida, en orden: forma, vacío, máximo, longitud."""
    if not isinstance(ingredients, (list, tuple)):
        raise InvalidInput()
    if len(ingredients) == 0:
        raise EmptyIngredientList()
    if len(ingredients) > max_ingredients:
        raise TooManyIngredients(count=len(ingredients), limit=max_ingredients)
    too_short = next((i for i in ingredients if len(i) < min_length), None)
    if too_short is not None:
        raise IngredientTooShort(too_short)
