from __future__ import annotations
import locale
import unicodedata
from typing import List, Sequence

from ..schemas import Recipe, SearchSummary

MAX_RESULTS_TO_SHOW = 10
RESULTS_HEADER = "=== Recipe Finder Results ==="
NO_MATCHES = "No matching recipes found for those ingredients."

def _collation_base(s: str) -> str:
    # Sin acentos ni mayúsculas: "Ćevapi" -> "cevapi"
    s = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in s if not unicodedata.combining(ch)).casefold()

def sort_by_name(recipes: Sequence[Recipe]) -> List[Recipe]:
    """
    Orden alfabético por nombre: primero por la letra base (ignora acentos y
    mayúsculas) y, a igualdad, por el orden del locale activo.
    """
    return sorted(recipes, key=lambda r: (locale.strxfrm(_collation_base(r.name)), locale.strxfrm(r.name)))

def present(recipes: Sequence[Recipe], max_results: int = MAX_RESULTS_TO_SHOW) -> List[str]:
    """
    Líneas del bloque de resultados: cabecera, hasta ``max_results`` entradas
    ordenadas por nombre y, si sobran, cuántas quedan sin mostrar.
    """
    lines = ["", RESULTS_HEADER]
    if not recipes:
        lines.append(NO_MATCHES)
        lines.append("")
        return lines

    shown = sort_by_name(recipes)[:max_results]
    for idx, r in enumerate(shown, start=1):
        lines.append(f"{idx}. {r.name} (ID: {r.id})")

    remaining = len(recipes) - len(shown)
    if remaining > 0:
        lines.append(f"...and {remaining} more")
    lines.append("")
    return lines

def build_summary(ingredients: Sequence[str], recipes: Sequence[Recipe]) -> SearchSummary:
    return SearchSummary(
        ingredients=list(ingredients),
        ingredient_count=len(ingredients),
        recipe_count=len(recipes),
        total_name_chars=sum(len(r.name) for r in recipes),
        used_many_ingredients=len(ingredients) >= 3,
        has_results=len(recipes) > 0,
    )

def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"

def summarize(ingredients: Sequence[str], recipes: Sequence[Recipe]) -> List[str]:
    s = build_summary(ingredients, recipes)
    return [
        "=== Summary ===",
        f"Ingredients: {', '.join(s.ingredients)}",
        f"Ingredient count: {s.ingredient_count}",
        f"Found recipes: {s.recipe_count}",
        f"Total recipe name characters: {s.total_name_chars}",
        f"Used 3+ ingredients? {_yes_no(s.used_many_ingredients)}",
        f"Any results? {_yes_no(s.has_results)}",
        "",
    ]
