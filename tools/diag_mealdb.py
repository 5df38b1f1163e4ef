#!/usr/bin/env python3
from __future__ import annotations
import argparse
import asyncio
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from recipe_finder.config import settings
from recipe_finder.errors import LookupFailure
from recipe_finder.mealdb import fetch_meals_by_ingredient
from recipe_finder.services.ingredients import parse_ingredients
from recipe_finder.services.intersection import dedupe, intersect_all

async def diag(ingredients):
    print("Endpoint:", settings.mealdb_base_url)
    lists = []
    for ing in ingredients:
        try:
            meals = await fetch_meals_by_ingredient(ing)
        except LookupFailure as e:
            print(f"- {ing}: FAIL ({e.cause!r})")
            return 1
        ids = {m.id for m in meals}
        dups = len(meals) - len(ids)
        print(f"- {ing}: {len(meals)} receta(s), {dups} id(s) repetido(s)")
        lists.append(meals)
    both = dedupe(intersect_all(lists))
    print(f"Intersección: {len(both)} receta(s)")
    return 0

def main():
    ap = argparse.ArgumentParser(description="Diagnóstico de TheMealDB por ingrediente")
    ap.add_argument("ingredients", type=str, help='Lista separada por comas, p. ej. "chicken, rice"')
    args = ap.parse_args()
    raise SystemExit(asyncio.run(diag(parse_ingredients(args.ingredients))))

if __name__ == "__main__":
    main()
