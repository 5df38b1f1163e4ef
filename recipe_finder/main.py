from __future__ import annotations
import argparse
import asyncio
import locale
import logging
from functools import partial
from typing import List, Optional

import httpx

from .config import settings
from .mealdb import fetch_meals_by_ingredient
from .session import RecipeFinderSession

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="recipe-finder",
        description="Find TheMealDB recipes that contain ALL of the given ingredients.",
    )
    ap.add_argument("--ingredients", type=str, default=None,
                    help='Comma-separated list for a single non-interactive search (e.g. "chicken, rice")')
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                    help=f"Logging level (default: {settings.log_level})")
    ap.add_argument("--max-results", type=int, default=None,
                    help=f"Recipes to list per search (default: {settings.max_results_to_show})")
    return ap

def configure_logging(level: Optional[str]) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)

def configure_locale() -> str:
    """Activa el orden de cadenas del entorno; si no es válido, vuelve a "C"."""
    try:
        return locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        return locale.setlocale(locale.LC_COLLATE, "C")

async def run(args: argparse.Namespace) -> int:
    async with httpx.AsyncClient(timeout=settings.mealdb_timeout_s) as client:
        session = RecipeFinderSession(
            lookup=partial(fetch_meals_by_ingredient, client=client),
            max_results=args.max_results,
        )
        if args.ingredients is not None:
            ok = await session.run_once(args.ingredients)
            return 0 if ok else 1
        await session.run()
        return 0

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.max_results is not None and args.max_results < 1:
        ap.error("--max-results must be a positive integer")
    configure_logging(args.log_level)
    configure_locale()
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        # Ctrl-C equivale a no querer seguir buscando
        print("\nDone. Goodbye!")
        return 0

if __name__ == "__main__":
    raise SystemExit(main())
