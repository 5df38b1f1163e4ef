from __future__ import annotations
import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

from .config import settings
from .errors import LookupFailure, RecipeFinderError
from .schemas import Recipe
from .services.ingredients import parse_ingredients, validate_ingredients
from .services.intersection import dedupe, intersect_all
from .services.presenter import present, summarize

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Awaitable[List[Recipe]]]
Ask = Callable[[str], Awaitable[str]]
Emit = Callable[[str], None]

BANNER = [
    "=== Recipe Finder ===",
    "Type ingredients separated by commas.",
    "Example: chicken, rice, cheese",
    "",
]
PROMPT = "Enter ingredients: "
AGAIN_PROMPT = "Search again? (y/n): "
SEPARATOR = "---------------------------------"

class SessionState(str, Enum):
    prompting = "prompting"
    done = "done"

async def terminal_ask(prompt: str) -> str:
    """``input()`` fuera del event loop; EOF se propaga como ``EOFError``."""
    return await asyncio.to_thread(input, prompt)

class RecipeFinderSession:
    """
    Bucle interactivo: pedir ingredientes → validar → buscar uno a uno →
    intersectar → desduplicar → mostrar, y ofrecer otra búsqueda.
    """

    def __init__(
        self,
        lookup: Lookup,
        ask: Ask = terminal_ask,
        emit: Emit = print,
        max_ingredients: Optional[int] = None,
        min_ingredient_length: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> None:
        self.lookup = lookup
        self.ask = ask
        self.emit = emit
        self.max_ingredients = max_ingredients or settings.max_ingredients
        self.min_ingredient_length = min_ingredient_length or settings.min_ingredient_length
        self.max_results = max_results or settings.max_results_to_show
        self.state = SessionState.prompting

    def _emit_lines(self, lines: List[str]) -> None:
        for line in lines:
            self.emit(line)

    async def _ask(self, prompt: str) -> Optional[str]:
        try:
            return await self.ask(prompt)
        except EOFError:
            return None

    async def search(self, raw: str) -> Tuple[List[str], List[Recipe]]:
        """Un ciclo sin E/S de terminal salvo el progreso; los errores se propagan."""
        ingredients = parse_ingredients(raw)
        validate_ingredients(
            ingredients,
            max_ingredients=self.max_ingredients,
            min_length=self.min_ingredient_length,
        )
        logger.info("searching %d ingredient(s): %s", len(ingredients), ingredients)

        self.emit("")
        self.emit("Searching recipes...")
        lists: List[List[Recipe]] = []
        # TODO: reutilizar la respuesta cuando el mismo ingrediente aparece dos veces en la entrada
        for ing in ingredients:
            meals = await self.lookup(ing)
            lists.append(meals)
            logger.info("%r -> %d recipe(s)", ing, len(meals))
            self.emit(f'- Found {len(meals)} recipes that include "{ing}"')

        return ingredients, dedupe(intersect_all(lists))

    def report(self, exc: RecipeFinderError) -> None:
        # Los errores de entrada son esperables; solo los fallos de búsqueda son avisos
        level = logging.WARNING if isinstance(exc, LookupFailure) else logging.INFO
        logger.log(level, "cycle aborted [%s]: %s", exc.code, exc.detail)
        self._emit_lines([
            "",
            "Something went wrong:",
            exc.detail,
            "",
            "Try again with a valid ingredient list.",
            "",
        ])

    async def run_once(self, raw: str) -> bool:
        """Ejecuta un ciclo completo sin preguntar si repetir. True si terminó sin error."""
        try:
            ingredients, recipes = await self.search(raw)
        except RecipeFinderError as exc:
            self.report(exc)
            return False
        self._emit_lines(present(recipes, max_results=self.max_results))
        self._emit_lines(summarize(ingredients, recipes))
        return True

    async def run(self) -> SessionState:
        self._emit_lines(BANNER)
        self.state = SessionState.prompting
        while self.state is SessionState.prompting:
            raw = await self._ask(PROMPT)
            if raw is None:
                self.state = SessionState.done
                break
            if not await self.run_once(raw):
                # Error de validación o de búsqueda: nuevo ciclo desde el prompt
                continue

            again = await self._ask(AGAIN_PROMPT)
            if again is not None and again.strip().lower() in {"y", "yes"}:
                self._emit_lines(["", SEPARATOR, ""])
            else:
                self.state = SessionState.done

        self._emit_lines(["", "Done. Goodbye!"])
        return self.state
