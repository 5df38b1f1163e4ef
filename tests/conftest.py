import sys
from pathlib import Path
from typing import Dict, List

import pytest

# Ensure project root on path for imports when executing from tests dir
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recipe_finder.schemas import Recipe


def make_recipe(id, name=None, thumbnail=""):
    return Recipe(id=str(id), name=name or f"Meal {id}", thumbnail=thumbnail)


@pytest.fixture
def recipe():
    return make_recipe


class FakeLookup:
    """Lookup en memoria que registra el orden de las llamadas."""

    def __init__(self, results: Dict[str, List[Recipe]], fail_on=None, error=None):
        self.results = results
        self.fail_on = fail_on
        self.error = error
        self.calls: List[str] = []

    async def __call__(self, ingredient: str) -> List[Recipe]:
        self.calls.append(ingredient)
        if ingredient == self.fail_on:
            raise self.error
        return list(self.results.get(ingredient, []))


class ScriptedTerminal:
    """Respuestas predefinidas para ``ask`` y captura de ``emit``; sin respuestas → EOF."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def emit(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def fake_lookup():
    return FakeLookup


@pytest.fixture
def terminal():
    return ScriptedTerminal
