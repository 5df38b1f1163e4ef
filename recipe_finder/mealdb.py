from __future__ import annotations
import logging
from typing import List, Optional

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import settings
from .errors import LookupFailure
from .schemas import FilterResponse, Recipe

logger = logging.getLogger(__name__)

class MealDBError(RuntimeError):
    pass

def _filter_url() -> str:
    return settings.mealdb_base_url.rstrip("/") + "/filter.php"

async def _get_filter(client: httpx.AsyncClient, ingredient: str) -> List[Recipe]:
    """Una petición a ``filter.php?i=``; normaliza ``{"meals": null}`` a lista vacía."""
    logger.debug("GET %s i=%s", _filter_url(), ingredient)
    r = await client.get(_filter_url(), params={"i": ingredient})
    if r.status_code >= 500:
        raise MealDBError(f"TheMealDB 5xx: {r.status_code}")
    r.raise_for_status()
    data = FilterResponse.model_validate(r.json())
    return data.meals or []

async def _fetch_with_retry(client: httpx.AsyncClient, ingredient: str) -> List[Recipe]:
    async for attempt in AsyncRetrying(
        reraise=True,
        stop=stop_after_attempt(settings.mealdb_max_attempts),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.TransportError, MealDBError)),
    ):
        with attempt:
            return await _get_filter(client, ingredient)
    raise MealDBError("no attempts configured")  # pragma: no cover

async def fetch_meals_by_ingredient(ingredient: str, client: Optional[httpx.AsyncClient] = None) -> List[Recipe]:
    """
    Recetas que contienen ``ingredient``. Cualquier fallo de red, estado HTTP
    o payload inválido se eleva como ``LookupFailure``.
    Sin ``client`` se abre uno efímero con el timeout configurado.
    """
    try:
        if client is not None:
            return await _fetch_with_retry(client, ingredient)
        async with httpx.AsyncClient(timeout=settings.mealdb_timeout_s) as own:
            return await _fetch_with_retry(own, ingredient)
    except (httpx.HTTPError, MealDBError, ValueError) as e:
        # ValueError cubre JSON corrupto y ValidationError de pydantic
        logger.warning("lookup failed for %r: %s", ingredient, e)
        raise LookupFailure(ingredient, e) from e
