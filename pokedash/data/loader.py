"""
Batch loader for PokeAPI records.

Issues one `GET /pokemon/{id}` per identifier concurrently, waits for every
request to settle, and fails the whole batch if any single request fails.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Dict, Iterable, List, Optional

import httpx

from pokedash.config import DashboardSettings
from pokedash.data.models import PokemonSet, map_pokemon
from pokedash.errors import BatchFetchError
from pokedash.utils.logging import get_logger

logger = get_logger(__name__)


async def _fetch_one(
    client: httpx.AsyncClient,
    semaphore: asyncio.Semaphore,
    pokemon_id: int,
) -> Dict[str, Any]:
    async with semaphore:
        logger.debug("GET /pokemon/%d", pokemon_id)
        try:
            response = await client.get(f"/pokemon/{pokemon_id}")
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise BatchFetchError(
                f"PokeAPI returned HTTP {exc.response.status_code} for pokemon id={pokemon_id}",
                pokemon_id=pokemon_id,
            ) from exc
        except httpx.HTTPError as exc:
            raise BatchFetchError(
                f"Request for pokemon id={pokemon_id} failed: {exc}",
                pokemon_id=pokemon_id,
            ) from exc
        except ValueError as exc:
            raise BatchFetchError(
                f"Response for pokemon id={pokemon_id} is not valid JSON",
                pokemon_id=pokemon_id,
            ) from exc


async def fetch_batch(
    pokemon_ids: Iterable[int],
    client: httpx.AsyncClient,
    concurrency: int = 20,
) -> List[Dict[str, Any]]:
    """Fetch raw bodies for every id, in request-initiation order.

    Fan-out is bounded by `concurrency`. The first failure cancels the
    outstanding requests and is re-raised as `BatchFetchError`.
    """
    ids = list(pokemon_ids)
    semaphore = asyncio.Semaphore(max(concurrency, 1))
    tasks = [asyncio.create_task(_fetch_one(client, semaphore, pid)) for pid in ids]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        # Let cancelled tasks unwind before the client is closed
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def build_pokemon_set(pokemon_ids: Iterable[int], raw_bodies: Iterable[Dict[str, Any]]) -> PokemonSet:
    """Map raw bodies to records and key them by their own `id` field.

    A body whose id does not match the id it was requested for fails the batch.
    """
    records = []
    for requested_id, raw in zip(pokemon_ids, raw_bodies):
        record = map_pokemon(raw)
        if record.id != requested_id:
            raise BatchFetchError(
                f"Requested pokemon id={requested_id} but response carried id={record.id}",
                pokemon_id=requested_id,
            )
        records.append(record)
    try:
        return PokemonSet(records)
    except ValueError as exc:
        raise BatchFetchError(str(exc)) from exc


async def load_pokemon_async(
    settings: DashboardSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PokemonSet:
    ids = list(settings.pokemon_ids)
    logger.info(
        "Fetching %d pokemon from %s (concurrency=%d)",
        len(ids),
        settings.base_url,
        settings.fetch_concurrency,
    )
    started = time.perf_counter()
    async with httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.http_timeout_seconds,
        transport=transport,
    ) as client:
        try:
            raw_bodies = await fetch_batch(ids, client, concurrency=settings.fetch_concurrency)
        except BatchFetchError:
            logger.error("Batch fetch of %d pokemon failed", len(ids))
            raise

    pokemon = build_pokemon_set(ids, raw_bodies)
    logger.info("Loaded %d pokemon in %.2fs", len(pokemon), time.perf_counter() - started)
    return pokemon


def load_pokemon(
    settings: DashboardSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PokemonSet:
    """Synchronous entrypoint used by the Streamlit script."""
    return asyncio.run(load_pokemon_async(settings, transport=transport))
