from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Iterable, TypeVar

import httpx

from ..catalog.models import CatalogEntry
from ..config.settings import settings
from ..logs import log_api
from .schema import DetailResponse, ListingResponse, Summary

# Set up module-level logger
logger = logging.getLogger(__name__)

T = TypeVar("T")


def _collection_url() -> str:
    return f"{settings.api_base_url.rstrip('/')}/{settings.collection}"


def _raise_with_context(resp: httpx.Response) -> None:
    if resp.is_success:
        return
    try:
        body = resp.json()  # Attempt to parse JSON response
    except ValueError:
        body = resp.text  # Fallback to raw text if JSON parsing fails
    log_api(
        f"HTTP {resp.status_code} {resp.reason_phrase} "
        f"at {resp.request.method} {resp.request.url}\n{body}",
        level="ERROR",
    )
    resp.raise_for_status()


async def fetch_listing(client: httpx.AsyncClient, limit: int) -> ListingResponse:
    """Fetch the first ``limit`` summary records of the collection."""
    url = _collection_url()
    r = await client.get(url, params={"limit": limit})
    _raise_with_context(r)
    listing = ListingResponse.model_validate(r.json())
    if len(listing.results) > limit:
        listing.results = listing.results[:limit]
    log_api(f"Listed {len(listing.results)} of {listing.count} entries from {url}")
    return listing


async def fetch_detail(client: httpx.AsyncClient, url: str) -> DetailResponse:
    """Fetch the detail payload behind one summary record."""
    r = await client.get(url)
    _raise_with_context(r)
    return DetailResponse.model_validate(r.json())


async def gather_all(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Run awaitables concurrently and return their results in order.

    The first failure cancels the rest and is re-raised once they have
    finished unwinding, so nothing keeps running against a closed client.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for t in tasks:
            t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def merge_entry(summary: Summary, detail: DetailResponse) -> CatalogEntry:
    return CatalogEntry(
        id=detail.id,
        name=summary.name,
        source_url=summary.url,
        image_url=detail.sprites.front_default,
        categories=tuple(slot.type.name for slot in detail.types),
        weight=detail.weight,
        base_experience=detail.base_experience,
    )


async def fetch_catalog(limit: int) -> list[CatalogEntry]:
    """List ``limit`` entries, then hydrate every one with its detail payload.

    All detail requests are in flight at once. Any failure fails the batch.
    """
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        listing = await fetch_listing(client, limit)
        logger.info("Fetching %d detail payloads", len(listing.results))
        details = await gather_all(fetch_detail(client, s.url) for s in listing.results)

    return [merge_entry(s, d) for s, d in zip(listing.results, details)]
