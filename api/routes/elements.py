"""
Element retrieval endpoints.

Routes are registered in resolution order: static listings first, then the
filtered collection, then the numeric, symbol and name lookups. Paths that
match none of them fall through to the application's 404 handler.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from typing import Any
import time
import uuid
import logging

import api.convertors  # noqa: F401  registers the symbol/letters path convertors
from api.dependencies import get_store
from api.enrichment import enrich_batch, enrich_element
from api.filters import compile_filters
from core.config import settings
from core.exceptions import NotFoundError, ValidationError
from core.store import RecordStore
from models.base import MAX_ATOMIC_NUMBER, MIN_ATOMIC_NUMBER, StandardState
from models.element import Element
from schemas.api import CategoriesResponse, serialize_element

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Elements"])


def cacheable_response(content: Any) -> JSONResponse:
    """JSON response advertising the edge cache lifetime downstream"""
    return JSONResponse(
        content=content,
        headers={"Cache-Control": f"public, max-age={settings.CACHE_TTL_SECONDS}"}
    )


async def _elements_in_state(store: RecordStore, state: StandardState) -> JSONResponse:
    rows = await store.fetch_all(
        select(Element)
        .where(Element.standard_state == state.value)
        .order_by(Element.atomic_number.asc())
    )
    elements = [serialize_element(row) for row in rows]
    return cacheable_response(await enrich_batch(store, elements, force=True))


async def _single_element(store: RecordStore, lookup: str, value: Any, statement) -> JSONResponse:
    row = await store.fetch_one(statement)
    if row is None:
        raise NotFoundError(context={"lookup": lookup, "value": value})
    return cacheable_response(await enrich_element(store, serialize_element(row)))


# ----------------------------------------------------------------------------
# Static listings
# ----------------------------------------------------------------------------

@router.get("/elements/categories")
async def list_categories(store: RecordStore = Depends(get_store)):
    """Distinct non-null categories, alphabetical"""
    categories = await store.fetch_all(
        select(Element.category)
        .distinct()
        .where(Element.category.is_not(None))
        .order_by(Element.category)
    )
    return cacheable_response(CategoriesResponse(categories=categories).model_dump())


@router.get("/elements/liquid")
async def list_liquid_elements(store: RecordStore = Depends(get_store)):
    """Elements liquid at standard conditions, always enriched"""
    return await _elements_in_state(store, StandardState.LIQUID)


@router.get("/elements/gas")
async def list_gas_elements(store: RecordStore = Depends(get_store)):
    """Elements gaseous at standard conditions, always enriched"""
    return await _elements_in_state(store, StandardState.GAS)


# ----------------------------------------------------------------------------
# Filtered collection
# ----------------------------------------------------------------------------

@router.get("/elements")
async def list_elements(request: Request, store: RecordStore = Depends(get_store)):
    """
    Filtered list ordered by atomic number.

    Supported filters: category, state, period, block, meltingPoint,
    boilingPoint, density, group, limit. Results of more than
    ENRICHMENT_BATCH_LIMIT elements are returned without child data.
    """
    start_time = time.time()
    request_id = getattr(request.state, "request_id", f"req_{uuid.uuid4().hex[:12]}")

    filter_set = compile_filters(request.query_params)
    filter_set.raise_for_errors()

    logger.info(f"[{request_id}] GET /elements - filters applied: {filter_set.applied}")

    rows = await store.fetch_all(filter_set.build_query())
    elements = [serialize_element(row) for row in rows]
    results = await enrich_batch(store, elements, threshold=settings.ENRICHMENT_BATCH_LIMIT)

    logger.info(
        f"[{request_id}] Returned {len(results)} elements "
        f"(enriched: {len(results) <= settings.ENRICHMENT_BATCH_LIMIT}, "
        f"total: {(time.time() - start_time) * 1000:.2f}ms)"
    )

    return cacheable_response(results)


# ----------------------------------------------------------------------------
# Single-element lookups
# ----------------------------------------------------------------------------

@router.get("/elements/{atomic_number:int}")
async def get_element_by_number(atomic_number: int, store: RecordStore = Depends(get_store)):
    if atomic_number < MIN_ATOMIC_NUMBER or atomic_number > MAX_ATOMIC_NUMBER:
        raise ValidationError(
            f"Invalid atomic number. Must be {MIN_ATOMIC_NUMBER}-{MAX_ATOMIC_NUMBER}",
            context={"parameter": "atomic_number", "value": atomic_number}
        )
    return await _single_element(
        store,
        "atomic_number",
        atomic_number,
        select(Element).where(Element.atomic_number == atomic_number)
    )


@router.get("/elements/symbol/{symbol:symbol}")
async def get_element_by_symbol(symbol: str, store: RecordStore = Depends(get_store)):
    return await _single_element(
        store,
        "symbol",
        symbol,
        select(Element).where(func.lower(Element.symbol) == func.lower(symbol))
    )


@router.get("/elements/name/{name:letters}")
async def get_element_by_name(name: str, store: RecordStore = Depends(get_store)):
    return await _single_element(
        store,
        "name",
        name,
        select(Element).where(func.lower(Element.name) == func.lower(name))
    )
