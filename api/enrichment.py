"""
Attach child-table data (uses, oxidation states, sources) to elements.
"""

from typing import Any, Dict, List
import asyncio
import logging

from sqlalchemy import select

from core.store import RecordStore
from models.element import ElementSource, ElementUse, OxidationState
from schemas.api import EnrichedElementResponse

logger = logging.getLogger(__name__)

# Keys added by enrichment; already-enriched input is recomputed
ENRICHMENT_FIELDS = ("uses", "oxidationStates", "sources")


async def enrich_element(store: RecordStore, element: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of `element` with `uses`, `oxidationStates` and `sources`.

    The three lookups are launched together; the element is returned once
    all of them finish. Missing child rows give empty lists.
    """
    atomic_number = element["atomicNumber"]

    uses, oxidation_states, sources = await asyncio.gather(
        store.fetch_all(
            select(ElementUse.use_description)
            .where(ElementUse.atomic_number == atomic_number)
            .order_by(ElementUse.id)
        ),
        store.fetch_all(
            select(OxidationState.oxidation_state)
            .where(OxidationState.atomic_number == atomic_number)
            .order_by(OxidationState.id)
        ),
        store.fetch_all(
            select(ElementSource.source_description)
            .where(ElementSource.atomic_number == atomic_number)
            .order_by(ElementSource.id)
        ),
    )

    base = {k: v for k, v in element.items() if k not in ENRICHMENT_FIELDS}
    enriched = EnrichedElementResponse(
        **base,
        uses=uses,
        oxidationStates=oxidation_states,
        sources=sources,
    )
    return enriched.model_dump(by_alias=True)


async def enrich_batch(
    store: RecordStore,
    elements: List[Dict[str, Any]],
    threshold: int = 10,
    force: bool = False
) -> List[Dict[str, Any]]:
    """
    Enrich every element, or none of them.

    Batches larger than `threshold` come back as bare records unless
    `force` is set. Order of the input is preserved.
    """
    if not force and len(elements) > threshold:
        logger.debug(f"Skipping enrichment for batch of {len(elements)} (threshold {threshold})")
        return elements

    return list(await asyncio.gather(*(enrich_element(store, e) for e in elements)))
