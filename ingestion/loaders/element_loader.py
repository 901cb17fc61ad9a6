"""
Write normalized elements and their child rows to the store
"""

from typing import List
from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from core.exceptions import LoadError
from models.element import Element, ElementAttribution, ElementSource, ElementUse, OxidationState
from schemas.normalized import ElementCreate
import logging

logger = logging.getLogger(__name__)

_CHILD_MODELS = (OxidationState, ElementUse, ElementSource, ElementAttribution)


class ElementLoader:
    """
    Load elements with replace semantics.

    Ensures:
    - Re-importing an element replaces its row and all of its child rows
    - Every value is a bound statement parameter; free text is never
      spliced into SQL
    - One transaction per batch
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def _replace(self, item: ElementCreate) -> None:
        number = item.atomic_number

        for model in _CHILD_MODELS:
            await self.db.execute(delete(model).where(model.atomic_number == number))
        await self.db.execute(delete(Element).where(Element.atomic_number == number))

        await self.db.execute(insert(Element).values(**item.element_values()))

        if item.oxidation_states:
            await self.db.execute(
                insert(OxidationState),
                [{"atomic_number": number, "oxidation_state": s} for s in item.oxidation_states]
            )
        if item.uses:
            await self.db.execute(
                insert(ElementUse),
                [{"atomic_number": number, "use_description": u} for u in item.uses]
            )
        if item.sources:
            await self.db.execute(
                insert(ElementSource),
                [{"atomic_number": number, "source_description": s} for s in item.sources]
            )
        if item.attributions:
            await self.db.execute(
                insert(ElementAttribution),
                [{"atomic_number": number, "attribution_text": a} for a in item.attributions]
            )

    async def load(self, items: List[ElementCreate]) -> int:
        """
        Replace the given elements in a single transaction.

        Returns:
            Number of elements written
        """
        if not items:
            return 0

        current = None
        try:
            for item in items:
                current = item.atomic_number
                await self._replace(item)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise LoadError(
                "Failed to write element rows",
                context={"atomic_number": current},
                original_exception=e
            )

        logger.info(f"Loaded {len(items)} elements")
        return len(items)

    async def load_batch(self, items: List[ElementCreate], batch_size: int = 50) -> int:
        """Load in fixed-size transactions"""
        total_loaded = 0

        for i in range(0, len(items), batch_size):
            batch = items[i:i + batch_size]
            count = await self.load(batch)
            total_loaded += count

            logger.info(f"Batch {i // batch_size + 1}: Loaded {count} elements")

        return total_loaded
