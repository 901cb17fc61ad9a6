import asyncio
import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.database import build_engine
from core.logging import setup_logging
from models.base import Base
# Import all models to ensure they are registered
from models.element import Element, OxidationState, ElementUse, ElementSource, ElementAttribution  # noqa: F401

logger = logging.getLogger(__name__)


async def init_database():
    logger.info("Connecting to database...")
    engine = build_engine(settings.DATABASE_URL, echo=True)

    async with engine.begin() as conn:
        logger.info("Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created successfully.")

    await engine.dispose()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(init_database())
