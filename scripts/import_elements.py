"""
Import element JSON documents into the element store
"""

import argparse
import asyncio
import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.database import build_engine, build_session_factory
from core.exceptions import ImportPipelineError
from core.logging import setup_logging
from ingestion.runner import ImportRunner
from ingestion.validator import ElementSchemaValidator

logger = logging.getLogger(__name__)


async def run_import(data_dir: str, schema_path: str, skip_validation: bool) -> int:
    """Run the import and return a process exit code"""
    engine = build_engine(settings.DATABASE_URL, echo=False)
    session_factory = build_session_factory(engine)

    try:
        validator = None if skip_validation else ElementSchemaValidator(schema_path=schema_path)

        async with session_factory() as session:
            runner = ImportRunner(session, validator=validator, batch_size=settings.IMPORT_BATCH_SIZE)
            result = await runner.run(data_dir)

        for detail in result["error_details"]:
            logger.error(f"{detail['context'].get('file_path')}: {detail['message']}")

        logger.info(
            f"Import {result['status']}: "
            f"Documents={result['documents']}, Loaded={result['loaded']}, Failed={result['failed']}"
        )
        return 0 if result["status"] == "success" else 1

    except ImportPipelineError as e:
        logger.error(f"Import aborted: {e}")
        return 1
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("data_dir", nargs="?", default=settings.IMPORT_DATA_DIR)
    parser.add_argument("--schema", default=settings.ELEMENT_SCHEMA_PATH)
    parser.add_argument("--skip-validation", action="store_true")
    args = parser.parse_args()

    setup_logging()
    return asyncio.run(run_import(args.data_dir, args.schema, args.skip_validation))


if __name__ == "__main__":
    sys.exit(main())
