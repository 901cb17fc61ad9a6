"""
Validate element JSON documents against the element schema
"""

import argparse
import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.exceptions import DocumentFormatError
from core.logging import setup_logging
from ingestion.validator import ElementSchemaValidator

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("data_dir", nargs="?", default=settings.IMPORT_DATA_DIR)
    parser.add_argument("--schema", default=settings.ELEMENT_SCHEMA_PATH)
    args = parser.parse_args()

    setup_logging()

    try:
        validator = ElementSchemaValidator(schema_path=args.schema)
    except DocumentFormatError as e:
        logger.error(str(e))
        return 1

    report = validator.validate_directory(args.data_dir)

    for result in report.failed:
        logger.error(f"{os.path.basename(result.file_path)} failed validation:")
        for error in result.errors:
            logger.error(f"  - {error}")

    if not report.valid:
        return 1

    logger.info(f"All {len(report.results)} files validated successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
