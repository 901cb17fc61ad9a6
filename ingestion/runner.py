# ============================================================================
# File: ingestion/runner.py
# Description: Element import orchestrator
# ============================================================================
"""
Import Runner - Extract, validate, transform and load element documents.

Per-document failures (unreadable JSON, schema violations, normalization
errors) are recorded and skipped; the remaining documents are still
loaded. A load failure aborts the run.
"""

from typing import Dict, Any, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from core.exceptions import ImportPipelineError, LoadError
from ingestion.extractors.json_extractor import JSONDocumentExtractor
from ingestion.loaders.element_loader import ElementLoader
from ingestion.transformers.normalizer import ElementNormalizer
from ingestion.validator import ElementSchemaValidator
from schemas.normalized import ElementCreate

logger = logging.getLogger(__name__)


class ImportRunner:
    """
    Element import orchestrator

    Responsibilities:
    - Read every document from the data directory
    - Gate each document on the JSON schema (when a validator is given)
    - Normalize into ElementCreate records
    - Replace the corresponding rows in the store
    """

    def __init__(
        self,
        db_session: AsyncSession,
        validator: Optional[ElementSchemaValidator] = None,
        batch_size: int = 50
    ):
        self.db = db_session
        self.validator = validator
        self.batch_size = batch_size
        self.normalizer = ElementNormalizer()
        self.loader = ElementLoader(db_session)

    async def run(self, data_dir: str) -> Dict[str, Any]:
        """
        Import every document in `data_dir`.

        Returns:
            Dictionary with run statistics:
            - status: "success", "partial_success" or "failed"
            - documents: Number of documents found
            - loaded: Number of elements written
            - failed: Number of documents skipped
            - error_details: One entry per skipped document
        """
        extractor = JSONDocumentExtractor(data_dir)
        files = extractor.list_files()

        items: List[ElementCreate] = []
        error_details: List[Dict[str, Any]] = []

        for file_path in files:
            try:
                document = extractor.read(file_path)
                if self.validator is not None:
                    self.validator.validate(document, str(file_path))
                items.append(self.normalizer.normalize(document, str(file_path)))
            except ImportPipelineError as e:
                logger.warning(f"Skipping {file_path.name}: {e.message}")
                error_details.append(e.to_dict())

        duplicates = self._duplicate_numbers(items)
        if duplicates:
            logger.warning(f"Duplicate atomic numbers in source documents: {duplicates}; last one wins")

        try:
            loaded = await self.loader.load_batch(items, batch_size=self.batch_size)
        except LoadError as e:
            logger.error(f"Import failed: {e}")
            raise

        failed = len(error_details)
        if failed == 0:
            status = "success"
        elif loaded > 0:
            status = "partial_success"
        else:
            status = "failed"

        logger.info(
            f"Import finished ({status}): documents={len(files)}, loaded={loaded}, failed={failed}"
        )

        return {
            "status": status,
            "documents": len(files),
            "loaded": loaded,
            "failed": failed,
            "error_details": error_details,
        }

    @staticmethod
    def _duplicate_numbers(items: List[ElementCreate]) -> List[int]:
        seen = set()
        duplicates = []
        for item in items:
            if item.atomic_number in seen:
                duplicates.append(item.atomic_number)
            seen.add(item.atomic_number)
        return duplicates
