"""
JSON document extractor for element source files
"""

from typing import Any, Dict, List
from pathlib import Path
import json
import logging

from core.exceptions import DocumentFormatError

logger = logging.getLogger(__name__)


class JSONDocumentExtractor:
    """
    Read one element document per `*.json` file in a directory.

    Files are processed in filename order so repeated imports are
    deterministic.
    """

    def __init__(self, data_dir: str, pattern: str = "*.json"):
        self.data_dir = Path(data_dir)
        self.pattern = pattern

    def list_files(self) -> List[Path]:
        if not self.data_dir.is_dir():
            logger.warning(f"Data directory not found: {self.data_dir}")
            return []
        return sorted(self.data_dir.glob(self.pattern))

    def read(self, file_path: Path) -> Dict[str, Any]:
        """Parse a single document"""
        try:
            with open(file_path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentFormatError(
                "Unable to read element document",
                context={"file_path": str(file_path)},
                original_exception=e
            )
        if not isinstance(document, dict):
            raise DocumentFormatError(
                "Element document must be a JSON object",
                context={"file_path": str(file_path)}
            )
        return document
