"""
JSON-schema validation of element source documents.

Validation is a gate in front of the import: it never changes documents
and has no effect on how the API serves data.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from core.config import settings
from core.exceptions import DocumentFormatError, DocumentValidationError
from ingestion.extractors.json_extractor import JSONDocumentExtractor

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    file_path: str
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(r.valid for r in self.results)

    @property
    def failed(self) -> List[ValidationResult]:
        return [r for r in self.results if not r.valid]

    def __bool__(self) -> bool:
        return self.valid


def load_schema(schema_path: Optional[str] = None) -> Dict[str, Any]:
    path = Path(schema_path or settings.ELEMENT_SCHEMA_PATH)
    try:
        with open(path, encoding="utf-8") as f:
            schema = json.load(f)
        Draft202012Validator.check_schema(schema)
    except (OSError, json.JSONDecodeError, SchemaError) as e:
        raise DocumentFormatError(
            "Unable to load element schema",
            context={"schema_path": str(path)},
            original_exception=e
        )
    return schema


class ElementSchemaValidator:
    """Collects every schema violation of a document, not just the first"""

    def __init__(self, schema: Optional[Dict[str, Any]] = None, schema_path: Optional[str] = None):
        self.schema = schema if schema is not None else load_schema(schema_path)
        self._validator = Draft202012Validator(self.schema)

    def errors_for(self, document: Dict[str, Any]) -> List[str]:
        errors = sorted(self._validator.iter_errors(document), key=lambda e: list(e.path))
        return [f"/{'/'.join(str(p) for p in e.path)}: {e.message}" for e in errors]

    def validate(self, document: Dict[str, Any], file_path: str = "<memory>") -> None:
        """Raise DocumentValidationError if the document does not conform"""
        errors = self.errors_for(document)
        if errors:
            raise DocumentValidationError(
                "Element document failed schema validation",
                context={"file_path": file_path, "errors": errors}
            )

    def validate_directory(self, data_dir: str) -> ValidationReport:
        extractor = JSONDocumentExtractor(data_dir)
        report = ValidationReport()

        for file_path in extractor.list_files():
            try:
                document = extractor.read(file_path)
            except DocumentFormatError as e:
                report.results.append(ValidationResult(str(file_path), False, [e.message]))
                continue

            errors = self.errors_for(document)
            report.results.append(ValidationResult(str(file_path), not errors, errors))
            if errors:
                logger.warning(f"{file_path.name} failed validation ({len(errors)} errors)")

        logger.info(f"Validated {len(report.results)} documents, {len(report.failed)} failed")
        return report
