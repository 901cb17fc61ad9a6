"""
Import tooling for element source documents.

This package turns a directory of JSON element documents into rows of the
element store. It is not used while the API serves requests.

Modules:
    validator: JSON-schema gate for source documents (jsonschema)
    runner: Orchestrates extract, validate, transform and load

Subpackages:
    extractors: Directory reader for *.json documents
    transformers: Flattening and slug normalization into ElementCreate
    loaders: Parameterized replace-writes into the element tables

Usage:
    from ingestion.runner import ImportRunner
    from ingestion.validator import ElementSchemaValidator

Example:
    async with async_session_maker() as session:
        runner = ImportRunner(session, validator=ElementSchemaValidator())
        result = await runner.run("data/elements")

    print(f"Loaded {result['loaded']} elements")
"""

__all__ = [
    "ImportRunner",
    "ElementSchemaValidator",
    "JSONDocumentExtractor",
    "ElementNormalizer",
    "ElementLoader",
]
