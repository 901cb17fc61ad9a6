"""
Pydantic schemas for data validation and serialization.

Schemas:
    api: Response models for the HTTP surface (elements, categories,
        errors, info document) and the ORM -> JSON serializer
    normalized: ElementCreate, the flattened record written by the
        import tooling

Usage:
    from schemas.api import ElementResponse, serialize_element
    from schemas.normalized import ElementCreate

Example:
    item = ElementCreate(
        atomic_number=1,
        symbol="H",
        name="Hydrogen",
        period=1,
        uses=["Rocket fuel"],
    )
    assert item.element_values()["symbol"] == "H"
"""

__all__ = [
    "ElementResponse",
    "EnrichedElementResponse",
    "CategoriesResponse",
    "ErrorResponse",
    "APIInfo",
    "ElementCreate",
]
