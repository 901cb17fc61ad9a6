"""
Pydantic schemas for API responses
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


# ============================================================================
# Element Schemas
# ============================================================================

class ElementResponse(BaseModel):
    """
    Bare element record as returned by the API.

    Field aliases are the public camelCase names; ORM instances are read
    through their snake_case attributes.
    """
    atomic_number: int = Field(..., alias="atomicNumber", ge=1, le=118)
    symbol: str
    name: str
    category: Optional[str] = None
    group_number: Optional[int] = Field(None, alias="groupNumber")
    period: int
    block: Optional[str] = None
    atomic_mass: Optional[float] = Field(None, alias="atomicMass")
    standard_state: Optional[str] = Field(None, alias="standardState")
    density_value: Optional[float] = Field(None, alias="densityValue")
    density_conditions: Optional[str] = Field(None, alias="densityConditions")
    melting_point_value: Optional[float] = Field(None, alias="meltingPointValue")
    melting_point_unit: Optional[str] = Field(None, alias="meltingPointUnit")
    boiling_point_value: Optional[float] = Field(None, alias="boilingPointValue")
    boiling_point_unit: Optional[str] = Field(None, alias="boilingPointUnit")
    ionization_energy_value: Optional[float] = Field(None, alias="ionizationEnergyValue")
    ionization_energy_unit: Optional[str] = Field(None, alias="ionizationEnergyUnit")
    electronegativity: Optional[float] = None
    electron_configuration: Optional[str] = Field(None, alias="electronConfiguration")
    discovered_by: Optional[str] = Field(None, alias="discoveredBy")
    discovery_year: Optional[int] = Field(None, alias="discoveryYear")
    summary: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class EnrichedElementResponse(ElementResponse):
    """Element record with child-table data attached"""
    uses: List[str] = Field(default_factory=list)
    oxidation_states: List[int] = Field(default_factory=list, alias="oxidationStates")
    sources: List[str] = Field(default_factory=list)


def serialize_element(element: Any) -> Dict[str, Any]:
    """ORM element -> public JSON dict"""
    return ElementResponse.model_validate(element).model_dump(by_alias=True)


# ============================================================================
# Listing / Info Schemas
# ============================================================================

class CategoriesResponse(BaseModel):
    categories: List[str]


class ErrorResponse(BaseModel):
    error: str


class APIInfo(BaseModel):
    """Self-describing document served at / and /api"""
    name: str
    version: str
    endpoints: Dict[str, str]
    filters: Dict[str, str]
    examples: List[str]
