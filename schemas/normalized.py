"""
Pydantic schema for element records produced by the import tooling
"""

from pydantic import BaseModel, Field, validator
from typing import Optional, List


class ElementCreate(BaseModel):
    """
    Flattened, validated element ready to be written to the store.

    Ensures:
    - Atomic number, group and period are within the periodic table
    - Category is already a lowercase slug
    - Child lists contain no empty entries
    """

    atomic_number: int = Field(..., ge=1, le=118)
    symbol: str = Field(..., min_length=1, max_length=3)
    name: str = Field(..., min_length=1, max_length=64)
    category: Optional[str] = Field(None, max_length=64)
    group_number: Optional[int] = Field(None, ge=1, le=18)
    period: int = Field(..., ge=1, le=7)
    block: Optional[str] = Field(None, max_length=1)

    atomic_mass: Optional[float] = Field(None, gt=0)
    standard_state: Optional[str] = Field(None, max_length=16)
    density_value: Optional[float] = None
    density_conditions: Optional[str] = None
    melting_point_value: Optional[float] = None
    melting_point_unit: Optional[str] = None
    boiling_point_value: Optional[float] = None
    boiling_point_unit: Optional[str] = None
    ionization_energy_value: Optional[float] = None
    ionization_energy_unit: Optional[str] = None
    electronegativity: Optional[float] = None
    electron_configuration: Optional[str] = None
    discovered_by: Optional[str] = None
    discovery_year: Optional[int] = None
    summary: Optional[str] = None

    oxidation_states: List[int] = Field(default_factory=list)
    uses: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    attributions: List[str] = Field(default_factory=list)

    @validator("symbol")
    def clean_symbol(cls, v):
        """Symbols are letters only, first letter upper-case"""
        v = v.strip()
        if not v.isalpha():
            raise ValueError("Symbol must contain letters only")
        return v[0].upper() + v[1:].lower()

    @validator("name")
    def clean_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty after stripping")
        return v

    @validator("uses", "sources", "attributions", each_item=True)
    def clean_text_items(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Entries cannot be empty")
        return v

    def element_values(self) -> dict:
        """Column values for the elements table (no child lists)"""
        return self.model_dump(exclude={"oxidation_states", "uses", "sources", "attributions"})
