from sqlalchemy import Column, Integer, String, Float, Text, ForeignKey
from models.base import Base


class Element(Base):
    """
    One row per chemical element, keyed by atomic number.

    Column names are camelCase because they double as the JSON field names
    of the public API. Python attributes stay snake_case.

    Rows are written once by the import tooling and are read-only while
    the API is serving.
    """
    __tablename__ = "elements"

    atomic_number = Column("atomicNumber", Integer, primary_key=True, autoincrement=False)

    # Identity
    symbol = Column("symbol", String(3), nullable=False, unique=True)
    name = Column("name", String(64), nullable=False, unique=True)
    category = Column("category", String(64), nullable=True, index=True)  # lowercase slug

    # Position in the table
    group_number = Column("groupNumber", Integer, nullable=True, index=True)
    period = Column("period", Integer, nullable=False, index=True)
    block = Column("block", String(1), nullable=True)

    # Physical properties
    atomic_mass = Column("atomicMass", Float, nullable=True)
    standard_state = Column("standardState", String(16), nullable=True, index=True)
    density_value = Column("densityValue", Float, nullable=True)
    density_conditions = Column("densityConditions", String(128), nullable=True)
    melting_point_value = Column("meltingPointValue", Float, nullable=True)
    melting_point_unit = Column("meltingPointUnit", String(16), nullable=True)
    boiling_point_value = Column("boilingPointValue", Float, nullable=True)
    boiling_point_unit = Column("boilingPointUnit", String(16), nullable=True)
    ionization_energy_value = Column("ionizationEnergyValue", Float, nullable=True)
    ionization_energy_unit = Column("ionizationEnergyUnit", String(16), nullable=True)
    electronegativity = Column("electronegativity", Float, nullable=True)
    electron_configuration = Column("electronConfiguration", String(128), nullable=True)

    # Discovery and description
    discovered_by = Column("discoveredBy", String(255), nullable=True)
    discovery_year = Column("discoveryYear", Integer, nullable=True)
    summary = Column("summary", Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Element {self.atomic_number} {self.symbol}>"


class OxidationState(Base):
    """Known oxidation states. Duplicates are allowed."""
    __tablename__ = "oxidation_states"

    id = Column(Integer, primary_key=True, autoincrement=True)
    atomic_number = Column("atomicNumber", Integer, ForeignKey("elements.atomicNumber"), nullable=False, index=True)
    oxidation_state = Column("oxidationState", Integer, nullable=False)


class ElementUse(Base):
    """Free-text uses of an element"""
    __tablename__ = "element_uses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    atomic_number = Column("atomicNumber", Integer, ForeignKey("elements.atomicNumber"), nullable=False, index=True)
    use_description = Column("useDescription", Text, nullable=False)


class ElementSource(Base):
    """Free-text natural or industrial sources of an element"""
    __tablename__ = "element_sources"

    id = Column(Integer, primary_key=True, autoincrement=True)
    atomic_number = Column("atomicNumber", Integer, ForeignKey("elements.atomicNumber"), nullable=False, index=True)
    source_description = Column("sourceDescription", Text, nullable=False)


class ElementAttribution(Base):
    """Data source credits for an element document. Written by the import, not served."""
    __tablename__ = "element_attributions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    atomic_number = Column("atomicNumber", Integer, ForeignKey("elements.atomicNumber"), nullable=False, index=True)
    attribution_text = Column("attributionText", Text, nullable=False)
