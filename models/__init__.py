"""
SQLAlchemy ORM models for the element store.

Models:
    base: Declarative base, atomic number bounds and StandardState enum
    element: Element plus the child tables keyed by atomic number

Database Schema:
    elements            one row per element (atomicNumber primary key)
    oxidation_states    (atomicNumber, oxidationState), duplicates allowed
    element_uses        (atomicNumber, useDescription)
    element_sources     (atomicNumber, sourceDescription)
    element_attributions (atomicNumber, attributionText), import only

Usage:
    from models.element import Element, OxidationState, ElementUse, ElementSource, ElementAttribution
    from models.base import Base, StandardState
"""

__all__ = [
    "Base",
    "StandardState",
    "MIN_ATOMIC_NUMBER",
    "MAX_ATOMIC_NUMBER",
    "Element",
    "OxidationState",
    "ElementUse",
    "ElementSource",
    "ElementAttribution",
]
