"""
Transform element source documents into flat ElementCreate records
"""

from typing import Dict, Any, Optional, List, Union
from pydantic import ValidationError as PydanticValidationError
from core.exceptions import DocumentValidationError
from schemas.normalized import ElementCreate
import logging
import re

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def category_slug(category: Optional[str]) -> Optional[str]:
    """'Alkali Metal' -> 'alkali-metal'"""
    if not category:
        return None
    return _WHITESPACE.sub("-", category.strip()).lower()


class ElementNormalizer:
    """
    Flatten nested measurements and normalize free text.

    Handles:
    - density{value, conditions} and the three {value, unit} measurements
    - category slugs
    - null oxidation states and empty uses, sources and attribution entries
    """

    def normalize(self, document: Dict[str, Any], file_path: str = "<memory>") -> ElementCreate:
        density = self._measurement(document, "density")
        melting_point = self._measurement(document, "meltingPoint")
        boiling_point = self._measurement(document, "boilingPoint")
        ionization_energy = self._measurement(document, "ionizationEnergy")

        try:
            return ElementCreate(
                atomic_number=document.get("atomicNumber"),
                symbol=document.get("symbol"),
                name=document.get("name"),
                category=category_slug(document.get("category")),
                group_number=self._parse_int(document.get("groupNumber")),
                period=document.get("period"),
                block=document.get("block") or None,
                atomic_mass=self._parse_float(document.get("atomicMass")),
                standard_state=document.get("standardState") or None,
                density_value=self._parse_float(density.get("value")),
                density_conditions=density.get("conditions"),
                melting_point_value=self._parse_float(melting_point.get("value")),
                melting_point_unit=melting_point.get("unit"),
                boiling_point_value=self._parse_float(boiling_point.get("value")),
                boiling_point_unit=boiling_point.get("unit"),
                ionization_energy_value=self._parse_float(ionization_energy.get("value")),
                ionization_energy_unit=ionization_energy.get("unit"),
                electronegativity=self._parse_float(document.get("electronegativity")),
                electron_configuration=document.get("electronConfiguration"),
                discovered_by=document.get("discoveredBy"),
                discovery_year=self._parse_int(document.get("discoveryYear")),
                summary=document.get("summary"),
                oxidation_states=[s for s in document.get("oxidationStates") or [] if s is not None],
                uses=self._text_items(document.get("uses")),
                sources=self._text_items(document.get("sources")),
                attributions=self._text_items(document.get("attribution")),
            )
        except PydanticValidationError as e:
            raise DocumentValidationError(
                "Element document could not be normalized",
                context={
                    "file_path": file_path,
                    "errors": [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
                },
                original_exception=e
            )

    @staticmethod
    def _measurement(document: Dict[str, Any], key: str) -> Dict[str, Any]:
        value = document.get(key)
        return value if isinstance(value, dict) else {}

    @staticmethod
    def _text_items(values: Any) -> List[str]:
        if not isinstance(values, list):
            return []
        return [str(v).strip() for v in values if v is not None and str(v).strip()]

    @staticmethod
    def _parse_float(value: Any) -> Optional[float]:
        """Safely parse float value"""
        if value is None or value == "":
            return None
        try:
            return float(value)
        except (ValueError, TypeError):
            return None

    @staticmethod
    def _parse_int(value: Any) -> Optional[Union[int, float]]:
        """
        Safely parse int value.

        Whole numbers ("10.0") become ints. Fractional values come back as
        floats so that ElementCreate rejects the document instead of
        silently truncating them.
        """
        if value is None or value == "":
            return None
        try:
            number = float(value)
        except (ValueError, TypeError):
            return None
        return int(number) if number.is_integer() else number
