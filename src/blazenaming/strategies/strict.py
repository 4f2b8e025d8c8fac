"""
Naming strategy that also enforces entity class and property casing.
"""

from __future__ import annotations

from ..errors import PropertyNameMustBeCamelCaseError, TableClassNameMustBePascalCaseError
from ..utils.naming import camel_case, pascal_case
from .lenient import LenientNamingStrategy


class StrictNamingStrategy(LenientNamingStrategy):
    """
    Lenient rules plus ``PascalCase`` entity classes and ``camelCase`` properties.
    """

    name = "strict"

    def _check_class_name(self, class_name: str) -> None:
        if class_name != pascal_case(class_name):
            raise TableClassNameMustBePascalCaseError(class_name)

    def _check_property_name(self, property_name: str) -> None:
        if property_name != camel_case(property_name):
            raise PropertyNameMustBeCamelCaseError(property_name)
