"""
Naming convention error hierarchy for blazenaming.

Every rule enforced by a naming strategy has its own error class. Instances
carry the offending ``value`` and a ``suggestion`` the schema author can
apply directly.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from .utils.naming import camel_case, pascal_case, pluralize, singularize, snake_case


class NamingConfigurationError(ValueError):
    """Raised when a naming strategy cannot be resolved."""


class NamingConventionError(ValueError):
    """
    Base error for identifiers that break the naming convention.
    """

    rule: ClassVar[str] = "naming_convention"
    subject: ClassVar[str] = "Name"
    requirement: ClassVar[str] = "conventional"

    def __init__(self, value: str, suggestion: Optional[str] = None) -> None:
        self.value = value
        self.suggestion = self.suggest(value) if suggestion is None else suggestion
        super().__init__(self._format_message())

    @staticmethod
    def suggest(value: str) -> str:
        return value

    def _format_message(self) -> str:
        return (
            f"{self.subject} must be {self.requirement}; "
            f"change '{self.value}' to '{self.suggestion}'."
        )


class TableNameMustBePluralError(NamingConventionError):
    rule = "table_name_plural"
    subject = "Table name"
    requirement = "plural"

    @staticmethod
    def suggest(value: str) -> str:
        return pluralize(value)


class TableNameMustBeSnakeCaseError(NamingConventionError):
    rule = "table_name_snake_case"
    subject = "Table name"
    requirement = "in snake case"

    @staticmethod
    def suggest(value: str) -> str:
        return snake_case(value)


class TableClassNameMustBeSingularError(NamingConventionError):
    rule = "table_class_name_singular"
    subject = "Table class name"
    requirement = "singular"

    @staticmethod
    def suggest(value: str) -> str:
        return singularize(value)


class TableClassNameMustBePascalCaseError(NamingConventionError):
    rule = "table_class_name_pascal_case"
    subject = "Table class name"
    requirement = "in pascal case"

    @staticmethod
    def suggest(value: str) -> str:
        return pascal_case(value)


class ColumnNameMustBeSnakeCaseError(NamingConventionError):
    rule = "column_name_snake_case"
    subject = "Column name"
    requirement = "in snake case"

    @staticmethod
    def suggest(value: str) -> str:
        return snake_case(value)


class PropertyNameMustBeCamelCaseError(NamingConventionError):
    rule = "property_name_camel_case"
    subject = "Property name"
    requirement = "in camel case"

    @staticmethod
    def suggest(value: str) -> str:
        return camel_case(value)


class ManyToManyPropertyMustBePluralError(NamingConventionError):
    rule = "many_to_many_property_plural"
    subject = "Many-to-many property name"
    requirement = "plural"

    @staticmethod
    def suggest(value: str) -> str:
        return pluralize(value)


__all__ = [
    "ColumnNameMustBeSnakeCaseError",
    "ManyToManyPropertyMustBePluralError",
    "NamingConfigurationError",
    "NamingConventionError",
    "PropertyNameMustBeCamelCaseError",
    "TableClassNameMustBePascalCaseError",
    "TableClassNameMustBeSingularError",
    "TableNameMustBePluralError",
    "TableNameMustBeSnakeCaseError",
]
