"""
Convention-enforcing naming strategy that accepts any source casing.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..errors import (
    ColumnNameMustBeSnakeCaseError,
    ManyToManyPropertyMustBePluralError,
    TableClassNameMustBeSingularError,
    TableNameMustBePluralError,
    TableNameMustBeSnakeCaseError,
)
from ..utils import get_logger
from ..utils.naming import is_singular, pluralize, singularize, snake_case
from .base import DefaultNamingStrategy

logger = get_logger("strategies")


class LenientNamingStrategy(DefaultNamingStrategy):
    """
    Maps singular entity classes to plural ``snake_case`` tables.

    Custom table and column names are validated rather than rewritten, so a
    schema author always sees the physical name they asked for or an error
    explaining how to fix it. Class and property casing is not checked; see
    :class:`~blazenaming.strategies.strict.StrictNamingStrategy` for that.
    """

    name = "lenient"

    def table_name(self, class_name: str, custom_name: Optional[str]) -> str:
        if custom_name:
            if is_singular(custom_name):
                raise TableNameMustBePluralError(custom_name)
            if custom_name != snake_case(custom_name):
                raise TableNameMustBeSnakeCaseError(custom_name)
            return custom_name

        if not is_singular(class_name):
            raise TableClassNameMustBeSingularError(class_name)
        self._check_class_name(class_name)

        table = pluralize(snake_case(class_name))
        logger.debug("Derived table name %s for class %s", table, class_name)
        return table

    def column_name(
        self,
        property_name: str,
        custom_name: Optional[str],
        embedded_prefixes: Sequence[str],
    ) -> str:
        if custom_name and custom_name != snake_case(custom_name):
            raise ColumnNameMustBeSnakeCaseError(custom_name)
        self._check_property_name(property_name)

        prefix = snake_case("_".join([*embedded_prefixes, ""]))
        column = prefix + (custom_name or snake_case(property_name))
        logger.debug("Derived column name %s for property %s", column, property_name)
        return column

    def relation_name(self, property_name: str) -> str:
        return snake_case(property_name)

    def join_column_name(self, relation_name: str, referenced_column_name: str) -> str:
        return snake_case(f"{relation_name}_{referenced_column_name}")

    def join_table_name(
        self,
        first_table_name: str,
        second_table_name: str,
        first_property_name: str,
        second_property_name: str,
    ) -> str:
        if is_singular(first_property_name):
            raise ManyToManyPropertyMustBePluralError(first_property_name)

        property_segment = snake_case(first_property_name.replace(".", "_"))
        if snake_case(second_table_name) != property_segment:
            table = snake_case(f"{first_table_name}_{property_segment}_{second_table_name}")
        else:
            table = snake_case(f"{first_table_name}_{second_table_name}")
        logger.debug(
            "Derived join table %s for %s.%s", table, first_table_name, first_property_name
        )
        return table

    def join_table_column_name(
        self, table_name: str, property_name: str, column_name: Optional[str] = None
    ) -> str:
        return snake_case(f"{singularize(table_name)}_{column_name or property_name}")

    def class_table_inheritance_parent_column_name(
        self, parent_table_name: str, parent_table_id_property_name: str
    ) -> str:
        return snake_case(f"{parent_table_name}_{parent_table_id_property_name}")

    def eager_join_relation_alias(self, alias: str, property_path: str) -> str:
        # Only the first path separator is rewritten.
        return f"{alias}__{property_path.replace('.', '_', 1)}"

    def _check_class_name(self, class_name: str) -> None:
        """Hook for additional entity class name rules."""

    def _check_property_name(self, property_name: str) -> None:
        """Hook for additional property name rules."""
