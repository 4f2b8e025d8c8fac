"""
Naming strategy interfaces consumed by the ORM schema layer.
"""

from __future__ import annotations

import hashlib
from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class NamingStrategy(Protocol):
    """
    Strategy interface the host calls while building schema metadata.
    """

    def table_name(self, class_name: str, custom_name: Optional[str]) -> str: ...

    def column_name(
        self,
        property_name: str,
        custom_name: Optional[str],
        embedded_prefixes: Sequence[str],
    ) -> str: ...

    def relation_name(self, property_name: str) -> str: ...

    def join_column_name(self, relation_name: str, referenced_column_name: str) -> str: ...

    def join_table_name(
        self,
        first_table_name: str,
        second_table_name: str,
        first_property_name: str,
        second_property_name: str,
    ) -> str: ...

    def join_table_column_name(
        self, table_name: str, property_name: str, column_name: Optional[str] = None
    ) -> str: ...

    def class_table_inheritance_parent_column_name(
        self, parent_table_name: str, parent_table_id_property_name: str
    ) -> str: ...

    def eager_join_relation_alias(self, alias: str, property_path: str) -> str: ...

    def join_table_inverse_column_name(
        self, table_name: str, property_name: str, column_name: Optional[str] = None
    ) -> str: ...

    def join_table_column_duplication_prefix(self, column_name: str, index: int) -> str: ...

    def closure_junction_table_name(self, original_closure_table_name: str) -> str: ...

    def prefix_table_name(self, prefix: str, table_name: str) -> str: ...

    def primary_key_name(self, table_name: str, column_names: Sequence[str]) -> str: ...

    def unique_constraint_name(self, table_name: str, column_names: Sequence[str]) -> str: ...

    def relation_constraint_name(
        self, table_name: str, column_names: Sequence[str], where: Optional[str] = None
    ) -> str: ...

    def default_constraint_name(self, table_name: str, column_name: str) -> str: ...

    def foreign_key_name(
        self,
        table_name: str,
        column_names: Sequence[str],
        referenced_table_path: Optional[str] = None,
        referenced_column_names: Optional[Sequence[str]] = None,
    ) -> str: ...

    def index_name(
        self, table_name: str, column_names: Sequence[str], where: Optional[str] = None
    ) -> str: ...

    def check_constraint_name(
        self, table_name: str, expression: str, is_enum: bool = False
    ) -> str: ...

    def exclusion_constraint_name(self, table_name: str, expression: str) -> str: ...


def _sha1(key: str) -> str:
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


class DefaultNamingStrategy:
    """
    Names for schema objects that carry no convention rules.

    Keys, indexes and constraints get short hashed names so they stay within
    identifier length limits on every backend and do not depend on the
    order columns were declared in.
    """

    def get_table_name(self, table_name: str) -> str:
        return table_name.split(".")[-1]

    def primary_key_name(self, table_name: str, column_names: Sequence[str]) -> str:
        return "PK_" + _sha1(self._columns_key(table_name, column_names))[:27]

    def unique_constraint_name(self, table_name: str, column_names: Sequence[str]) -> str:
        return "UQ_" + _sha1(self._columns_key(table_name, column_names))[:27]

    def relation_constraint_name(
        self, table_name: str, column_names: Sequence[str], where: Optional[str] = None
    ) -> str:
        key = self._columns_key(table_name, column_names, where)
        return "REL_" + _sha1(key)[:26]

    def default_constraint_name(self, table_name: str, column_name: str) -> str:
        key = f"{self.get_table_name(table_name)}_{column_name}"
        return "DF_" + _sha1(key)[:27]

    def foreign_key_name(
        self,
        table_name: str,
        column_names: Sequence[str],
        referenced_table_path: Optional[str] = None,
        referenced_column_names: Optional[Sequence[str]] = None,
    ) -> str:
        return "FK_" + _sha1(self._columns_key(table_name, column_names))[:27]

    def index_name(
        self, table_name: str, column_names: Sequence[str], where: Optional[str] = None
    ) -> str:
        key = self._columns_key(table_name, column_names, where)
        return "IDX_" + _sha1(key)[:26]

    def check_constraint_name(self, table_name: str, expression: str, is_enum: bool = False) -> str:
        key = f"{self.get_table_name(table_name)}_{expression}"
        name = "CHK_" + _sha1(key)[:26]
        return f"{name}_ENUM" if is_enum else name

    def exclusion_constraint_name(self, table_name: str, expression: str) -> str:
        key = f"{self.get_table_name(table_name)}_{expression}"
        return "XCL_" + _sha1(key)[:26]

    def closure_junction_table_name(self, original_closure_table_name: str) -> str:
        return original_closure_table_name + "_closure"

    def join_table_column_duplication_prefix(self, column_name: str, index: int) -> str:
        return f"{column_name}_{index}"

    def join_table_inverse_column_name(
        self, table_name: str, property_name: str, column_name: Optional[str] = None
    ) -> str:
        return self.join_table_column_name(table_name, property_name, column_name)

    def join_table_column_name(
        self, table_name: str, property_name: str, column_name: Optional[str] = None
    ) -> str:
        return f"{table_name}_{column_name or property_name}"

    def prefix_table_name(self, prefix: str, table_name: str) -> str:
        return prefix + table_name

    def _columns_key(
        self, table_name: str, column_names: Sequence[str], where: Optional[str] = None
    ) -> str:
        key = f"{self.get_table_name(table_name)}_{'_'.join(sorted(column_names))}"
        if where:
            key += f"_{where}"
        return key
